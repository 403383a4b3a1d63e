"""
Document Schemas
"""

from shotify.schemas.configuration import (
    Canvas,
    Configuration,
    DeviceConfig,
    ExportSize,
    ImageAsset,
    ImageProperties,
    Layer,
    LayerProperties,
    LayerType,
    Platform,
    ProjectConfig,
    ShapeProperties,
    Slide,
    TemplateConfig,
    TextProperties,
    UnknownProperties,
)

__all__ = [
    "Canvas",
    "Configuration",
    "DeviceConfig",
    "ExportSize",
    "ImageAsset",
    "ImageProperties",
    "Layer",
    "LayerProperties",
    "LayerType",
    "Platform",
    "ProjectConfig",
    "ShapeProperties",
    "Slide",
    "TemplateConfig",
    "TextProperties",
    "UnknownProperties",
]
