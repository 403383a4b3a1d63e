"""
Configuration Model
The canvas + layers (+ slides + exports) value shared by templates and projects.

Documents keep the camelCase keys the editor writes (``backgroundColor``,
``zIndex``, ``fontFamily``); attributes are snake_case on the Python side.
"""

from enum import Enum
from typing import Any, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_serializer,
    field_validator,
    model_serializer,
    model_validator,
)
from pydantic.alias_generators import to_camel


# =============================================================================
# Enums
# =============================================================================

class LayerType(str, Enum):
    """Visual element kinds."""
    TEXT = "text"
    IMAGE = "image"
    SHAPE = "shape"
    SCREENSHOT = "screenshot"


class Platform(str, Enum):
    """Store platforms a template targets."""
    IOS = "ios"
    ANDROID = "android"
    BOTH = "both"


# Keeps integers as integers so property bags round-trip unchanged
Number = Union[int, float]


class DocumentModel(BaseModel):
    """Base for every configuration document node."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


# =============================================================================
# Layer Properties
# =============================================================================

class LayerProperties(DocumentModel):
    """
    Open-schema property bag.

    Every typed field is optional and unknown keys are kept as extras.
    Only keys that were present on input are emitted again, so a bag
    round-trips without gaining defaults.

    Validation is strict and by camelCase key only: a value that would
    need coercion fails the variant, and a snake_case key stays an extra.
    """

    model_config = ConfigDict(strict=True, populate_by_name=False, extra="allow")

    # Placement hints shared by all variants
    position: str | None = None
    anchor_x: str | None = None
    anchor_y: str | None = None
    offset_x: Number | None = None
    offset_y: Number | None = None

    @model_serializer(mode="wrap")
    def _serialize_present_keys(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        fields = type(self).model_fields
        present = set(self.model_extra or {})
        for name in self.model_fields_set:
            present.add(name)
            field = fields.get(name)
            if field is not None and field.alias:
                present.add(field.alias)
        return {key: value for key, value in data.items() if key in present}


class TextProperties(LayerProperties):
    content: str | None = None
    font_family: str | None = None
    font_size: Number | None = None
    font_weight: str | None = None
    color: str | None = None
    align: str | None = None
    line_height: Number | None = None


class ImageProperties(LayerProperties):
    """Properties for ``image`` and ``screenshot`` layers."""
    src: str | None = None
    placeholder: str | None = None
    border_radius: Number | None = None
    shadow: bool | None = None
    shadow_blur: Number | None = None
    shadow_color: str | None = None
    shadow_offset_x: Number | None = None
    shadow_offset_y: Number | None = None
    scale: Number | None = None
    frame_border: bool | None = None
    frame_border_width: Number | None = None
    frame_border_color: str | None = None


class ShapeProperties(LayerProperties):
    fill: str | None = None
    stroke: str | None = None
    stroke_width: Number | None = None
    corner_radius: Number | None = None
    shape_type: str | None = None


class UnknownProperties(RootModel[Any]):
    """Raw property value that does not fit its layer's typed variant."""
    root: Any = None


LayerPropertiesUnion = Union[TextProperties, ImageProperties, ShapeProperties, UnknownProperties]

PROPERTIES_BY_TYPE: dict[LayerType, type[LayerProperties]] = {
    LayerType.TEXT: TextProperties,
    LayerType.IMAGE: ImageProperties,
    LayerType.SCREENSHOT: ImageProperties,
    LayerType.SHAPE: ShapeProperties,
}


def resolve_properties(layer_type: LayerType | None, raw: Any) -> LayerPropertiesUnion:
    """Pick the typed property variant for a layer type, falling back to the raw value."""
    if isinstance(raw, (LayerProperties, UnknownProperties)):
        return raw
    model = PROPERTIES_BY_TYPE.get(layer_type) if layer_type is not None else None
    if model is None or not isinstance(raw, dict):
        return UnknownProperties(raw)
    try:
        return model.model_validate(raw)
    except ValidationError:
        return UnknownProperties(raw)


# =============================================================================
# Canvas, Layers and Assets
# =============================================================================

class Canvas(DocumentModel):
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    background_color: str = "#FFFFFF"


class Layer(DocumentModel):
    """One positioned visual element within a canvas."""

    id: str = Field(..., min_length=1)
    type: LayerType
    name: str = ""
    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0
    rotation: float = 0
    visible: bool = True
    locked: bool = False
    opacity: float = Field(default=1, ge=0, le=1)
    z_index: int = 0
    properties: LayerPropertiesUnion = Field(default_factory=UnknownProperties)

    @field_validator("properties", mode="wrap")
    @classmethod
    def _resolve_properties(
        cls,
        value: Any,
        handler: ValidatorFunctionWrapHandler,
        info: ValidationInfo,
    ) -> LayerPropertiesUnion:
        # "type" is validated first; it is missing here only when it failed
        return resolve_properties(info.data.get("type"), value)

    @field_serializer("properties")
    def _serialize_properties(self, properties: LayerPropertiesUnion, info: SerializationInfo) -> Any:
        # Each variant serializes itself; the union is never searched for a match
        return properties.model_dump(mode=info.mode, by_alias=bool(info.by_alias))

    @property
    def typed_properties(self) -> LayerProperties | None:
        """Typed property bag, or None when the raw value did not fit."""
        if isinstance(self.properties, LayerProperties):
            return self.properties
        return None


class ImageAsset(DocumentModel):
    id: str
    url: str
    name: str = ""


class ExportSize(DocumentModel):
    name: str
    platform: str
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)


def _ensure_unique_layer_ids(layers: list[Layer], scope: str) -> None:
    seen: set[str] = set()
    for layer in layers:
        if layer.id in seen:
            raise ValueError(f"Duplicate layer id {layer.id!r} in {scope}")
        seen.add(layer.id)


def _paint_order(layers: list[Layer]) -> list[Layer]:
    # sorted() is stable: equal zIndex keeps insertion order
    return sorted(layers, key=lambda layer: layer.z_index)


class Slide(DocumentModel):
    """One screen of a multi-slide project."""

    id: str
    canvas: Canvas
    layers: list[Layer] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_layer_ids(self) -> "Slide":
        _ensure_unique_layer_ids(self.layers, f"slide {self.id!r}")
        return self

    def paint_order(self) -> list[Layer]:
        return _paint_order(self.layers)


class DeviceConfig(DocumentModel):
    """Per-device slide overrides kept by the editor."""

    export_size: ExportSize
    slides: list[Slide] = Field(default_factory=list)
    is_modified: bool = False


# =============================================================================
# Configuration
# =============================================================================

LEGACY_SLIDE_ID = "slide-1"

OPTIONAL_SECTIONS = ("slides", "exports", "deviceConfigs")


class Configuration(DocumentModel):
    """
    Canvas + layers + images, with optional slides, exports and device configs.

    ``slides`` is the authority for multi-slide documents; the top-level
    ``canvas``/``layers`` pair is the single-slide fallback.
    """

    canvas: Canvas
    layers: list[Layer] = Field(default_factory=list)
    images: list[ImageAsset] = Field(default_factory=list)
    slides: list[Slide] | None = None
    exports: list[ExportSize] | None = None
    device_configs: dict[str, DeviceConfig] | None = None

    @model_validator(mode="after")
    def _check_layer_ids(self) -> "Configuration":
        _ensure_unique_layer_ids(self.layers, "configuration")
        return self

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Configuration":
        return cls.model_validate(document)

    def to_document(self) -> dict[str, Any]:
        """JSON-ready document with camelCase keys; unset optional sections are omitted."""
        document = self.model_dump(mode="json", by_alias=True)
        for key in OPTIONAL_SECTIONS:
            if document.get(key) is None:
                document.pop(key, None)
        return document

    def clone(self) -> "Configuration":
        """Structural copy sharing no lists, dicts or nested models with the original."""
        return self.model_copy(deep=True)

    def paint_order(self) -> list[Layer]:
        return _paint_order(self.layers)

    def effective_slides(self) -> list[Slide]:
        """Slides to render: ``slides`` when present, otherwise the legacy single slide."""
        if self.slides is not None:
            return list(self.slides)
        return [Slide(id=LEGACY_SLIDE_ID, canvas=self.canvas, layers=list(self.layers))]

    def find_layer(self, layer_id: str) -> Layer | None:
        for layer in self.layers:
            if layer.id == layer_id:
                return layer
        for slide in self.slides or []:
            for layer in slide.layers:
                if layer.id == layer_id:
                    return layer
        return None


# Templates and projects share one shape
TemplateConfig = Configuration
ProjectConfig = Configuration
