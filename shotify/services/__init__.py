"""
Services Package - Template catalog, project store and access gate
"""

from shotify.services.access import AccessGate, OwnershipPolicy
from shotify.services.projects import ProjectPatch, ProjectStore
from shotify.services.seed import DEFAULT_TEMPLATE_COUNT, default_templates
from shotify.services.templates import TemplateCatalog

__all__ = [
    "AccessGate",
    "OwnershipPolicy",
    "ProjectPatch",
    "ProjectStore",
    "DEFAULT_TEMPLATE_COUNT",
    "default_templates",
    "TemplateCatalog",
]
