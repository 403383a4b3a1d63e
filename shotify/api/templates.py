"""
Templates API - Read-only template catalog for users
"""

from datetime import datetime

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from shotify.api.dependencies import get_template_catalog
from shotify.errors import TemplateNotFound
from shotify.models import Template
from shotify.schemas.configuration import Configuration, Platform
from shotify.services.templates import TemplateCatalog

router = APIRouter()


# =============================================================================
# Request/Response Models
# =============================================================================

class TemplateResponse(BaseModel):
    """Template response."""
    id: str
    name: str
    platform: Platform
    category: str
    thumbnail: str
    json_config: Configuration
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, template: Template) -> "TemplateResponse":
        return cls(
            id=template.id,
            name=template.name,
            platform=template.platform,
            category=template.category,
            thumbnail=template.thumbnail,
            json_config=template.configuration,
            is_active=template.is_active,
            created_at=template.created_at,
            updated_at=template.updated_at,
        )


class TemplateListResponse(BaseModel):
    """List of templates response."""
    templates: list[TemplateResponse]
    total: int


# =============================================================================
# Routes
# =============================================================================

@router.get("", response_model=TemplateListResponse)
async def list_templates(
    platform: str = Query(default="", description="ios, android, both, or all"),
    catalog: TemplateCatalog = Depends(get_template_catalog),
):
    """List active templates, newest first."""
    templates = await catalog.list(platform)
    return TemplateListResponse(
        templates=[TemplateResponse.from_record(t) for t in templates],
        total=len(templates),
    )


@router.get("/{template_id}", response_model=TemplateResponse)
async def get_template(
    template_id: str,
    catalog: TemplateCatalog = Depends(get_template_catalog),
):
    """Get an active template."""
    template = await catalog.get_by_id(template_id)

    if template is None:
        raise TemplateNotFound(template_id)

    return TemplateResponse.from_record(template)
