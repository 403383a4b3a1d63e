"""
Admin API - Template management and seeding
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from shotify.api.dependencies import get_template_catalog, require_admin
from shotify.api.templates import TemplateResponse
from shotify.models import Template
from shotify.schemas.configuration import Configuration, Platform
from shotify.services.templates import TemplateCatalog

logger = logging.getLogger(__name__)
router = APIRouter(dependencies=[Depends(require_admin)])


# =============================================================================
# Request/Response Models
# =============================================================================

class TemplateWrite(BaseModel):
    """Full template definition for create and update."""
    name: str = Field(..., min_length=1, max_length=100)
    platform: Platform
    category: str = Field(default="", max_length=50)
    thumbnail: str = ""
    json_config: Configuration


class SeedResponse(BaseModel):
    inserted: int
    total: int


# =============================================================================
# Routes
# =============================================================================

@router.post("", response_model=TemplateResponse, status_code=status.HTTP_201_CREATED)
async def create_template(
    request: TemplateWrite,
    catalog: TemplateCatalog = Depends(get_template_catalog),
):
    """Create a template."""
    template = Template(
        name=request.name,
        platform=request.platform.value,
        category=request.category,
        thumbnail=request.thumbnail,
        json_config=request.json_config.to_document(),
        is_active=True,
    )
    await catalog.create(template)
    logger.info(f"Admin created template {template.id}")
    return TemplateResponse.from_record(template)


@router.put("/{template_id}", response_model=TemplateResponse)
async def update_template(
    template_id: str,
    request: TemplateWrite,
    catalog: TemplateCatalog = Depends(get_template_catalog),
):
    """Replace a template's content. Soft-deleted templates stay deleted."""
    template = await catalog.update(
        template_id,
        name=request.name,
        platform=request.platform,
        category=request.category,
        thumbnail=request.thumbnail,
        json_config=request.json_config,
    )
    logger.info(f"Admin updated template {template_id}")
    return TemplateResponse.from_record(template)


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_template(
    template_id: str,
    catalog: TemplateCatalog = Depends(get_template_catalog),
):
    """Soft-delete a template."""
    await catalog.delete(template_id)
    logger.info(f"Admin soft-deleted template {template_id}")


@router.post("/seed", response_model=SeedResponse)
async def seed_templates(
    force: bool = Query(default=False),
    catalog: TemplateCatalog = Depends(get_template_catalog),
):
    """Insert the default templates; with force, replace every existing one."""
    inserted = await catalog.seed(force=force)
    logger.info(f"Admin seed inserted {inserted} templates (force={force})")
    return SeedResponse(inserted=inserted, total=await catalog.count())
