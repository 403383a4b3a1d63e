"""
Projects API - User-owned screenshot projects
"""

from datetime import datetime

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from shotify.api.dependencies import get_current_user_id, get_project_store
from shotify.api.templates import TemplateResponse
from shotify.models import Project
from shotify.schemas.configuration import Configuration
from shotify.services.projects import ProjectPatch, ProjectStore

router = APIRouter()


# =============================================================================
# Request/Response Models
# =============================================================================

class ProjectCreate(BaseModel):
    """Request to create a project from a template."""
    template_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=100)


class ProjectUpdate(BaseModel):
    """Partial update; omitted fields keep their stored values."""
    name: str | None = Field(default=None, min_length=1, max_length=100)
    thumbnail: str | None = None
    project_config: Configuration | None = None


class ProjectResponse(BaseModel):
    """Project response."""
    id: str
    user_id: str
    template_id: str
    name: str
    thumbnail: str
    project_config: Configuration
    template: TemplateResponse | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, project: Project, template: TemplateResponse | None = None) -> "ProjectResponse":
        return cls(
            id=project.id,
            user_id=project.user_id,
            template_id=project.template_id,
            name=project.name,
            thumbnail=project.thumbnail,
            project_config=project.configuration,
            template=template,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )


class ProjectListResponse(BaseModel):
    """List of projects response."""
    projects: list[ProjectResponse]
    total: int


# =============================================================================
# Routes
# =============================================================================

@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    request: ProjectCreate,
    user_id: str = Depends(get_current_user_id),
    store: ProjectStore = Depends(get_project_store),
):
    """Create a project by cloning a template."""
    project = await store.create(user_id, request.template_id, request.name)
    return ProjectResponse.from_record(project)


@router.get("", response_model=ProjectListResponse)
async def list_projects(
    user_id: str = Depends(get_current_user_id),
    store: ProjectStore = Depends(get_project_store),
):
    """List the caller's projects."""
    projects = await store.list(user_id)
    return ProjectListResponse(
        projects=[ProjectResponse.from_record(p) for p in projects],
        total=len(projects),
    )


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: str,
    include_template: bool = Query(default=False),
    user_id: str = Depends(get_current_user_id),
    store: ProjectStore = Depends(get_project_store),
):
    """Get one of the caller's projects, optionally with its source template."""
    project = await store.get(user_id, project_id)

    template = None
    if include_template:
        # Soft-deleted templates are simply not embedded
        record = await store.catalog.get_by_id(project.template_id)
        if record is not None:
            template = TemplateResponse.from_record(record)

    return ProjectResponse.from_record(project, template)


@router.put("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: str,
    request: ProjectUpdate,
    user_id: str = Depends(get_current_user_id),
    store: ProjectStore = Depends(get_project_store),
):
    """Update name, thumbnail and/or the whole project configuration."""
    patch = ProjectPatch(
        name=request.name,
        thumbnail=request.thumbnail,
        project_config=request.project_config,
    )
    project = await store.update(user_id, project_id, patch)
    return ProjectResponse.from_record(project)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: str,
    user_id: str = Depends(get_current_user_id),
    store: ProjectStore = Depends(get_project_store),
):
    """Permanently delete one of the caller's projects."""
    await store.delete(user_id, project_id)
