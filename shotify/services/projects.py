"""
Project Store

User-owned projects behind the access gate. Every entry point takes the
caller id; list and delete scope by owner inside the query, get and update
fetch once and let the gate compare owners.
"""

import logging
from dataclasses import dataclass
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from shotify.database import utcnow
from shotify.errors import InvalidArgument, ProjectNotFound, TemplateNotFound, parse_id
from shotify.models import Project
from shotify.schemas.configuration import Configuration
from shotify.services.access import AccessGate
from shotify.services.storage import StoreService, storage_operation
from shotify.services.templates import TemplateCatalog

logger = logging.getLogger(__name__)


@dataclass
class ProjectPatch:
    """
    Independently optional project fields; None means "leave as stored".

    ``project_config`` replaces the whole stored configuration, there is no
    merge inside it.
    """
    name: str | None = None
    thumbnail: str | None = None
    project_config: Configuration | None = None

    def changes(self) -> dict[str, Any]:
        values: dict[str, Any] = {}
        if self.name is not None:
            if not self.name.strip():
                raise InvalidArgument("Project name cannot be empty")
            values["name"] = self.name
        if self.thumbnail is not None:
            values["thumbnail"] = self.thumbnail
        if self.project_config is not None:
            values["project_config"] = self.project_config.to_document()
        return values


class ProjectStore(StoreService):
    def __init__(
        self,
        db: AsyncSession,
        gate: AccessGate | None = None,
        catalog: TemplateCatalog | None = None,
    ):
        super().__init__(db)
        self.gate = gate or AccessGate()
        self.catalog = catalog or TemplateCatalog(db)

    @storage_operation("create project")
    async def create(self, user_id: str, template_id: str, name: str) -> Project:
        """
        Clone an active template into a new project owned by the caller.

        Raises:
            InvalidArgument: Malformed template id or empty name
            TemplateNotFound: Template missing or soft-deleted
        """
        user_id = self.gate.require_identity(user_id)
        if not name or not name.strip():
            raise InvalidArgument("Project name is required")

        template = await self.catalog.get_by_id(template_id)
        if template is None:
            raise TemplateNotFound(template_id)

        # Structural copy: the project owns its configuration from here on
        config = template.configuration.clone()

        now = utcnow()
        project = Project(
            user_id=user_id,
            template_id=template.id,
            name=name,
            thumbnail=template.thumbnail,
            project_config=config.to_document(),
            created_at=now,
            updated_at=now,
        )
        self.db.add(project)
        await self.db.commit()

        logger.info(f"Created project {project.id} for user {user_id} from template {template.id}")
        return project

    @storage_operation("list projects")
    async def list(self, user_id: str) -> list[Project]:
        """Projects owned by the caller, most recently updated first."""
        user_id = self.gate.require_identity(user_id)
        result = await self.db.execute(
            select(Project)
            .where(Project.user_id == user_id)
            .order_by(Project.updated_at.desc())
        )
        return self.gate.filter_owned(result.scalars().all(), user_id)

    @storage_operation("get project")
    async def get(self, user_id: str, project_id: str) -> Project:
        """
        Fetch a project the caller owns.

        Raises:
            InvalidArgument: Malformed project id
            ProjectNotFound: Missing, or owned by another user
        """
        user_id = self.gate.require_identity(user_id)
        project_id = parse_id(project_id, "project")
        project = await self.db.get(Project, project_id, populate_existing=True)
        return self.gate.check(project, user_id, project_id)

    @storage_operation("update project")
    async def update(self, user_id: str, project_id: str, patch: ProjectPatch) -> Project:
        """
        Apply a partial update: present fields replace, absent fields stay.

        The write is one UPDATE filtered by id and owner, so every patched
        field lands or none does.

        Raises:
            InvalidArgument: Malformed project id or empty name
            ProjectNotFound: Missing, or owned by another user
        """
        user_id = self.gate.require_identity(user_id)
        project_id = parse_id(project_id, "project")
        values = patch.changes()

        project = await self.db.get(Project, project_id)
        self.gate.check(project, user_id, project_id)

        values["updated_at"] = utcnow()
        result = await self.db.execute(
            update(Project)
            .where(Project.id == project_id, Project.user_id == user_id)
            .values(**values)
        )
        if result.rowcount == 0:
            # Deleted between the fetch and the write
            raise ProjectNotFound(project_id)
        await self.db.commit()
        await self.db.refresh(project)

        logger.info(f"Updated project {project_id} fields {sorted(values)}")
        return project

    @storage_operation("delete project")
    async def delete(self, user_id: str, project_id: str) -> None:
        """
        Permanently delete a project scoped by (id, owner).

        Raises:
            ProjectNotFound: Nothing matched; never existed and belongs to
                someone else look the same
        """
        user_id = self.gate.require_identity(user_id)
        project_id = parse_id(project_id, "project")
        result = await self.db.execute(
            delete(Project).where(Project.id == project_id, Project.user_id == user_id)
        )
        if result.rowcount == 0:
            raise ProjectNotFound(project_id)
        await self.db.commit()

        logger.info(f"Deleted project {project_id} for user {user_id}")
