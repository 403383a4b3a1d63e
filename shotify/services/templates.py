"""
Template Catalog

Admin/seed-managed library of starting layouts. Users only read it;
templates are soft-deleted and never resurface once inactive.
"""

import logging

from pydantic import ValidationError
from sqlalchemy import delete, func, select, update

from shotify.database import utcnow
from shotify.errors import InvalidArgument, TemplateNotFound, parse_id
from shotify.models import Template
from shotify.schemas.configuration import Configuration, Platform
from shotify.services.seed import default_templates
from shotify.services.storage import StoreService, storage_operation

logger = logging.getLogger(__name__)

# Platform filter values that disable filtering
ALL_PLATFORMS = ("", "all")


class TemplateCatalog(StoreService):
    """Template persistence scoped to active documents."""

    @storage_operation("create template")
    async def create(self, template: Template) -> Template:
        """
        Persist a new template; the generated id is set on the passed record.

        Raises:
            InvalidArgument: Unknown platform or malformed configuration
        """
        try:
            template.platform = Platform(template.platform).value
        except ValueError:
            raise InvalidArgument(f"Unknown platform: {template.platform!r}") from None
        try:
            template.json_config = Configuration.from_document(template.json_config).to_document()
        except ValidationError as exc:
            raise InvalidArgument(f"Invalid template configuration: {exc.error_count()} errors") from None

        now = utcnow()
        template.created_at = now
        template.updated_at = now
        if template.is_active is None:
            template.is_active = True

        self.db.add(template)
        await self.db.commit()

        logger.info(f"Created template {template.id} ({template.name})")
        return template

    @storage_operation("list templates")
    async def list(self, platform: str | None = "") -> list[Template]:
        """
        List active templates, newest first.

        Args:
            platform: "" or "all" for every template; otherwise templates
                for that platform plus those targeting both
        """
        query = select(Template).where(Template.is_active.is_(True))

        platform = (platform or "").strip().lower()
        if platform not in ALL_PLATFORMS:
            query = query.where(Template.platform.in_([platform, Platform.BOTH.value]))

        result = await self.db.execute(query.order_by(Template.created_at.desc()))
        return list(result.scalars().all())

    @storage_operation("get template")
    async def get_by_id(self, template_id: str) -> Template | None:
        """Return the active template, or None when missing or soft-deleted."""
        template_id = parse_id(template_id, "template")
        result = await self.db.execute(
            select(Template).where(
                Template.id == template_id,
                Template.is_active.is_(True),
            )
        )
        return result.scalar_one_or_none()

    @storage_operation("update template")
    async def update(
        self,
        template_id: str,
        *,
        name: str,
        platform: Platform | str,
        category: str,
        thumbnail: str,
        json_config: Configuration,
    ) -> Template:
        """
        Replace a template's mutable fields in a single statement.

        ``is_active`` is left alone, so updating a soft-deleted template
        does not bring it back.

        Raises:
            TemplateNotFound: No template row has this id
        """
        template_id = parse_id(template_id, "template")
        result = await self.db.execute(
            update(Template)
            .where(Template.id == template_id)
            .values(
                name=name,
                platform=Platform(platform).value,
                category=category,
                thumbnail=thumbnail,
                json_config=json_config.to_document(),
                updated_at=utcnow(),
            )
        )
        if result.rowcount == 0:
            raise TemplateNotFound(template_id)
        await self.db.commit()

        template = await self.db.get(Template, template_id, populate_existing=True)
        logger.info(f"Updated template {template_id}")
        return template

    @storage_operation("delete template")
    async def delete(self, template_id: str) -> None:
        """Soft delete. Repeating it, or naming an unknown id, is not an error."""
        template_id = parse_id(template_id, "template")
        result = await self.db.execute(
            update(Template)
            .where(Template.id == template_id)
            .values(is_active=False, updated_at=utcnow())
        )
        await self.db.commit()
        logger.info(f"Soft-deleted template {template_id} (matched {result.rowcount})")

    @storage_operation("count templates")
    async def count(self) -> int:
        """Count every template row, active or not."""
        return await self.db.scalar(select(func.count()).select_from(Template))

    @storage_operation("seed templates")
    async def seed(self, force: bool = False) -> int:
        """
        Insert the canonical default templates.

        Without ``force`` this is a no-op as soon as any template row exists.
        With ``force`` every existing row is purged first, inside the same
        transaction as the inserts.

        Returns:
            Number of templates inserted
        """
        if not force:
            existing = await self.db.scalar(select(func.count()).select_from(Template))
            if existing > 0:
                logger.info(f"Template seed skipped, {existing} templates present")
                return 0
        else:
            purged = await self.db.execute(delete(Template))
            logger.info(f"Forced seed purged {purged.rowcount} templates")

        now = utcnow()
        records = [
            Template(
                name=seed.name,
                platform=seed.platform.value,
                category=seed.category,
                thumbnail=seed.thumbnail,
                json_config=seed.json_config,
                is_active=True,
                created_at=now,
                updated_at=now,
            )
            for seed in default_templates()
        ]
        self.db.add_all(records)
        await self.db.commit()

        logger.info(f"Seeded {len(records)} default templates")
        return len(records)
