"""
Request-scoped dependencies: caller identity, admin gate and services.
"""

import secrets

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from shotify.config import Settings, get_settings
from shotify.database import get_db
from shotify.services.access import AccessGate, OwnershipPolicy
from shotify.services.projects import ProjectStore
from shotify.services.templates import TemplateCatalog


async def get_current_user_id(
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
) -> str:
    """
    Caller identity as resolved by the upstream identity layer.

    The value is trusted as is; only its absence is rejected.
    """
    if x_user_id is None or not x_user_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User ID not found",
        )
    return x_user_id.strip()


async def require_admin(
    x_admin_key: str | None = Header(default=None, alias="X-Admin-Key"),
    settings: Settings = Depends(get_settings),
) -> None:
    """Gate for template management actions, separate from project ownership."""
    if not settings.admin_enabled:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Template administration is disabled",
        )
    if x_admin_key is None or not secrets.compare_digest(x_admin_key, settings.admin_api_key):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid admin key",
        )


def get_access_gate(settings: Settings = Depends(get_settings)) -> AccessGate:
    return AccessGate(OwnershipPolicy(settings.ownership_policy))


def get_template_catalog(db: AsyncSession = Depends(get_db)) -> TemplateCatalog:
    return TemplateCatalog(db)


def get_project_store(
    db: AsyncSession = Depends(get_db),
    gate: AccessGate = Depends(get_access_gate),
) -> ProjectStore:
    return ProjectStore(db, gate=gate)
