"""
Access Control Gate

Ownership policy wrapped around every project store entry point. The gate
holds no state; it only compares the caller identity with a project's owner.
List and delete are scoped inside the storage query by the store, get and
update fetch once and ask the gate.
"""

from enum import Enum
from typing import Iterable, TypeVar

from shotify.errors import Forbidden, ProjectNotFound, Unauthenticated
from shotify.models import Project

P = TypeVar("P", bound=Project)


class OwnershipPolicy(str, Enum):
    """How an ownership mismatch is reported to the caller."""
    HIDE_EXISTENCE = "hide_existence"
    DISTINGUISH_FORBIDDEN = "distinguish_forbidden"


class AccessGate:
    def __init__(self, policy: OwnershipPolicy = OwnershipPolicy.HIDE_EXISTENCE):
        self.policy = OwnershipPolicy(policy)

    def require_identity(self, user_id: str | None) -> str:
        """Return the trimmed caller id, or raise when there is none."""
        if user_id is None or not user_id.strip():
            raise Unauthenticated("Caller identity is required")
        return user_id.strip()

    def is_owner(self, project: Project, user_id: str) -> bool:
        return project.user_id == user_id

    def check(self, project: P | None, user_id: str, project_id: str = "") -> P:
        """
        Let an owned project through.

        Raises:
            ProjectNotFound: Project missing, or owned by someone else under
                HIDE_EXISTENCE
            Forbidden: Owned by someone else under DISTINGUISH_FORBIDDEN
        """
        if project is None:
            raise ProjectNotFound(project_id)
        if not self.is_owner(project, user_id):
            if self.policy is OwnershipPolicy.DISTINGUISH_FORBIDDEN:
                raise Forbidden(f"Project {project.id} belongs to another user")
            raise ProjectNotFound(project_id or project.id)
        return project

    def filter_owned(self, projects: Iterable[P], user_id: str) -> list[P]:
        """Drop every project the caller does not own."""
        return [project for project in projects if self.is_owner(project, user_id)]
