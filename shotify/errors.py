"""
Error Taxonomy
Domain errors raised by the catalog, project store and access gate.
The HTTP layer maps each class to a status code through ``status_code``.
"""

import uuid


class ShotifyError(Exception):
    """Base class for all domain errors."""

    status_code = 500
    code = "internal_error"

    def __init__(self, message: str = ""):
        super().__init__(message or self.code.replace("_", " "))
        self.message = str(self)


class InvalidArgument(ShotifyError):
    """Malformed identifier or missing required input. Never retried."""

    status_code = 400
    code = "invalid_argument"


class NotFound(ShotifyError):
    """No matching, visible, active document."""

    status_code = 404
    code = "not_found"


class TemplateNotFound(NotFound):
    code = "template_not_found"

    def __init__(self, template_id: str = ""):
        super().__init__(f"Template {template_id} not found" if template_id else "Template not found")
        self.template_id = template_id


class ProjectNotFound(NotFound):
    code = "project_not_found"

    def __init__(self, project_id: str = ""):
        super().__init__(f"Project {project_id} not found" if project_id else "Project not found")
        self.project_id = project_id


class Forbidden(ShotifyError):
    """Ownership mismatch, only surfaced under the distinguish-forbidden policy."""

    status_code = 403
    code = "forbidden"


class Unauthenticated(ShotifyError):
    """No resolvable caller identity."""

    status_code = 401
    code = "unauthenticated"


class StorageError(ShotifyError):
    """The storage boundary failed. Surfaced as is, retry belongs to the caller."""

    status_code = 503
    code = "storage_error"


def parse_id(value: str, kind: str = "resource") -> str:
    """
    Validate an opaque identifier before it reaches the store.

    Args:
        value: Identifier as received from the caller
        kind: Resource name used in the error message

    Returns:
        Canonical lowercase UUID string

    Raises:
        InvalidArgument: If the value is empty or not a UUID
    """
    if not value or not value.strip():
        raise InvalidArgument(f"{kind} id is required")
    try:
        return str(uuid.UUID(value.strip()))
    except ValueError:
        raise InvalidArgument(f"Malformed {kind} id: {value!r}") from None
