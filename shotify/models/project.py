"""
Project Model - User-owned editable screenshot sets
"""

import uuid
from datetime import datetime

from sqlalchemy import String, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from shotify.database import Base, utcnow
from shotify.schemas.configuration import Configuration


class Project(Base):
    """Project cloned from a template and edited independently afterwards."""

    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    # Identity comes from the upstream resolver, there is no users table
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    # Provenance only: editing or deleting the template never touches the project
    template_id: Mapped[str] = mapped_column(String(36), nullable=False)

    # Project info
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    thumbnail: Mapped[str] = mapped_column(String(500), nullable=False, default="")

    # Canvas configuration document
    project_config: Mapped[dict] = mapped_column(JSON, nullable=False)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    def __repr__(self) -> str:
        return f"<Project(id={self.id}, name={self.name}, user={self.user_id})>"

    @property
    def configuration(self) -> Configuration:
        return Configuration.from_document(self.project_config)
