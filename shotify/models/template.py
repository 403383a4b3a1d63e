"""
Template Model - Admin-managed starting layouts
"""

import uuid
from datetime import datetime

from sqlalchemy import String, DateTime, JSON, Boolean
from sqlalchemy.orm import Mapped, mapped_column

from shotify.database import Base, utcnow
from shotify.schemas.configuration import Configuration


class Template(Base):
    """Reusable canvas layout that projects are cloned from."""

    __tablename__ = "templates"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )

    # Template info
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    platform: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    category: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    thumbnail: Mapped[str] = mapped_column(String(500), nullable=False, default="")

    # Canvas configuration document
    json_config: Mapped[dict] = mapped_column(JSON, nullable=False)

    # Soft delete flag
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, index=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    def __repr__(self) -> str:
        return f"<Template(name={self.name}, platform={self.platform}, active={self.is_active})>"

    @property
    def configuration(self) -> Configuration:
        """Parsed copy of the stored configuration document."""
        return Configuration.from_document(self.json_config)
