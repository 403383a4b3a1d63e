"""
SQLAlchemy Models for the template catalog and project store
"""

from shotify.models.template import Template
from shotify.models.project import Project

__all__ = [
    "Template",
    "Project",
]
