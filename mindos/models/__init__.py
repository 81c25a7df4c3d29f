"""ORM model package."""

from mindos.models.base import Base
from mindos.models.note import Note

__all__ = ["Base", "Note"]
