"""MongoDB repository building blocks."""

from .base import MongoBaseRepository

__all__ = ["MongoBaseRepository"]
