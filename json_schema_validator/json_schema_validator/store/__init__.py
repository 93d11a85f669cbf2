"""Schema storage and change-aware loading from a source directory."""

from .schema_loader import SchemaLoader
from .schema_store import SchemaStore

__all__ = ["SchemaLoader", "SchemaStore"]
