"""Data classes shared by the store and the validator."""

from .cache_entry import CacheEntry, LoadFailure, ParseFailure
from .validation_result import ValidationResult

__all__ = ["CacheEntry", "LoadFailure", "ParseFailure", "ValidationResult"]
