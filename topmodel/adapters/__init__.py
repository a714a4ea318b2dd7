"""Persistence adapters."""

from .base import AdapterResult, PersistenceAdapter
from .memory import MemoryAdapter

__all__ = ["AdapterResult", "PersistenceAdapter", "MemoryAdapter"]
