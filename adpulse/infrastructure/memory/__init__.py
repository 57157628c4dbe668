"""In-memory implementations."""
from adpulse.infrastructure.memory.in_memory_reader import InMemoryDataReader

__all__ = ["InMemoryDataReader"]
