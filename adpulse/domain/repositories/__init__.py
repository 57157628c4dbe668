"""Domain repository interfaces (ABCs)."""
from adpulse.domain.repositories.data_reader import IDataReader

__all__ = ["IDataReader"]
