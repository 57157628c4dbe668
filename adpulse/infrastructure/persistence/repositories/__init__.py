"""Repository implementations."""

from adpulse.infrastructure.persistence.repositories.sql_data_reader import SqlDataReader

__all__ = ["SqlDataReader"]
