"""Domain exceptions."""
from adpulse.domain.exceptions.domain_errors import (
    DomainError,
    ValidationError,
    NotFoundError,
    UpstreamError,
    DuplicateMultiplierError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "UpstreamError",
    "DuplicateMultiplierError",
]
