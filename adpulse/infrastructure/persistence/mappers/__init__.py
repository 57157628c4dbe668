"""ORM ↔ domain mappers."""
from adpulse.infrastructure.persistence.mappers.catalog_mapper import CatalogMapper

__all__ = ["CatalogMapper"]
