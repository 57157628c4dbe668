"""Domain entities."""
from adpulse.domain.entities.catalog import Region, Category, Device
from adpulse.domain.entities.ad_multiplier import AdMultiplier

__all__ = ["Region", "Category", "Device", "AdMultiplier"]
