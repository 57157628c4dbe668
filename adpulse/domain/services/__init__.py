"""Domain services - pure business logic."""
from adpulse.domain.services.revenue_calculator import RevenueCalculator

__all__ = ["RevenueCalculator"]
