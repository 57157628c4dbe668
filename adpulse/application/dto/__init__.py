"""Application DTOs - Data Transfer Objects for use cases."""
from adpulse.application.dto.analytics_dto import (
    RevenueDTO,
    TotalMultiplierDTO,
    RegionCategoriesDTO,
    RevenueRowDTO,
    MauRequiredRowDTO,
    MauRequirementDTO,
    GrowthPointDTO,
    RevenuePerMauDTO,
)

__all__ = [
    "RevenueDTO",
    "TotalMultiplierDTO",
    "RegionCategoriesDTO",
    "RevenueRowDTO",
    "MauRequiredRowDTO",
    "MauRequirementDTO",
    "GrowthPointDTO",
    "RevenuePerMauDTO",
]
