"""Application use cases - Business logic orchestration."""

from adpulse.application.use_cases.analytics_usecase import AnalyticsQueryService

__all__ = ["AnalyticsQueryService"]
