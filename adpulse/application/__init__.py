"""
AdPulse – Application Layer
=============================
Capa de casos de uso y orquestación.

Este módulo contiene:
- use_cases/: Casos de uso (AnalyticsQueryService + parsing de inputs)
- dto/: Data Transfer Objects

REGLA DE DEPENDENCIA:
Esta capa puede importar de:
- domain/ (entidades, servicios, interfaces)
- shared/ (logging)

NO puede importar de:
- infrastructure/ (implementaciones concretas)
- presentation/ (API)
"""

from adpulse.application.use_cases.analytics_usecase import AnalyticsQueryService

__all__ = ["AnalyticsQueryService"]
