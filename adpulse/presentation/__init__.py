"""
AdPulse – Presentation Layer
==============================
Adaptadores de entrada HTTP.

Este módulo contiene:
- api/routes.py: Endpoints REST
- api/cors.py: Middleware CORS
- api/errors.py: Handlers de errores de request

REGLA DE DEPENDENCIA:
Puede importar de application/ y domain/exceptions; nunca de infrastructure/.
"""

from adpulse.presentation.api.routes import router

__all__ = ["router"]
