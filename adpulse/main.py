"""
AdPulse – Main Application Entry Point
========================================
Backend HTTP de analytics de revenue sobre el dataset de monetización.

ARQUITECTURA DE ARRANQUE:
  1. Configurar logging
  2. Crear el contenedor de dependencias (settings → lector de datos)
  3. FastAPI lifespan startup:
     a. Si db_enabled: inicializar el pool async de SQLAlchemy
  4. FastAPI lifespan shutdown:
     a. Cerrar el pool

FLUJO DE DATOS:
  HTTP → routes → AnalyticsQueryService → IDataReader (MySQL | memoria)
       → join / agregación en memoria → DTO → JSON

  uvicorn adpulse.main:app --reload --host 0.0.0.0 --port 8888
  adpulse                      # mismo servidor con host/port de settings
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from adpulse.shared.logging.logger import setup_logging, get_logger
from adpulse.shared.config.settings import settings
from adpulse.presentation.api.routes import router
from adpulse.presentation.api.cors import CorsMiddleware
from adpulse.presentation.api.errors import register_exception_handlers
from adpulse.container import Container, get_container, init_container

# ─── Logging ────────────────────────────────────────────────────────────
setup_logging(settings.log_level, sql_echo=settings.db_echo)
logger = get_logger("main")


# ─── FastAPI Lifespan ───────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle de la aplicación."""
    container: Container = app.state.container
    s = container.settings

    logger.info("=" * 60)
    logger.info("  AdPulse - Revenue Analytics")
    logger.info("  CORS origin: %s", s.cors_allow_origin)
    if s.db_enabled:
        await container.db_manager.initialize()
        logger.info("  Database: conectada (%s@%s/%s)", s.db_user, s.db_host, s.db_name)
    else:
        logger.info("  Database: Deshabilitada (db_enabled=False), lector en memoria")
    logger.info("=" * 60)

    yield  # ← La app está corriendo aquí

    # ── SHUTDOWN ──
    if s.db_enabled:
        await container.db_manager.close()
        logger.info("  Database: Conexión cerrada")
    logger.info("✓ Shutdown completo")


# ─── FastAPI App ────────────────────────────────────────────────────────

def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construye la app FastAPI.

    Args:
        container: Contenedor a usar; None = contenedor global
    """
    container = container or get_container()
    s = container.settings

    app = FastAPI(
        title="AdPulse - Revenue Analytics",
        description="Consultas de revenue por MAU sobre regiones, categorías y dispositivos",
        version="1.0.0",
        debug=s.debug,
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(
        CorsMiddleware,
        allow_origin=s.cors_allow_origin,
        allow_methods=s.cors_allow_methods,
        allow_headers=s.cors_allow_headers,
    )
    register_exception_handlers(app)
    app.include_router(router)
    return app


container = init_container(settings)
app = create_app(container)


def run() -> None:
    """Levanta uvicorn con host/port de settings (reload si debug)."""
    uvicorn.run(
        "adpulse.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
