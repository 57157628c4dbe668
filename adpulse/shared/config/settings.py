"""
AdPulse – Settings (Pydantic BaseSettings)
===========================================
Configuración centralizada cargada desde variables de entorno / .env.
Se usa pydantic-settings para validación estricta al arranque.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List, Optional


class Settings(BaseSettings):
    # ─── Servicio ───────────────────────────────────────────────────────
    service_name: str = Field(default="adpulse", description="Nombre reportado en /health")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8888)
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO", description="Nivel del root logger")

    # ─── CORS ───────────────────────────────────────────────────────────
    cors_allow_origin: str = Field(default="*")
    cors_allow_methods: List[str] = Field(default=["GET", "POST", "OPTIONS"])
    cors_allow_headers: List[str] = Field(default=["Content-Type"])

    # ─── MySQL Database ─────────────────────────────────────────────────
    db_enabled: bool = Field(
        default=False,
        description="Leer del datastore SQL (False = lector en memoria vacío)",
    )
    db_url: Optional[str] = Field(
        default=None,
        description="URL SQLAlchemy completa; si se define ignora db_host/db_user/...",
    )
    db_host: str = Field(default="localhost", description="MySQL host")
    db_port: int = Field(default=3306, description="MySQL port")
    db_user: str = Field(default="adpulse", description="MySQL username")
    db_password: str = Field(default="adpulse_secret", description="MySQL password")
    db_name: str = Field(default="adpulse", description="MySQL database name")
    db_echo: bool = Field(default=False, description="Loguear queries SQL (debug)")
    db_pool_size: int = Field(default=5, description="Conexiones en el pool")
    db_max_overflow: int = Field(default=10, description="Conexiones extra en picos")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton global – se importa donde se necesite
settings = Settings()
