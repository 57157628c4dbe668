"""
AdPulse – Logging configuration
================================
Un solo handler a stdout con formato legible para desarrollo.

Los loggers del servicio cuelgan de "adpulse." para poder subir o
bajar su nivel sin tocar el de uvicorn o SQLAlchemy.
"""

from __future__ import annotations

import logging
import sys
from typing import Dict, Union

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-30s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Nivel mínimo de librerías que loguean por request o por query
QUIET_LOGGERS: Dict[str, int] = {
    "uvicorn.access": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
    "aiomysql": logging.WARNING,
}


def setup_logging(level: Union[int, str] = logging.INFO, sql_echo: bool = False) -> None:
    """
    Configura el root logger al arranque.

    Args:
        level: Nivel como int o nombre ("info", "DEBUG", ...)
        sql_echo: Deja sqlalchemy.engine en INFO para ver las queries
    """
    if isinstance(level, str):
        level = level.upper()

    root = logging.getLogger()
    # Llamadas repetidas (tests, reload) no duplican el handler
    if not any(getattr(h, "_adpulse", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        handler._adpulse = True
        root.addHandler(handler)
    root.setLevel(level)

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)
    if sql_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)


def get_logger(name: str) -> logging.Logger:
    """Logger con namespace "adpulse.<name>"."""
    return logging.getLogger(f"adpulse.{name}")
