"""
AdPulse – Catalog ORM Models
==============================
Tablas `regions`, `categories` y `devices` (dimensiones del dataset).

Las tres comparten forma {id, name}; name es UNIQUE dentro de cada tabla.
"""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from adpulse.infrastructure.persistence.database import Base


class RegionModel(Base):
    """Modelo ORM para regiones."""

    __tablename__ = "regions"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Region(id={self.id}, name='{self.name}')>"


class CategoryModel(Base):
    """Modelo ORM para categorías de contenido."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name='{self.name}')>"


class DeviceModel(Base):
    """Modelo ORM para tipos de dispositivo."""

    __tablename__ = "devices"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Device(id={self.id}, name='{self.name}')>"
