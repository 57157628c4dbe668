"""
AdPulse – AdMultiplier ORM Model
==================================
Tabla de hechos `ad_multipliers`.

DECISIONES DE DISEÑO:

- DOUBLE para multiplier: el servicio solo multiplica y divide,
  no acumula dinero con centavos exactos.
- UNIQUE (region, category, device): el cálculo de revenue puntual
  necesita una sola fila por combinación.
- Índice en platform: casi todas las consultas agregadas filtran por él.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Float, ForeignKey, Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from adpulse.infrastructure.persistence.database import Base

if TYPE_CHECKING:
    from adpulse.infrastructure.persistence.models.catalog import (
        RegionModel,
        CategoryModel,
        DeviceModel,
    )


class AdMultiplierModel(Base):
    """Modelo ORM para coeficientes de revenue por MAU."""

    __tablename__ = "ad_multipliers"
    __table_args__ = (
        UniqueConstraint(
            "region_id", "category_id", "device_id",
            name="uq_ad_multipliers_combination",
        ),
        Index("ix_ad_multipliers_platform", "platform"),
    )

    # ─── Columnas ─────────────────────────────────────────────────────
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    region_id: Mapped[int] = mapped_column(ForeignKey("regions.id"), nullable=False)
    category_id: Mapped[int] = mapped_column(ForeignKey("categories.id"), nullable=False)
    device_id: Mapped[int] = mapped_column(ForeignKey("devices.id"), nullable=False)
    platform: Mapped[str] = mapped_column(
        String(32), nullable=False, comment="e.g. android, ios"
    )
    multiplier: Mapped[float] = mapped_column(
        Float, nullable=False, comment="Revenue por unidad de MAU"
    )

    # ─── Relationships ────────────────────────────────────────────────
    region: Mapped["RegionModel"] = relationship("RegionModel", lazy="raise")
    category: Mapped["CategoryModel"] = relationship("CategoryModel", lazy="raise")
    device: Mapped["DeviceModel"] = relationship("DeviceModel", lazy="raise")

    def __repr__(self) -> str:
        return (
            f"<AdMultiplier(region={self.region_id}, category={self.category_id}, "
            f"device={self.device_id}, platform='{self.platform}', x={self.multiplier})>"
        )
