"""
AdPulse – In-Memory Data Reader
=================================
Implementación de IDataReader sobre listas en memoria.

Se usa en tests y cuando db_enabled=False. Respeta el mismo contrato
que SqlDataReader: filtros por igualdad, pertenencia de ids y orden
de inserción.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence

from adpulse.domain.entities.catalog import Region, Category, Device
from adpulse.domain.entities.ad_multiplier import AdMultiplier
from adpulse.domain.repositories.data_reader import IDataReader
from adpulse.domain.value_objects.multiplier_filter import MultiplierFilter


class InMemoryDataReader(IDataReader):
    """Lector sin I/O. Las listas no se mutan después de construirlo."""

    def __init__(
        self,
        regions: Optional[Sequence[Region]] = None,
        categories: Optional[Sequence[Category]] = None,
        devices: Optional[Sequence[Device]] = None,
        multipliers: Optional[Sequence[AdMultiplier]] = None,
    ):
        self._regions = list(regions or [])
        self._categories = list(categories or [])
        self._devices = list(devices or [])
        self._multipliers = list(multipliers or [])

    @classmethod
    def from_dicts(
        cls,
        regions: Iterable[Dict[str, Any]] = (),
        categories: Iterable[Dict[str, Any]] = (),
        devices: Iterable[Dict[str, Any]] = (),
        multipliers: Iterable[Dict[str, Any]] = (),
    ) -> "InMemoryDataReader":
        """
        Construye el lector desde dicts con la forma de las tablas.

        En multipliers los campos ausentes toman defaults (ids 0,
        platform "android") para que los fixtures sean cortos.
        """
        return cls(
            regions=[Region(id=r["id"], name=r["name"]) for r in regions],
            categories=[Category(id=c["id"], name=c["name"]) for c in categories],
            devices=[Device(id=d["id"], name=d["name"]) for d in devices],
            multipliers=[
                AdMultiplier(
                    region_id=m.get("region_id", 0),
                    category_id=m.get("category_id", 0),
                    device_id=m.get("device_id", 0),
                    platform=m.get("platform", "android"),
                    multiplier=m["multiplier"],
                )
                for m in multipliers
            ],
        )

    async def list_regions(self) -> List[Region]:
        return list(self._regions)

    async def find_regions(self, ids: Iterable[int]) -> List[Region]:
        wanted = set(ids)
        return [r for r in self._regions if r.id in wanted]

    async def find_categories(self, ids: Iterable[int]) -> List[Category]:
        wanted = set(ids)
        return [c for c in self._categories if c.id in wanted]

    async def find_devices(self, ids: Iterable[int]) -> List[Device]:
        wanted = set(ids)
        return [d for d in self._devices if d.id in wanted]

    async def find_multipliers(self, criteria: MultiplierFilter) -> List[AdMultiplier]:
        return [m for m in self._multipliers if criteria.matches(m)]
