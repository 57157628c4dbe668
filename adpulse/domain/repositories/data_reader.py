"""
AdPulse – Domain Repository Interface: DataReader
===================================================
Interfaz abstracta de solo lectura sobre el dataset de monetización.

Define el CONTRATO que cumple cualquier fuente de datos
(MySQL vía SQLAlchemy, InMemory para tests, etc.)

REGLA DE CLEAN ARCHITECTURE:
- Esta interfaz vive en domain/ (capa interna)
- Las implementaciones viven en infrastructure/ (capa externa)
- El domain NO conoce CÓMO se implementa, solo QUÉ métodos existen
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List

from adpulse.domain.entities.catalog import Region, Category, Device
from adpulse.domain.entities.ad_multiplier import AdMultiplier
from adpulse.domain.value_objects.multiplier_filter import MultiplierFilter


class IDataReader(ABC):
    """
    Interfaz abstracta de lectura del datastore.

    OPERACIONES ASYNC:
    Todas las operaciones son async; cada una es un punto de suspensión.

    ERRORES:
    Una lectura fallida debe lanzar UpstreamError. Cualquier otra
    excepción se trata como error no controlado.
    """

    @abstractmethod
    async def list_regions(self) -> List[Region]:
        """Todas las regiones del catálogo."""
        pass

    @abstractmethod
    async def find_regions(self, ids: Iterable[int]) -> List[Region]:
        """
        Regiones cuyo id está en ids.

        Args:
            ids: Conjunto de ids (puede estar vacío)

        Returns:
            Lista de regiones encontradas; los ids desconocidos se ignoran
        """
        pass

    @abstractmethod
    async def find_categories(self, ids: Iterable[int]) -> List[Category]:
        """Categorías cuyo id está en ids."""
        pass

    @abstractmethod
    async def find_devices(self, ids: Iterable[int]) -> List[Device]:
        """Dispositivos cuyo id está en ids."""
        pass

    @abstractmethod
    async def find_multipliers(self, criteria: MultiplierFilter) -> List[AdMultiplier]:
        """
        Filas de ad_multipliers que cumplen todos los predicados.

        Args:
            criteria: Predicados de igualdad (None = sin filtro)

        Returns:
            Filas coincidentes, sin orden garantizado
        """
        pass
