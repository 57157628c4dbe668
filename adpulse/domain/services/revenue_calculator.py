"""
AdPulse – Domain Service: Revenue Calculator
==============================================
Aritmética pura sobre filas de ad_multipliers.

FÓRMULAS:
- Revenue      = mau * multiplier
- MAU required = revenue / multiplier
- Sum-by-key   = Σ valor(fila) agrupado por region_id o category_id

RESULTADOS NO FINITOS:
- Revenue fuera de rango float (mau enorme) → ValidationError sobre el
  campo de MAU: el input es el que no cabe.
- MAU required infinito (multiplier 0 o diminuto) → None, igual que
  el caso multiplier == 0.

NO tiene dependencias externas ni hace I/O.
"""

from __future__ import annotations

import math
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from adpulse.domain.entities.ad_multiplier import AdMultiplier
from adpulse.domain.exceptions.domain_errors import ValidationError
from adpulse.domain.value_objects.dimension import Dimension


class RevenueCalculator:
    """
    Calculadora de revenue / MAU.

    RESPONSABILIDAD:
    Traducir MAU ↔ revenue y agregar por dimensión.
    Stateless: una sola instancia sirve a todos los requests.
    """

    @staticmethod
    def revenue(mau: float, multiplier: float, field: str = "mau") -> float:
        """
        Revenue para un MAU.

        Raises:
            ValidationError: el producto no es un float finito
        """
        try:
            value = mau * multiplier
        except OverflowError:
            value = math.inf
        if not math.isfinite(value):
            raise ValidationError(f"Invalid value for '{field}'", field=field, value=mau)
        return value

    @staticmethod
    def required_mau(revenue: float, multiplier: float) -> Optional[float]:
        """
        MAU necesario para alcanzar revenue.

        Returns:
            None si multiplier == 0 o el cociente no es finito
            (ningún MAU representable alcanza el objetivo)
        """
        if multiplier == 0:
            return None
        try:
            mau = revenue / multiplier
        except OverflowError:
            return None
        return mau if math.isfinite(mau) else None

    @staticmethod
    def key_for(row: AdMultiplier, dimension: Dimension) -> int:
        """Clave de agrupación: region_id para REGION, category_id para CATEGORY."""
        if dimension is Dimension.REGION:
            return row.region_id
        if dimension is Dimension.CATEGORY:
            return row.category_id
        raise ValueError(f"No se puede agrupar por {dimension.value}")

    @staticmethod
    def sum_by_key(
        rows: Iterable[AdMultiplier],
        key: Callable[[AdMultiplier], int],
        value: Callable[[AdMultiplier], float],
    ) -> Dict[int, float]:
        """
        Acumula value(fila) por key(fila).

        Las claves ausentes del input nunca aparecen en el resultado.
        El orden de inserción sigue la primera aparición de cada clave.
        """
        totals: Dict[int, float] = {}
        for row in rows:
            k = key(row)
            totals[k] = totals.get(k, 0) + value(row)
        return totals

    def revenue_by_dimension(
        self,
        rows: Iterable[AdMultiplier],
        dimension: Dimension,
        mau: float,
        field: str = "mau",
    ) -> Dict[int, float]:
        """
        Revenue total por región o categoría para un MAU dado.

        Raises:
            ValidationError: alguna fila o alguna suma sale del rango float
        """
        totals = self.sum_by_key(
            rows,
            key=lambda row: self.key_for(row, dimension),
            value=lambda row: self.revenue(mau, row.multiplier, field),
        )
        # dos revenues finitos pueden sumar infinito
        if not all(math.isfinite(total) for total in totals.values()):
            raise ValidationError(f"Invalid value for '{field}'", field=field, value=mau)
        return totals

    def multiplier_by_region(self, rows: Iterable[AdMultiplier]) -> Dict[int, float]:
        """Suma cruda de multipliers por región."""
        return self.sum_by_key(
            rows,
            key=lambda row: row.region_id,
            value=lambda row: row.multiplier,
        )

    @staticmethod
    def rank_desc(totals: Dict[int, float]) -> List[Tuple[int, float]]:
        """Pares (clave, valor) ordenados por valor descendente."""
        return sorted(totals.items(), key=lambda item: item[1], reverse=True)
