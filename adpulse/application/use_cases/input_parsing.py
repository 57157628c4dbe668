"""
Parsing de inputs de request.

Los valores llegan como str (path / query) o como tipos JSON (body).
Todo se valida aquí, antes de la primera lectura al datastore.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, List, Mapping, Sequence, Union

from adpulse.domain.exceptions.domain_errors import ValidationError
from adpulse.domain.value_objects.dimension import Dimension

MISSING_FIELDS = "Missing required fields"
MISSING_PARAMS = "Missing required query parameters"

Number = Union[int, float]


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def require(values: Mapping[str, Any], names: Iterable[str], message: str) -> None:
    """Lanza ValidationError si falta alguno de los campos."""
    missing = [name for name in names if is_missing(values.get(name))]
    if missing:
        raise ValidationError(message, field=",".join(missing))


def _invalid(name: str, value: Any) -> ValidationError:
    return ValidationError(f"Invalid value for '{name}'", field=name, value=value)


def parse_number(name: str, value: Any) -> Number:
    """
    Número finito: int si el texto es entero ("100"), float si no ("0.5").
    """
    if isinstance(value, bool):
        raise _invalid(name, value)
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        try:
            number = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                raise _invalid(name, value) from None
    else:
        raise _invalid(name, value)

    # enteros que no caben en un float desbordan la aritmética posterior
    if isinstance(number, int):
        try:
            float(number)
        except OverflowError:
            raise _invalid(name, value) from None
    # NaN e infinito no son serializables a JSON
    elif not math.isfinite(number):
        raise _invalid(name, value)
    return number


def parse_id(name: str, value: Any) -> int:
    """Identificador entero."""
    if isinstance(value, bool):
        raise _invalid(name, value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise _invalid(name, value) from None
    raise _invalid(name, value)


def parse_platform(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise _invalid(name, value)
    return value.strip()


def parse_dimension(name: str, value: Any, allowed: Sequence[Dimension]) -> Dimension:
    try:
        dimension = Dimension(str(value).strip().lower())
    except ValueError:
        raise _invalid(name, value) from None
    if dimension not in allowed:
        raise _invalid(name, value)
    return dimension


def parse_number_list(name: str, value: Any) -> List[Number]:
    """Lista separada por comas, e.g. "100,200,500"."""
    if not isinstance(value, str):
        raise _invalid(name, value)
    pieces = value.split(",")
    if any(is_missing(piece) for piece in pieces):
        raise _invalid(name, value)
    return [parse_number(name, piece) for piece in pieces]
