"""
AdPulse – Domain Exceptions
=============================
Errores que las operaciones de analytics pueden producir.

Cada excepción lleva el status HTTP al que se traduce; la capa de
presentación solo lee status_code y to_dict(), no conoce los tipos.

JERARQUÍA:
    DomainError (base)
    ├── ValidationError           → 400
    ├── NotFoundError             → 404
    ├── UpstreamError             → 500
    └── DuplicateMultiplierError  → 500
"""

from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Excepción base para errores de dominio."""

    status_code: int = 500

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"error": self.message}


class ValidationError(DomainError):
    """Input ausente o mal formado. Se lanza antes de cualquier lectura."""

    status_code = 400

    def __init__(self, message: str, field: str = None, value: Any = None):
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field
        self.value = value


class NotFoundError(DomainError):
    """La consulta no devolvió la fila que la operación necesita."""

    status_code = 404

    def __init__(self, message: str, lookup: dict = None):
        super().__init__(message, code="NOT_FOUND")
        self.lookup = lookup or {}


class UpstreamError(DomainError):
    """
    Falló una lectura contra el datastore.

    message es genérico y va al cliente; cause es el error original
    y solo se loguea.
    """

    status_code = 500

    def __init__(self, message: str, cause: BaseException = None):
        super().__init__(message, code="UPSTREAM_ERROR")
        self.cause = cause


class DuplicateMultiplierError(DomainError):
    """Más de una fila para una clave (region, category, device) que debe ser única."""

    status_code = 500

    def __init__(self, message: str, lookup: dict = None, count: int = 0):
        super().__init__(message, code="DUPLICATE_MULTIPLIER")
        self.lookup = lookup or {}
        self.count = count
