"""
AdPulse – Infrastructure Layer
================================
Implementaciones concretas de interfaces.

Este módulo contiene:
- persistence/: Base de datos (MySQL vía SQLAlchemy async)
- memory/: Lector en memoria (tests, modo sin base)

REGLA DE DEPENDENCIA:
Esta capa implementa interfaces definidas en:
- domain/repositories/

Puede importar de:
- domain/ (entidades, interfaces)
- shared/ (config, logging)
"""
