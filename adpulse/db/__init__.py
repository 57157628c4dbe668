"""
AdPulse – Database Package
============================
Gestión del esquema de la base.

COMANDOS:
    # Crear tablas
    python -m adpulse.db.migrate

    # Reset completo + datos de demo
    python -m adpulse.db.migrate --reset --seed
"""
