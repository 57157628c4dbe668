"""SQL persistence (SQLAlchemy async)."""
