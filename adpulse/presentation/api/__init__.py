"""REST API (FastAPI router, middleware, schemas)."""
