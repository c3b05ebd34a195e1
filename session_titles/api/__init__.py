"""API Layer — FastAPI routes, dependencies and error handlers."""
