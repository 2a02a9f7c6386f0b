"""FastAPI surface over the dependency graph."""
