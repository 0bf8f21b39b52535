"""FastAPI application for booklists."""
