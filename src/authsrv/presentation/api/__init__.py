"""FastAPI application for authsrv."""
