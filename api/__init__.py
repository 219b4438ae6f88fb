"""FastAPI layer over the `artistly` core."""
