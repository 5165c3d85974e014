"""Read-only reference tables loaded once at import."""
