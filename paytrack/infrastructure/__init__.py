"""Infrastructure adapters for the hosted database, settings and logging."""
