"""api v1 endpoints package."""
