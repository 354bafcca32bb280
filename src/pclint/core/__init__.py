"""Core infrastructure - errors and logging."""
