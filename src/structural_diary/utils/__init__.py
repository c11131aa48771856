"""Path and logging helpers."""
