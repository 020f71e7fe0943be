"""Core analysis, configuration and logging."""
