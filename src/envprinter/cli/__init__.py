"""Command-line interface for env-printer."""
