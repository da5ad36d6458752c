"""Command-line entry point and composition root."""
