"""Command-line interface for auditlens."""

from .main import cli, main

__all__ = ["cli", "main"]
