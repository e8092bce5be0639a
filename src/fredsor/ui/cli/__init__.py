"""Command line interface package."""

from fredsor.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
