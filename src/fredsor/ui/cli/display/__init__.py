"""Display management for CLI interface."""

from fredsor.ui.cli.display.result import ResultDisplay

__all__ = ["ResultDisplay"]
