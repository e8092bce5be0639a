"""src/fredsor/ui/cli/display/result.py
What: Render request outcomes for the command line.
Why: Keep console output formatting in one place for every result variant.
"""

from __future__ import annotations

from typing import Final, final

from rich.console import Console
from rich.markup import escape

from fredsor.platform.fred import ServiceError, Success, TransportFailure
from fredsor.platform.fred.results import FredResult
from fredsor.platform.logging import mask_secrets

# Error bodies can be whole HTML pages
ERROR_BODY_PREVIEW_CHARS: Final[int] = 500


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console
    error_console: Console

    def __init__(self, console: Console | None = None, error_console: Console | None = None) -> None:
        """Initialize result display."""
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)

    def show_result(self, result: FredResult, quiet: bool = False) -> None:
        """Display a request outcome.

        Successful content goes to standard output even in quiet mode, since it
        is the command's product. Failures always go to standard error.

        Args:
            result: Outcome returned by the client.
            quiet: Whether to suppress the status line.
        """
        if isinstance(result, Success):
            if not quiet:
                self.error_console.print(f"[green]HTTP {result.status}[/green]")
            if isinstance(result.content, bytes):
                self.console.out(result.content.decode("utf-8", errors="replace"), highlight=False)
            else:
                self.console.print_json(data=result.content)
            return

        if isinstance(result, ServiceError):
            self.error_console.print(f"[red]Service error:[/red] HTTP {result.status}")
            if result.body:
                preview = result.body[:ERROR_BODY_PREVIEW_CHARS].decode("utf-8", errors="replace")
                preview = mask_secrets(preview)
                self.error_console.print(escape(preview))
            return

        assert isinstance(result, TransportFailure)
        self.error_console.print(f"[red]Transport failure:[/red] {escape(mask_secrets(result.reason))}")


__all__ = ["ResultDisplay"]
