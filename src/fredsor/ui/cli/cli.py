"""Command line interface for fredsor."""

import asyncio
import sys
from typing import final

from fredsor.config.settings import FRED_API_KEY, FRED_BASE_URL
from fredsor.platform.fred import FredClient, FredError, Success
from fredsor.platform.logging import logger
from fredsor.ui.cli.args import ArgumentParser, FetchArgs
from fredsor.ui.cli.display import ResultDisplay


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            if not CommandProcessor.fetch(args):
                sys.exit(1)
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except FredError as e:
            logger.error("%s", str(e))
            sys.exit(1)

    @staticmethod
    def fetch(args: FetchArgs) -> bool:
        """Run the request described by ``args`` and display the outcome.

        Returns:
            bool: True when the service returned a successful response.
        """
        client = FredClient(args.api_key or FRED_API_KEY, args.base_url or FRED_BASE_URL)
        if not client.dispatcher.api_key:
            logger.warning("No FRED API key configured; the service will reject the request")

        result = asyncio.run(client.request(args.path, args.params, args.response_format))
        ResultDisplay().show_result(result, quiet=args.quiet)
        return isinstance(result, Success)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failed requests exit through
        ``sys.exit(1)`` before this return is reached.
    """
    CommandProcessor.process_command()
    return 0


if __name__ == "__main__":
    sys.exit(main())
