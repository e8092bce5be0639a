"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import final

from fredsor.config.config import config as app_config
from fredsor.platform.fred import ParamTuple, ResponseFormat
from fredsor.platform.logging import setup_logger
from fredsor.ui.cli.args.options import FetchArgs


def _parse_param(raw: str) -> ParamTuple:
    """Split a ``NAME=VALUE`` token; the value may itself contain ``=``."""

    name, separator, value = raw.partition("=")
    if not separator or not name.strip():
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got '{raw}'")
    return name.strip(), value


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="fredsor",
            description="Query the FRED economic data web service.",
            epilog="Example: fredsor /fred/category/children category_id=13",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        _ = parser.add_argument(
            "path",
            type=str,
            help="Endpoint path, e.g. /fred/category/series",
            metavar="PATH",
        )
        _ = parser.add_argument(
            "params",
            type=_parse_param,
            nargs="*",
            help="Query parameters; empty values are omitted from the request",
            metavar="NAME=VALUE",
        )
        _ = parser.add_argument(
            "--format",
            dest="response_format",
            choices=[fmt.value for fmt in ResponseFormat],
            default=ResponseFormat.OBJECT.value,
            help="Response format (default: %(default)s)",
        )
        _ = parser.add_argument(
            "--api-key",
            type=str,
            help="FRED API key (overrides configuration and FRED_API_KEY)",
        )
        _ = parser.add_argument(
            "--base-url",
            type=str,
            help="Service root URL (overrides configuration and FRED_BASE_URL)",
        )
        _ = parser.add_argument(
            "--log-file",
            type=Path,
            help="Also write debug logs to this file",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show request details",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> FetchArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            FetchArgs: Processed command line arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        log_file: Path | None = parsed_args.log_file or app_config.log_file
        _ = setup_logger(log_file=log_file, console_level=log_level)

        return FetchArgs(
            path=parsed_args.path,
            params=list(parsed_args.params),
            response_format=ResponseFormat(parsed_args.response_format),
            api_key=parsed_args.api_key,
            base_url=parsed_args.base_url,
            quiet=parsed_args.quiet,
        )


__all__ = ["ArgumentParser"]
