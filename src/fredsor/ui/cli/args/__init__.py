"""Command line argument handling package."""

from fredsor.ui.cli.args.parser import ArgumentParser
from fredsor.ui.cli.args.options import FetchArgs

__all__ = ["ArgumentParser", "FetchArgs"]
