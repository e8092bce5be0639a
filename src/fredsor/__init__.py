"""Client library for the FRED economic data web service."""

__version__ = "0.1.0"
