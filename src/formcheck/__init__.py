"""formcheck: HTML5 constraint validation engine and CLI."""

__version__ = "0.4.0"
