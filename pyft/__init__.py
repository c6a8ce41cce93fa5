"""A strict printf-style formatter, classic string helpers and a demo command."""

__version__ = "0.1.0"
__all__ = ["cli", "printf", "strings"]