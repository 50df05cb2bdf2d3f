"""Dining philosophers simulation: argument parsing, clock helpers, the table and its command."""

__version__ = "1.0.0"
__all__ = ["args", "clock", "table", "cli"]