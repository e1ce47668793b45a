"""Arbitrary-precision arithmetic on non-negative decimal digit strings, with a command line."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "cli", "digits"]