"""
Supplyline: army configuration resolution.

Resolves the list of army spreadsheets and notification webhooks from
the Commander Database master sheet and validates them before use.
"""

from importlib.metadata import version

__version__ = version("supplyline")

__all__ = ["__version__"]
