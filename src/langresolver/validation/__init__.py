"""Catalog validation package.

Python 3.13+.
"""

from .catalog import validate_catalog

__all__ = ["validate_catalog"]
