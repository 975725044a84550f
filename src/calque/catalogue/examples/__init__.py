"""Bundled example cases.

Importing this package registers every case with
`calque.catalogue.registry.CATALOGUE`.
"""

from . import collections, collectors, inference, locales, optional, smoke

__all__ = ["collections", "collectors", "inference", "locales", "optional", "smoke"]
