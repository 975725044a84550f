"""CALQUE

Read-only collections, collectors, an optional-value type and Unicode
locale-extension lookups, together with a catalogue of small worked
examples that demonstrate each of them.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
