"""Entrypoints (inbound adapters) for calque.

Expose the library to the outside world: currently the ``calque`` command-line
interface. Parse and validate inputs, call into the library, and present
results.
"""
