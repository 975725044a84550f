"""Catalogue of worked example cases and the machinery to run them."""

from .errors import (
    CatalogueError,
    DuplicateExampleError,
    ExampleFailure,
    UnknownExampleError,
)
from .registry import CATALOGUE, ExampleCase, ExampleCatalogue, example, load_examples
from .runner import CaseResult, Outcome, RunReport, run_case, run_cases

__all__ = [
    "CATALOGUE",
    "CaseResult",
    "CatalogueError",
    "DuplicateExampleError",
    "ExampleCase",
    "ExampleCatalogue",
    "ExampleFailure",
    "Outcome",
    "RunReport",
    "UnknownExampleError",
    "example",
    "load_examples",
    "run_case",
    "run_cases",
]
