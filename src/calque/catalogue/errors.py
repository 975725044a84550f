"""Errors related to the example catalogue."""


class CatalogueError(Exception):
    """Base class for all catalogue-related errors."""


class DuplicateExampleError(CatalogueError):
    """Raised when two example cases are registered under the same name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Example ({name}) is already registered")
        self.name = name


class UnknownExampleError(CatalogueError, LookupError):
    """Raised when an example case cannot be found in the catalogue."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Example ({name}) not found in catalogue")
        self.name = name


class ExampleFailure(AssertionError):
    """Raised by a check when a computed value does not match the expectation.

    The message always names both the actual and the expected value.
    """

    def __init__(self, message: str, actual: object = None, expected: object = None):
        super().__init__(message)
        self.actual = actual
        self.expected = expected
