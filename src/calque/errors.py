"""Library-wide error definitions.

Every error derives from `CalqueError` and from the builtin exception that
best matches its meaning, so callers may catch either.
"""

# ============================================================================
#                           General errors
# ============================================================================


class CalqueError(Exception):
    """Base class for all calque errors."""


# ============================================================================
#                   Unmodifiable collection errors
# ============================================================================


class UnsupportedOperationError(CalqueError, TypeError):
    """Raised when a mutating operation is attempted on a read-only container."""

    def __init__(self, type_name: str, operation: str) -> None:
        super().__init__(f"{type_name} does not support {operation}()")
        self.type_name = type_name
        self.operation = operation


class NullElementError(CalqueError, ValueError):
    """Raised when None is supplied where a value is required."""

    def __init__(self, what: str = "element") -> None:
        super().__init__(f"{what} must not be None")
        self.what = what


class DuplicateElementError(CalqueError, ValueError):
    """Raised when a strict set factory receives the same element twice."""

    def __init__(self, element: object) -> None:
        super().__init__(f"duplicate element: {element!r}")
        self.element = element


class DuplicateKeyError(CalqueError, ValueError):
    """Raised when a mapping would receive the same key twice."""

    def __init__(self, key: object, first: object, second: object) -> None:
        super().__init__(
            f"duplicate key {key!r} (attempted merging values {first!r} and {second!r})"
        )
        self.key = key
        self.first = first
        self.second = second


# ============================================================================
#                           Optional errors
# ============================================================================


class NoSuchElementError(CalqueError, LookupError):
    """Raised when the value of an empty Optional is requested."""

    def __init__(self, message: str = "No value present") -> None:
        super().__init__(message)
