"""Error definitions for the backport shims."""

# ============================================================================
#                               Base error
# ============================================================================


class BackportError(Exception):
    """Base class for backport errors."""


# ============================================================================
#                            Argument errors
# ============================================================================


class NullArgumentError(BackportError, TypeError):
    """Raised when a required argument is ``None``.

    The message marks the position of the missing argument, e.g.
    ``get_bytes(None, ...)`` or ``get_bytes(..., None)``.
    """

    def __init__(self, operation: str, position: int = 0, arity: int = 1) -> None:
        slots = ["..."] * arity
        slots[position] = "None"
        super().__init__(f"{operation}({', '.join(slots)})")
        self.operation = operation
        self.position = position


class OutOfRangeError(BackportError, IndexError):
    """Raised when a numeric range argument violates its bounds."""

    def __init__(self, operation: str, argument: str, value: int, bound: str) -> None:
        super().__init__(
            f"{operation}: {argument}={value} is out of range (expected {bound})."
        )
        self.operation = operation
        self.argument = argument
        self.value = value
        self.bound = bound


# ============================================================================
#                            Charset errors
# ============================================================================


class UnsupportedCharsetError(BackportError, LookupError):
    """Raised when a charset name does not resolve to a known codec."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unsupported charset: {name!r}")
        self.name = name


# ============================================================================
#                            Logging errors
# ============================================================================


class InvalidLogLevelError(BackportError, ValueError):
    """Raised when a log level name is not a standard logging level."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Invalid log level: {value!r} (expected DEBUG, INFO, WARNING, ERROR "
            "or CRITICAL)"
        )
        self.value = value
