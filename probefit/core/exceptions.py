"""Errors raised by the geometry fitting engine."""

from typing import Optional


class FitError(ValueError):
    """Base class for fitting failures.

    Fits either return a complete result or raise; there are no partial results.
    """

    def __init__(self, message: str, operation: Optional[str] = None) -> None:
        super().__init__(message)
        self.operation = operation


class InsufficientPointsError(FitError):
    """Fewer points were supplied than the operation's minimum."""

    def __init__(self, operation: str, required: int, received: int) -> None:
        super().__init__(
            f"{operation}: need at least {required} points, got {received}",
            operation,
        )
        self.required = required
        self.received = received


class WrongPointCountError(FitError):
    """An exact solver received a count other than the one it requires."""

    def __init__(self, operation: str, required: int, received: int) -> None:
        super().__init__(
            f"{operation}: need exactly {required} points, got {received}",
            operation,
        )
        self.required = required
        self.received = received


class CollinearPointsError(FitError):
    """The configuration is collinear, so the primitive is not determined."""

    def __init__(self, operation: str, value: float) -> None:
        super().__init__(
            f"{operation}: points are collinear (|{value:.3e}| below tolerance)",
            operation,
        )
        self.value = value


class CoincidentPointsError(FitError):
    """The points coincide, so no direction can be derived from them."""

    def __init__(self, operation: str, value: float) -> None:
        super().__init__(
            f"{operation}: points are coincident (|{value:.3e}| below tolerance)",
            operation,
        )
        self.value = value
