"""Exceptions raised by edetect filters and backends."""

from typing import Optional, Tuple


class EdgeDetectError(Exception):
    """Base exception for all edetect errors."""

    pass


class ConfigurationError(EdgeDetectError, ValueError):
    """
    Raised when a filter, kernel, image or backend is misconfigured.

    Covers negative radii, kernels whose length does not match their radius,
    invalid strides and unknown backend names. Raised at construction or
    kernel-generation time; values are never silently clamped.
    """

    pass


class DimensionMismatch(EdgeDetectError, ValueError):
    """
    Raised when the destination image does not match the source dimensions.

    Always raised before any destination pixel is written.
    """

    def __init__(
        self,
        expected: Tuple[int, int],
        actual: Tuple[int, int],
        message: Optional[str] = None,
    ):
        self.expected = expected
        self.actual = actual

        if message is None:
            message = (
                f"Destination is {actual[0]}x{actual[1]} but source is "
                f"{expected[0]}x{expected[1]}."
            )

        super().__init__(message)


class BackendFailure(EdgeDetectError, RuntimeError):
    """
    Raised when an execution backend cannot run a pass.

    Typically a data-parallel device that is unavailable or out of memory.
    The pass is not retried; the destination contents are undefined.
    """

    def __init__(self, backend: str, message: Optional[str] = None):
        self.backend = backend

        if message is None:
            message = f"Backend '{backend}' failed to execute the pass."

        super().__init__(message)
