"""Custom exception hierarchy for climatestats."""

from __future__ import annotations


class ClimateError(Exception):
    """Base exception for all climatestats errors."""


class ClimateConfigError(ClimateError):
    """Invalid or missing configuration."""


class ClimateInputError(ClimateError):
    """An input source could not be opened.

    Raised per file. Callers processing several sources report it and
    continue with the next one.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str = "",
        index: int | None = None,
    ) -> None:
        self.path = path
        self.index = index
        super().__init__(message)


class ClimateInvariantError(ClimateError):
    """Aggregation state is internally inconsistent.

    Only raised when a state with zero folded records is rendered, which
    cannot happen through :meth:`StateAggregator.apply`.
    """

    def __init__(self, message: str, *, code: str = "") -> None:
        self.code = code
        super().__init__(message)
