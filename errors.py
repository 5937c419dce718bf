from __future__ import annotations


class SDokuError(Exception):
    """Base class for every error raised by the solver modules."""


class ValidationError(SDokuError, ValueError):
    """Malformed input: hints, solution limit, or dimensions."""


class ShapeError(ValidationError):
    """A sequence or matrix does not have the 9 or 81 entries required."""


class ConfigurationError(SDokuError):
    """A region or shape definition is internally inconsistent."""


class UnsatisfiableError(SDokuError):
    """Two constraints on the same variable can never hold together."""
