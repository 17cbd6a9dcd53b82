"""Project-wide custom exceptions."""

from __future__ import annotations


class StatementCLIError(Exception):
    """Base exception for the statement CLI suite."""


class ConfigurationError(StatementCLIError):
    """Raised when configuration loading or validation fails."""


class InputError(StatementCLIError):
    """Raised when a statement file cannot be read or decoded."""


class UnsupportedFormatError(StatementCLIError):
    """Raised in strict mode when a file matches no known bank format."""
