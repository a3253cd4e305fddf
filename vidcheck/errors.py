from __future__ import annotations

from .types import ValidationErrorKind


class ValidationError(ValueError):
    """Base class for checksum validation failures."""

    kind: ValidationErrorKind
    default_message = "Video ID failed validation."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidLengthError(ValidationError):
    kind = ValidationErrorKind.INVALID_LENGTH
    default_message = "Video ID was not the right length."


class NumeralOverflowError(ValidationError):
    kind = ValidationErrorKind.NUMERAL_OVERFLOW
    default_message = "Roman numerals exceeded limits."


class WeightOverflowError(ValidationError):
    kind = ValidationErrorKind.WEIGHT_OVERFLOW
    default_message = "Accumulated attomic number exceeded limits."


class InputFileError(OSError):
    """Raised when the input file cannot be opened or read."""


class ConfigError(ValueError):
    """Raised for malformed run configuration files."""
