from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ValidationErrorKind(Enum):
    """Reason a token was rejected by the checksum validator."""

    INVALID_LENGTH = "invalid_length"
    NUMERAL_OVERFLOW = "numeral_overflow"
    WEIGHT_OVERFLOW = "weight_overflow"


class FormatLabel(Enum):
    SPECIAL = "XXXV"
    STANDARD = "V VII"


@dataclass(frozen=True)
class ChecksumResult:
    special_format: bool
    score: int

    @property
    def label(self) -> FormatLabel:
        return FormatLabel.SPECIAL if self.special_format else FormatLabel.STANDARD


@dataclass
class TokenResult:
    """
    Outcome of validating one token inside a batch.

    Exactly one of ``result`` and ``error`` is set. ``error_kind`` is None for
    failures that did not come from the validator (timeouts, unexpected errors).
    """

    token: str
    result: Optional[ChecksumResult] = None
    error: Optional[str] = None
    error_kind: Optional[ValidationErrorKind] = None
    latency_ms: float = 0.0

    @property
    def success(self) -> bool:
        return self.result is not None
