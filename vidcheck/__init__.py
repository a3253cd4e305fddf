"""vidcheck: checksum validation of short video ids."""

from .checksum import check_id, validate_id
from .parallel import BatchResult, BatchRunner, run_batch_sync
from .types import ChecksumResult, TokenResult, ValidationErrorKind

__all__ = [
    "BatchResult",
    "BatchRunner",
    "ChecksumResult",
    "TokenResult",
    "ValidationErrorKind",
    "check_id",
    "run_batch_sync",
    "validate_id",
]
