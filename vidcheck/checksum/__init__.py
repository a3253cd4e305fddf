"""Checksum validation of video ids."""

from .tables import NUMERAL_TABLE, WEIGHT_TABLE
from .validator import check_id, validate_id

__all__ = [
    "NUMERAL_TABLE",
    "WEIGHT_TABLE",
    "check_id",
    "validate_id",
]
