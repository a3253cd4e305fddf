"""
Checksum validator for 11-character video ids.

A token passes when two independent readings of it agree:

  - the *weight* reading adds up the atomic numbers of every element symbol
    found in the token, preferring a two-letter symbol over a one-letter one
    at each position and counting a two-letter symbol twice;
  - the *numeral* reading groups consecutive Roman numeral characters into
    runs (non-increasing values merge additively), then multiplies the runs
    together.

The numeral product selects an adjustment to the weight total, and the
adjusted total must stay at or below ``MAX_SCORE``.
"""

from __future__ import annotations

import logging
import time
from typing import List, Tuple

from ..errors import (
    InvalidLengthError,
    NumeralOverflowError,
    ValidationError,
    WeightOverflowError,
)
from ..types import ChecksumResult, TokenResult
from .tables import (
    MAX_NUMERAL_VALUE,
    MAX_SCORE,
    NUMERAL_TABLE,
    TOKEN_LENGTH,
    WEIGHT_TABLE,
)

logger = logging.getLogger(__name__)

# Numeral product -> weight adjustment. A product of 1 is handled separately.
_PRODUCT_ADJUSTMENTS = {35: 0, 7: 23, 5: 129}
_LOW_WEIGHT_CUTOFF = 49
_LOW_WEIGHT_BONUS = 152
_SPECIAL_FORMAT_BONUS = 23


def _numeral_runs(token: str) -> List[Tuple[str, int]]:
    runs: List[Tuple[str, int]] = []
    run_open = False

    for char in token:
        value = NUMERAL_TABLE.get(char)
        if value is None:
            run_open = False
            continue
        if value > MAX_NUMERAL_VALUE:
            raise NumeralOverflowError()

        if run_open:
            symbols, total = runs[-1]
            if NUMERAL_TABLE[symbols[-1]] < value:
                runs.append((char, value))
            else:
                runs[-1] = (symbols + char, total + value)
        else:
            runs.append((char, value))
        run_open = True

    return runs


def _weight_total(token: str) -> int:
    total = 0
    for i, char in enumerate(token):
        pair = token[i : i + 2]
        if len(pair) == 2 and pair in WEIGHT_TABLE:
            # Two-letter symbols count twice.
            total += 2 * WEIGHT_TABLE[pair]
            continue
        total += WEIGHT_TABLE.get(char, 0)
    return total


def numeral_product(token: str) -> int:
    """Multiply the values of every numeral run in ``token`` (1 if there are none)."""
    product = 1
    for _, value in _numeral_runs(token):
        product *= value
    return product


def validate_id(token: str) -> ChecksumResult:
    """
    Validate a single video id.

    Raises:
        InvalidLengthError: token is not exactly 11 characters
        NumeralOverflowError: a numeral symbol is worth more than 35, or the
            numeral product has no defined adjustment
        WeightOverflowError: the adjusted weight total exceeds 200
    """
    if len(token) != TOKEN_LENGTH:
        raise InvalidLengthError()

    product = numeral_product(token)
    total = _weight_total(token)
    special_format = False

    if product == 1:
        if total < _LOW_WEIGHT_CUTOFF:
            total += _LOW_WEIGHT_BONUS
        else:
            special_format = True
            total += _SPECIAL_FORMAT_BONUS
    elif product in _PRODUCT_ADJUSTMENTS:
        total += _PRODUCT_ADJUSTMENTS[product]
    else:
        raise NumeralOverflowError()

    if total > MAX_SCORE:
        raise WeightOverflowError()

    return ChecksumResult(special_format=special_format, score=total)


def check_id(token: str) -> TokenResult:
    """Validate ``token`` and return a tagged result instead of raising."""
    start_time = time.time()
    try:
        result = validate_id(token)
    except ValidationError as exc:
        logger.debug("Token %s rejected: %s", token, exc)
        return TokenResult(
            token=token,
            error=str(exc),
            error_kind=exc.kind,
            latency_ms=(time.time() - start_time) * 1000,
        )
    return TokenResult(
        token=token,
        result=result,
        latency_ms=(time.time() - start_time) * 1000,
    )
