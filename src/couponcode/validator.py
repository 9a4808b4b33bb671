"""
Coupon Code Validation

A code entered by a person is normalized before it is checked:

- It is uppercased
- Every character outside 0-9 and A-Z is removed, so any separator (or
  none at all) is accepted
- The confusable letters O, I, Z and S are read as 0, 1, 2 and 5

The normalized symbols are cut into parts of ``part_length`` and every
part's checkdigit is verified against its position. A failed validation
is an ordinary result that says which part is wrong, not an exception.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .alphabet import fold_similar, symbols_to_indices
from .checkdigit import verify_part
from .config import DELIMITER, CouponConfig, load_config
from .errors import UnmappableSymbolError
from .log import get_logger, log

logger = get_logger(__name__)

_NON_ALPHANUMERIC_RE = re.compile(r"[^0-9A-Z]+")


class FailureReason(str, Enum):
    PARTS_COUNT_MISMATCH = "parts_count_mismatch"
    PART_INVALID = "part_invalid"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of ``validate``; truthy when the code is valid."""

    code: Optional[str] = None
    reason: Optional[FailureReason] = None
    actual_parts: Optional[int] = None
    part_index: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, code: str) -> "ValidationResult":
        return cls(code=code)

    @classmethod
    def parts_count_mismatch(cls, actual_parts: int) -> "ValidationResult":
        return cls(
            reason=FailureReason.PARTS_COUNT_MISMATCH, actual_parts=actual_parts
        )

    @classmethod
    def part_invalid(cls, part_index: int) -> "ValidationResult":
        return cls(reason=FailureReason.PART_INVALID, part_index=part_index)

    def describe(self) -> str:
        """Human readable summary, suitable for showing to the person typing the code."""
        if self.ok:
            return f"Valid code: {self.code}"
        if self.reason is FailureReason.PARTS_COUNT_MISMATCH:
            return f"Wrong number of parts: found {self.actual_parts}"
        return f"Part {self.part_index + 1} is invalid"


def normalize(code: str) -> str:
    """
    Canonical symbol string for user input.

    Examples:
        >>> normalize("i9oD-V467-8Dsz")
        '190DV4678D52'
    """
    return fold_similar(_NON_ALPHANUMERIC_RE.sub("", code.upper()))


def split_parts(symbols: str, part_length: int) -> List[str]:
    """Cut into ``part_length`` chunks, dropping a trailing partial chunk."""
    whole = len(symbols) - len(symbols) % part_length
    return [symbols[i : i + part_length] for i in range(0, whole, part_length)]


def validate(
    code: str,
    parts: Optional[int] = None,
    part_length: Optional[int] = None,
    *,
    config: Optional[CouponConfig] = None,
) -> ValidationResult:
    """
    Validate a code as entered by a person.

    Args:
        code: The entered code, any case and any separators
        parts: Expected number of parts (default 3)
        part_length: Expected symbols per part (default 4)
        config: Prebuilt configuration; replaces ``parts`` and ``part_length``

    Returns:
        ValidationResult carrying the canonical code on success, the
        number of parts found on a count mismatch, or the zero-based index
        of the first part with a wrong checkdigit

    Raises:
        ConfigurationError: If ``parts`` or ``part_length`` is out of range

    Examples:
        >>> validate("i9oD-V467-8Dsz").code
        '190D-V467-8D52'
        >>> validate("1K7Q-CTFM").actual_parts
        2
    """
    if config is None:
        # Bad words play no part in validation
        config = load_config(parts=parts, part_length=part_length, bad_words=[])
    else:
        config.validate()

    chunks = split_parts(normalize(code), config.part_length)

    if len(chunks) != config.parts:
        log(
            logger,
            "debug",
            "Part count mismatch",
            expected=config.parts,
            actual=len(chunks),
        )
        return ValidationResult.parts_count_mismatch(len(chunks))

    for part_index, chunk in enumerate(chunks):
        try:
            indices = symbols_to_indices(chunk)
        except UnmappableSymbolError as e:
            log(logger, "debug", "Unmappable symbol", symbol=e.symbol, part=part_index)
            return ValidationResult.part_invalid(part_index)

        if not verify_part(indices, part_index + 1):
            log(logger, "debug", "Checkdigit mismatch", part=part_index)
            return ValidationResult.part_invalid(part_index)

    return ValidationResult.success(DELIMITER.join(chunks))


def is_valid(
    code: str,
    parts: Optional[int] = None,
    part_length: Optional[int] = None,
    *,
    config: Optional[CouponConfig] = None,
) -> bool:
    return validate(code, parts, part_length, config=config).ok
