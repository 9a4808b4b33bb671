"""
Coupon Code Configuration

Defaults for code generation and validation, optional overrides from the
environment, and validation of the resulting settings. Everything the
algorithms need is passed to them as a ``CouponConfig`` value built by
``load_config``; nothing reads the environment after that.

Environment variables:
- COUPONCODE_PARTS: number of parts per code
- COUPONCODE_PART_LENGTH: symbols per part, checkdigit included
- COUPONCODE_BAD_WORDS: rot13-encoded bad words, comma or space separated
"""

import os
import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from .errors import ConfigurationError

DELIMITER = "-"
DEFAULT_PARTS = 3
DEFAULT_PART_LENGTH = 4
MIN_PART_LENGTH = 2
# sha1 yields 20 bytes per rehash
MAX_PART_LENGTH = 20
PLAINTEXT_SIZE = 8

# rot13-encoded so the word list itself stays clean
DEFAULT_BAD_WORDS = (
    "SHPX PHAG JNAX JNAT "
    "CVFF PBPX FUVG GJNG "
    "GVGF SNEG URYY ZHSS "
    "QVPX XABO NEFR FUNT "
    "GBFF FYHG GHEQ FYNT "
    "PENC CBBC OHGG SRPX "
    "OBBO WVFZ WVMM CUNG"
).split()

_BAD_WORD_RE = re.compile(r"[0-9A-Za-z]+")
_ENV_SPLIT_RE = re.compile(r"[\s,]+")

Seed = Union[bytes, str]


@dataclass
class CouponConfig:
    """Validated settings for one generate or validate call."""

    parts: int = DEFAULT_PARTS
    part_length: int = DEFAULT_PART_LENGTH
    seed: Optional[Seed] = None
    bad_words: List[str] = field(default_factory=lambda: list(DEFAULT_BAD_WORDS))
    obfuscated: bool = True

    def validate(self) -> "CouponConfig":
        """Raise ConfigurationError unless every setting is usable."""
        if (
            isinstance(self.parts, bool)
            or not isinstance(self.parts, int)
            or self.parts < 1
        ):
            raise ConfigurationError(
                f"`parts` must be a positive integer: {self.parts!r}"
            )

        if (
            isinstance(self.part_length, bool)
            or not isinstance(self.part_length, int)
            or not MIN_PART_LENGTH <= self.part_length <= MAX_PART_LENGTH
        ):
            raise ConfigurationError(
                f"`part_length` must be an integer within {MIN_PART_LENGTH} and "
                f"{MAX_PART_LENGTH} inclusively: {self.part_length!r}"
            )

        if self.seed is not None and not isinstance(self.seed, (bytes, str)):
            raise ConfigurationError(
                f"`seed` must be bytes or str: {self.seed!r}"
            )

        if isinstance(self.bad_words, (str, bytes)) or not isinstance(
            self.bad_words, (list, tuple)
        ):
            raise ConfigurationError(
                f"`bad_words` must be a list of strings: {self.bad_words!r}"
            )
        malformed = [
            word
            for word in self.bad_words
            if not isinstance(word, str) or not _BAD_WORD_RE.fullmatch(word)
        ]
        if malformed:
            raise ConfigurationError(
                f"`bad_words` must only contain letters and numbers: {malformed!r}"
            )

        return self

    @property
    def seed_bytes(self) -> Optional[bytes]:
        if isinstance(self.seed, str):
            return self.seed.encode("utf-8")
        return self.seed


def _env_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer: {value!r}") from None


def _env_words(name: str) -> Optional[List[str]]:
    value = os.getenv(name)
    if value is None:
        return None
    return [word for word in _ENV_SPLIT_RE.split(value) if word]


def load_config(
    parts: Optional[int] = None,
    part_length: Optional[int] = None,
    seed: Optional[Seed] = None,
    bad_words: Optional[Sequence[str]] = None,
    obfuscated: bool = True,
) -> CouponConfig:
    """
    Build a validated configuration.

    Each setting comes from the explicit argument if given, else from the
    environment, else from the module default.

    Raises:
        ConfigurationError: If any resulting setting is out of range or malformed
    """
    if parts is None:
        parts = _env_int("COUPONCODE_PARTS")
    if part_length is None:
        part_length = _env_int("COUPONCODE_PART_LENGTH")
    if bad_words is None:
        # Environment and default words are always stored encoded
        bad_words = _env_words("COUPONCODE_BAD_WORDS")
        if bad_words is None:
            bad_words = list(DEFAULT_BAD_WORDS)
        obfuscated = True

    config = CouponConfig(
        parts=DEFAULT_PARTS if parts is None else parts,
        part_length=DEFAULT_PART_LENGTH if part_length is None else part_length,
        seed=seed,
        bad_words=bad_words,
        obfuscated=obfuscated,
    )
    return config.validate()
