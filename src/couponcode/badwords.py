"""
Bad Word Filtering

Generated parts are matched against a list of words nobody wants to find
in a coupon. The list is kept rot13-encoded in configuration. Matching is
whole-word and treats each confusable pair (0/O, 1/I, 2/Z, 5/S) as the
same character, so "P00P" is caught by "POOP".
"""

import codecs
import re
from typing import Iterable, Optional, Sequence

from .config import CouponConfig, load_config
from .log import get_logger, log

logger = get_logger(__name__)

CONFUSABLE_CLASSES = {
    "0": "[0O]",
    "O": "[0O]",
    "1": "[I1]",
    "I": "[I1]",
    "2": "[Z2]",
    "Z": "[Z2]",
    "5": "[S5]",
    "S": "[S5]",
}

_NON_ALPHANUMERIC_RE = re.compile(r"[^0-9A-Z]+")
# Alternation of nothing: never matches
_NEVER_MATCH = re.compile(r"(?!)")


def rot13(text: str) -> str:
    """
    Rotate every ASCII letter 13 places, keeping case.

    Anything that is not a letter passes through unchanged, and applying
    the transform twice returns the original text.

    Examples:
        >>> rot13("Hello World!")
        'Uryyb Jbeyq!'
    """
    return codecs.encode(text, "rot_13")


def word_to_regex(word: str) -> str:
    """Whole-word regex source for one plain-text bad word ('' if nothing is left)."""
    cleaned = _NON_ALPHANUMERIC_RE.sub("", word.upper())
    if not cleaned:
        return ""
    body = "".join(CONFUSABLE_CLASSES.get(ch, ch) for ch in cleaned)
    return rf"\b{body}\b"


def build_bad_word_pattern(words: Iterable[str]) -> re.Pattern:
    """Compile plain-text bad words into one whole-word matcher."""
    sources = [source for source in (word_to_regex(word) for word in words) if source]
    if not sources:
        return _NEVER_MATCH
    return re.compile("|".join(sources))


class BadWordFilter:
    """Rejects parts that spell a bad word."""

    def __init__(self, words: Sequence[str]):
        self.words = list(words)
        self.pattern = build_bad_word_pattern(self.words)

    @classmethod
    def from_config(cls, config: CouponConfig) -> "BadWordFilter":
        words = config.bad_words
        if config.obfuscated:
            words = [rot13(word) for word in words]

        too_long = [word for word in words if len(word) > config.part_length]
        if too_long:
            log(
                logger,
                "warning",
                "Bad words longer than a part can never match",
                count=len(too_long),
                part_length=config.part_length,
            )
        return cls(words)

    def matches(self, part: str) -> bool:
        return self.pattern.search(part) is not None

    __call__ = matches


def bad_word_pattern(
    bad_words: Optional[Sequence[str]] = None, obfuscated: bool = True
) -> re.Pattern:
    """
    Compiled matcher for the configured bad words.

    Examples:
        >>> bool(bad_word_pattern().search("P00P"))
        True
        >>> bool(bad_word_pattern().search("P00P1E"))
        False
    """
    config = load_config(bad_words=bad_words, obfuscated=obfuscated)
    return BadWordFilter.from_config(config).pattern
