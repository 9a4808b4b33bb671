"""
Coupon Code Generation

Algorithm Overview:
1. Hash the seed (8 random bytes if none is given) with sha1
2. For each part position, take part_length - 1 bytes from the buffer and
   reduce each mod 32 into an alphabet index
3. Append the checkdigit for that position
4. Reject the candidate if it spells a bad word or is transposable; the
   unconsumed buffer is rehashed and the position is attempted again
5. Otherwise keep the part, drop the consumed bytes and move on
6. Join the parts with hyphens

Rejection has no upper bound unless ``max_attempts`` is given. With the
default word list a rejection is rare, but a word list that covers most
of the code space can keep the loop busy for a very long time.
"""

from typing import List, Optional, Sequence

from .alphabet import indices_to_symbols
from .badwords import BadWordFilter
from .bytestream import ByteStream
from .checkdigit import append_checkdigit, is_transposable
from .config import DELIMITER, CouponConfig, Seed, load_config
from .errors import ConfigurationError, GenerationError
from .log import get_logger, log

logger = get_logger(__name__)


def generate_parts(
    config: CouponConfig, max_attempts: Optional[int] = None
) -> List[str]:
    """
    Generate the parts of one code from a validated configuration.

    Args:
        config: Validated configuration (see ``load_config``)
        max_attempts: Give up after this many rejected candidates

    Returns:
        Parts in position order

    Raises:
        GenerationError: If ``max_attempts`` rejections were exceeded
    """
    stream = ByteStream(config.seed_bytes)
    bad_words = BadWordFilter.from_config(config)
    data_length = config.part_length - 1

    parts: List[str] = []
    rejected = 0

    while len(parts) < config.parts:
        position = len(parts) + 1
        data = [byte % 32 for byte in stream.peek(data_length)]
        indices = append_checkdigit(data, position)
        part = indices_to_symbols(indices)

        if bad_words.matches(part) or is_transposable(indices, position):
            rejected += 1
            log(logger, "debug", "Rejected candidate part", part=part, position=position)
            if max_attempts is not None and rejected > max_attempts:
                raise GenerationError(
                    f"Gave up after {rejected} rejected parts at position {position}",
                    rejected,
                )
            stream.rehash()
            continue

        stream.consume(data_length)
        parts.append(part)

    log(logger, "debug", "Generated code", parts=config.parts, rejected=rejected)
    return parts


def generate(
    seed: Optional[Seed] = None,
    parts: Optional[int] = None,
    part_length: Optional[int] = None,
    bad_words: Optional[Sequence[str]] = None,
    *,
    obfuscated: bool = True,
    config: Optional[CouponConfig] = None,
    max_attempts: Optional[int] = None,
) -> str:
    """
    Generate a coupon code.

    Args:
        seed: Bytes or text to derive the code from; the same seed and
            settings always give the same code. Random when omitted.
        parts: Number of hyphen separated parts (default 3)
        part_length: Symbols per part including the checkdigit, 2-20 (default 4)
        bad_words: Words no part may spell, rot13-encoded unless
            ``obfuscated`` is False
        obfuscated: Whether ``bad_words`` are rot13-encoded
        config: Prebuilt configuration; replaces the other settings
        max_attempts: Optional cap on rejected candidates

    Returns:
        The code, e.g. "1K7Q-CTFM-LMTC"

    Raises:
        ConfigurationError: If a setting is out of range or malformed
        GenerationError: If ``max_attempts`` was exceeded

    Examples:
        >>> generate(seed="1234567890")
        '1K7Q-CTFM-LMTC'
        >>> generate(seed="123456789A")
        'X730-KCV1-MA2G'
    """
    if config is None:
        config = load_config(
            parts=parts,
            part_length=part_length,
            seed=seed,
            bad_words=bad_words,
            obfuscated=obfuscated,
        )
    else:
        config.validate()

    if max_attempts is not None and max_attempts < 0:
        raise ConfigurationError(f"`max_attempts` must not be negative: {max_attempts!r}")

    return DELIMITER.join(generate_parts(config, max_attempts))
