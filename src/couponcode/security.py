"""
Code Space Analysis

Rough numbers for choosing ``parts`` and ``part_length``: how many
distinct codes a configuration can produce and how hard a code is to
guess. Each data symbol carries 5 bits (32 symbols); the checkdigit
carries none. Rejection of bad words and transposable parts shrinks the
real space slightly, so these figures are upper bounds.
"""

import math
from typing import Any, Dict, List, Tuple

from .alphabet import ALPHABET
from .config import CouponConfig
from .generator import generate

BITS_PER_SYMBOL = math.log2(len(ALPHABET))


def calculate_code_space(parts: int, part_length: int) -> int:
    """Number of distinct data symbol combinations for a configuration."""
    CouponConfig(parts=parts, part_length=part_length, bad_words=[]).validate()
    return len(ALPHABET) ** ((part_length - 1) * parts)


def calculate_security_bits(parts: int, part_length: int) -> Tuple[float, List[float]]:
    """
    Calculate guessing resistance in bits.

    Returns:
        Tuple of (total_security_bits, per_part_security_bits)
    """
    CouponConfig(parts=parts, part_length=part_length, bad_words=[]).validate()
    part_bits = [(part_length - 1) * BITS_PER_SYMBOL for _ in range(parts)]
    return sum(part_bits), part_bits


def get_code_info(parts: int, part_length: int) -> Dict[str, Any]:
    """
    Get information about a code configuration.

    Args:
        parts: Number of parts
        part_length: Symbols per part including the checkdigit

    Returns:
        Dictionary with code layout and analysis
    """
    total_bits, part_bits = calculate_security_bits(parts, part_length)
    code_space = calculate_code_space(parts, part_length)

    return {
        "parts": parts,
        "part_length": part_length,
        "pattern": [part_length] * parts,
        "data_characters": (part_length - 1) * parts,
        "total_characters": part_length * parts,
        "display_length": part_length * parts + parts - 1,  # Including hyphens
        "code_space": code_space,
        "security_bits": total_bits,
        "part_security_bits": part_bits,
        # A random guess passes one part's checkdigit with probability 1/31
        "random_part_pass_rate": 1 / 31,
        "example": generate(config=CouponConfig(parts, part_length, seed=b"example")),
    }
