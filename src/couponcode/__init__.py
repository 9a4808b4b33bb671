"""
couponcode - human enterable coupon codes

A coupon code is a few groups of letters and digits ("parts") separated by
hyphens, meant to be typed in by a person. A 3 part code with 4 characters
per part looks like this:

    1K7Q-CTFM-LMTC

Main Features:
- Codes validate regardless of case and separators
- The letters O, I, Z and S are never generated since they look like
  0, 1, 2 and 5; when typed anyway they are read as those digits
- The last character of every part is a checkdigit, so validation reports
  which part was mistyped
- Parts that spell a word from a (rot13-encoded) bad word list are never
  generated
- Parts where swapping two neighbouring characters would still validate
  are never generated

Example Usage:
    from couponcode import generate, validate

    code = generate()                          # random, e.g. 5UMN-WBKJ-2MCA
    code = generate(seed="1234567890")         # 1K7Q-CTFM-LMTC
    code = generate(parts=5, part_length=5)

    result = validate("i9oD-V467-8Dsz")
    result.ok, result.code                     # True, "190D-V467-8D52"

    result = validate("1K7Q-CTFM")
    result.reason, result.actual_parts         # PARTS_COUNT_MISMATCH, 2
"""

from .alphabet import ALPHABET, SIMILAR_CHARACTERS
from .badwords import BadWordFilter, bad_word_pattern, rot13
from .checkdigit import is_transposable, part_checkdigit
from .config import (
    DEFAULT_BAD_WORDS,
    DEFAULT_PART_LENGTH,
    DEFAULT_PARTS,
    DELIMITER,
    CouponConfig,
    load_config,
)
from .errors import (
    ConfigurationError,
    CouponCodeError,
    GenerationError,
    UnmappableSymbolError,
)
from .generator import generate
from .security import calculate_code_space, calculate_security_bits, get_code_info
from .validator import FailureReason, ValidationResult, is_valid, normalize, validate

# Public API
__all__ = [
    # Core functions
    "generate",
    "validate",
    "is_valid",
    "normalize",
    "rot13",
    "bad_word_pattern",
    "part_checkdigit",
    "is_transposable",
    # Types
    "BadWordFilter",
    "CouponConfig",
    "FailureReason",
    "ValidationResult",
    "load_config",
    # Analysis
    "calculate_code_space",
    "calculate_security_bits",
    "get_code_info",
    # Errors
    "CouponCodeError",
    "ConfigurationError",
    "GenerationError",
    "UnmappableSymbolError",
    # Constants
    "ALPHABET",
    "SIMILAR_CHARACTERS",
    "DELIMITER",
    "DEFAULT_PARTS",
    "DEFAULT_PART_LENGTH",
    "DEFAULT_BAD_WORDS",
]

__version__ = "0.1.0"
__description__ = "Generate and validate human enterable coupon codes"
