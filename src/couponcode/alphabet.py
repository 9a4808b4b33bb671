"""
Coupon Alphabet

The 32 symbols a coupon code is written in, and the folding applied to
user input before lookup. The letters O, I, Z and S are not part of the
alphabet: they are read back as 0, 1, 2 and 5.
"""

from typing import Dict, List, Sequence

from .errors import UnmappableSymbolError

ALPHABET = "0123456789ABCDEFGHJKLMNPQRTUVWXY"
if len(ALPHABET) != 32 or len(set(ALPHABET)) != 32:
    raise RuntimeError(f"ALPHABET must be 32 unique symbols (got {len(ALPHABET)})")

# Confusable letter -> canonical digit
SIMILAR_CHARACTERS: Dict[str, str] = {
    "O": "0",
    "I": "1",
    "Z": "2",
    "S": "5",
}

_ALPHABET_INV = {ch: i for i, ch in enumerate(ALPHABET)}


def symbol_to_index(symbol: str) -> int:
    """Map an alphabet symbol to its index (0-31)."""
    try:
        return _ALPHABET_INV[symbol]
    except KeyError:
        raise UnmappableSymbolError(symbol) from None


def index_to_symbol(index: int) -> str:
    """Map an index (0-31) to its alphabet symbol."""
    if not 0 <= index < len(ALPHABET):
        raise ValueError(f"Alphabet index out of range: {index}")
    return ALPHABET[index]


def symbols_to_indices(symbols: str) -> List[int]:
    return [symbol_to_index(ch) for ch in symbols]


def indices_to_symbols(indices: Sequence[int]) -> str:
    return "".join(index_to_symbol(i) for i in indices)


def fold_similar(text: str) -> str:
    """Replace O, I, Z and S with 0, 1, 2 and 5."""
    return "".join(SIMILAR_CHARACTERS.get(ch, ch) for ch in text)
