"""Unit tests for the coupon alphabet and confusable folding."""

import pytest

from couponcode.alphabet import (
    ALPHABET,
    fold_similar,
    index_to_symbol,
    indices_to_symbols,
    symbol_to_index,
    symbols_to_indices,
)
from couponcode.errors import UnmappableSymbolError


def test_alphabet_shape():
    assert len(ALPHABET) == 32
    assert len(set(ALPHABET)) == 32
    for ch in "OISZ":
        assert ch not in ALPHABET, f"{ch} looks like a digit and must not be generated"


def test_index_mapping_is_bijective():
    for index, symbol in enumerate(ALPHABET):
        assert symbol_to_index(symbol) == index
        assert index_to_symbol(index) == symbol


def test_sequences():
    assert symbols_to_indices("1K7Q") == [1, 19, 7, 24]
    assert indices_to_symbols([1, 19, 7, 24]) == "1K7Q"


@pytest.mark.parametrize("symbol", ["O", "I", "S", "Z", "a", "-", ""])
def test_unmappable_symbol(symbol):
    with pytest.raises(UnmappableSymbolError) as exc_info:
        symbol_to_index(symbol)
    assert exc_info.value.symbol == symbol
    # Still a KeyError for callers treating the alphabet as a mapping
    assert isinstance(exc_info.value, KeyError)


@pytest.mark.parametrize("index", [-1, 32, 100])
def test_index_out_of_range(index):
    with pytest.raises(ValueError):
        index_to_symbol(index)


def test_fold_similar():
    assert fold_similar("OIZS") == "0125"
    assert fold_similar("POOP") == "P00P"
    assert fold_similar("1K7Q") == "1K7Q"
