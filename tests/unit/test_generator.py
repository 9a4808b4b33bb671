"""Unit tests for coupon code generation."""

import random
import re

import pytest

from couponcode.alphabet import ALPHABET, fold_similar, indices_to_symbols
from couponcode.badwords import rot13
from couponcode.bytestream import sha1
from couponcode.checkdigit import append_checkdigit, part_checkdigit
from couponcode.config import CouponConfig
from couponcode.errors import ConfigurationError, GenerationError
from couponcode.generator import generate, generate_parts
from couponcode.validator import FailureReason, validate


def test_static_sample_seeds():
    assert generate(seed="1234567890") == "1K7Q-CTFM-LMTC"
    assert generate(seed="123456789A") == "X730-KCV1-MA2G"


def test_bytes_and_text_seeds_agree():
    assert generate(seed=b"1234567890") == generate(seed="1234567890")


def test_same_seed_same_code():
    rng = random.Random(7)
    for _ in range(10):
        seed = bytes(rng.randrange(256) for _ in range(8))
        code = generate(seed=seed)
        for _ in range(5):
            assert generate(seed=seed) == code


def test_random_codes_differ():
    assert generate() != generate()


def test_default_format():
    code = generate()
    assert re.fullmatch(r"[0-9A-Z]{4}-[0-9A-Z]{4}-[0-9A-Z]{4}", code)
    assert all(ch in ALPHABET for ch in code.replace("-", ""))


@pytest.mark.parametrize("parts", [1, 2, 5, 10])
@pytest.mark.parametrize("part_length", [2, 3, 4, 7, 20])
def test_format_with_args(parts, part_length):
    code = generate(parts=parts, part_length=part_length)
    pieces = code.split("-")

    assert len(pieces) == parts
    for piece in pieces:
        assert len(piece) == part_length


def test_first_part_is_prefix_of_longer_code():
    # Later parts never change earlier ones for the same seed
    assert generate(seed="1234567890", parts=2) == "1K7Q-CTFM"
    assert generate(seed="1234567890", parts=1) == "1K7Q"


@pytest.mark.parametrize("part_length", [2, 4, 9, 20])
def test_checkdigits_are_correct(index_map, part_length):
    code = generate(parts=6, part_length=part_length)

    for position, piece in enumerate(code.split("-"), start=1):
        indices = [index_map[ch] for ch in piece]
        assert part_checkdigit(indices[:-1], position) == indices[-1]


def test_config_argument():
    config = CouponConfig(parts=2, seed=b"1234567890")
    assert generate(config=config) == "1K7Q-CTFM"
    assert generate_parts(config) == ["1K7Q", "CTFM"]


def test_bad_words_are_used_by_generate():
    assert "AR5E" in generate(seed="2160", bad_words=[rot13(w) for w in ["FORD", "FIAT"]])
    assert "AR5E" not in generate(seed="2160", bad_words=[rot13("AR5E")])
    assert "AR5E" not in generate(
        seed="2160", bad_words=[rot13(w) for w in ["FORD", "FIAT", "AR5E"]]
    )
    assert "AR5E" not in generate(seed="2160", bad_words=["ARSE"], obfuscated=False)


@pytest.mark.slow
def test_no_transposable_parts():
    for _ in range(1000):
        code = generate(parts=1)
        assert validate(code, parts=1)

        for pos in range(len(code) - 1):
            swapped = list(code)
            swapped[pos], swapped[pos + 1] = swapped[pos + 1], swapped[pos]
            swapped = "".join(swapped)

            assert swapped != code
            result = validate(swapped, parts=1)
            assert result.reason is FailureReason.PART_INVALID
            assert result.part_index == 0


@pytest.mark.slow
def test_no_transposable_parts_in_long_codes():
    for _ in range(200):
        code = generate(parts=4, part_length=6)
        pieces = code.split("-")
        for index, piece in enumerate(pieces):
            for pos in range(len(piece) - 2):
                swapped = piece[:pos] + piece[pos + 1] + piece[pos] + piece[pos + 2 :]
                candidate = "-".join(pieces[:index] + [swapped] + pieces[index + 1 :])

                result = validate(candidate, parts=4, part_length=6)
                assert not result
                assert result.part_index == index


@pytest.mark.slow
def test_default_bad_words_never_generated():
    words = {fold_similar(rot13(word)) for word in CouponConfig().bad_words}
    for _ in range(2000):
        for piece in generate().split("-"):
            assert piece not in words


@pytest.mark.slow
def test_short_bad_words_never_generated():
    # Two symbol parts make collisions with a short list frequent
    words = ["10", "A5", "2B", "C0", "1I", "ZZ", "77", "SO"]
    folded = {fold_similar(word) for word in words}

    for _ in range(500):
        code = generate(parts=5, part_length=2, bad_words=words, obfuscated=False)
        for piece in code.split("-"):
            assert piece not in folded


def test_max_attempts():
    data = [byte % 32 for byte in sha1(b"x")[:3]]
    first_candidate = indices_to_symbols(append_checkdigit(data, 1))

    with pytest.raises(GenerationError) as exc_info:
        generate(seed="x", bad_words=[first_candidate], obfuscated=False, max_attempts=0)
    assert exc_info.value.attempts == 1


def test_max_attempts_not_reached():
    assert generate(seed="1234567890", max_attempts=100) == "1K7Q-CTFM-LMTC"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"parts": 0},
        {"parts": -1},
        {"parts": 1.5},
        {"part_length": 1},
        {"part_length": 21},
        {"part_length": 120},
        {"seed": 1234},
        {"bad_words": ["NOT OK"]},
        {"max_attempts": -1},
    ],
)
def test_invalid_arguments(kwargs):
    with pytest.raises(ConfigurationError):
        generate(**kwargs)


def test_invalid_config_argument():
    with pytest.raises(ConfigurationError):
        generate(config=CouponConfig(parts=0))
