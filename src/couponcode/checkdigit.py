"""
Checkdigit and Transposition Detection

The checkdigit of a part is a fold over its data symbol indices seeded
with the part's 1-based position in the code:

    acc = position
    for i in data: acc = (acc * 19 + i) % 31

Seeding with the position means a valid part moved to another position
no longer validates. A part is transposable when swapping two adjacent
symbols (the checkdigit included) still yields a valid part; such parts
are never generated.
"""

from typing import List, Sequence


def part_checkdigit(indices: Sequence[int], position: int) -> int:
    """Checkdigit index (0-30) for the data indices of the part at ``position``."""
    acc = position
    for index in indices:
        acc = (acc * 19 + index) % 31
    return acc


def verify_part(indices: Sequence[int], position: int) -> bool:
    """True if the last index is the checkdigit of the ones before it."""
    if len(indices) < 2:
        return False
    return part_checkdigit(indices[:-1], position) == indices[-1]


def append_checkdigit(indices: Sequence[int], position: int) -> List[int]:
    return list(indices) + [part_checkdigit(indices, position)]


def transpositions(indices: Sequence[int]) -> List[List[int]]:
    """Every variant of ``indices`` with one adjacent pair swapped."""
    variants = []
    for pos in range(len(indices) - 1):
        swapped = list(indices)
        swapped[pos], swapped[pos + 1] = swapped[pos + 1], swapped[pos]
        variants.append(swapped)
    return variants


def is_transposable(indices: Sequence[int], position: int) -> bool:
    """
    Check whether a full part (data + checkdigit) survives an adjacent swap.

    Args:
        indices: Data indices followed by the checkdigit index
        position: 1-based position of the part in the code

    Returns:
        True if any adjacent swap still satisfies the checkdigit
    """
    return any(verify_part(swapped, position) for swapped in transpositions(indices))
