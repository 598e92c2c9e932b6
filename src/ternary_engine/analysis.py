from __future__ import annotations

"""
Structural predicates on scale words: maximum variety, monotone-MOS
properties, MOS substitution, chirality and related measures.
"""

from enum import Enum
from typing import Optional, Sequence, Set

from .count_vector import CountVector
from .words import canonical_rotation, delete, replace, word_on_degree


class Chirality(str, Enum):
    RIGHT = "Right"
    LEFT = "Left"
    ACHIRAL = "Achiral"


def step_variety(word: Sequence[int]) -> int:
    return len(set(word))


def distinct_spectrum(word: Sequence[int], length: int) -> Set[CountVector]:
    """Distinct interval sizes of `length` steps, one subword per degree."""
    return {CountVector.from_word(word_on_degree(word, degree, length)) for degree in range(len(word))}


def maximum_variety(word: Sequence[int]) -> int:
    result = 0
    for length in range(1, len(word) // 2 + 1):
        result = max(result, len(distinct_spectrum(word, length)))
    return result


def is_mos(word: Sequence[int]) -> bool:
    return step_variety(word) == 2 and maximum_variety(word) == 2


def monotone_lm(word: Sequence[int]) -> bool:
    """L = m still gives an MOS."""
    return maximum_variety(replace(word, 1, 0)) == 2


def monotone_ms(word: Sequence[int]) -> bool:
    """m = s still gives an MOS."""
    return maximum_variety(replace(word, 2, 1)) == 2


def monotone_s0(word: Sequence[int]) -> bool:
    """s = 0 still gives an MOS."""
    return maximum_variety(delete(word, 2)) == 2


def is_mos_subst(word: Sequence[int], deleted: int, merge_from: int, merge_to: int) -> bool:
    return (
        step_variety(word) == 3
        and maximum_variety(delete(word, deleted)) == 2
        and maximum_variety(replace(word, merge_from, merge_to)) == 2
    )


def is_pairwise_mos(word: Sequence[int]) -> bool:
    """Each identification of two classes leaves an MOS."""
    return (
        step_variety(word) == 3
        and maximum_variety(replace(word, 1, 0)) == 2
        and maximum_variety(replace(word, 2, 1)) == 2
        and maximum_variety(replace(word, 2, 0)) == 2
    )


def is_strict_variety(word: Sequence[int], k: Optional[int] = None) -> bool:
    """Every interval class 1 <= l < n comes in exactly k sizes."""
    if k is None:
        k = step_variety(word)
    return all(len(distinct_spectrum(word, length)) == k for length in range(1, len(word)))


def block_balance(word: Sequence[int]) -> int:
    """Largest spread in the count of one class among same-length subwords."""
    n = len(word)
    classes = sorted(set(word))
    worst = 0
    for length in range(1, n):
        spectrum = distinct_spectrum(word, length)
        for c in classes:
            counts = [v.get(c) for v in spectrum]
            worst = max(worst, max(counts) - min(counts))
    return worst


def chirality(word: Sequence[int]) -> Chirality:
    forward = canonical_rotation(word)
    backward = canonical_rotation(tuple(reversed(tuple(word))))
    if forward < backward:
        return Chirality.RIGHT
    if forward > backward:
        return Chirality.LEFT
    return Chirality.ACHIRAL
