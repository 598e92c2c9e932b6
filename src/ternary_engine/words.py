from __future__ import annotations

"""
Word and rotation utilities.

A word is a tuple of step-class ids (0 = L, 1 = m, 2 = s). Most helpers here
are generic over any sequence of comparable, hashable items so the same code
serves scale words and chains of count vectors.
"""

from typing import Dict, List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")

# Letters used to render a word, keyed by the number of classes present.
STEP_LETTERS: Dict[int, str] = {1: "X", 2: "Ls", 3: "Lms"}
# Accepted input letters, from largest step to smallest.
SIZE_ORDER = "LMms"


def rotate(seq: Sequence[T], k: int) -> Tuple[T, ...]:
    """Cyclic left shift: rotate(w, k)[0] == w[k mod n]."""
    n = len(seq)
    if n == 0:
        return tuple(seq)
    k %= n
    return tuple(seq[k:]) + tuple(seq[:k])


def compare(a: Sequence[int], b: Sequence[int]) -> int:
    """Lexicographic three-way comparison; a proper prefix sorts first."""
    ta, tb = tuple(a), tuple(b)
    return (ta > tb) - (ta < tb)


def booth(word: Sequence[int]) -> int:
    """Starting index of the lexicographically least rotation (Booth, O(n))."""
    n = len(word)
    if n == 0:
        return 0
    failure = [-1] * (2 * n)
    k = 0
    for j in range(1, 2 * n):
        sj = word[j % n]
        i = failure[j - k - 1]
        while i != -1 and sj != word[(k + i + 1) % n]:
            if sj < word[(k + i + 1) % n]:
                k = j - i - 1
            i = failure[i]
        if sj != word[(k + i + 1) % n]:
            # here i == -1
            if sj < word[k % n]:
                k = j
            failure[j - k] = -1
        else:
            failure[j - k] = i + 1
    return k % n


def canonical_rotation(word: Sequence[int]) -> Tuple[int, ...]:
    """Brightest mode: the lexicographically least rotation."""
    return rotate(word, booth(word))


def period_pattern(seq: Sequence[T]) -> Tuple[T, ...]:
    """Smallest block that tiles the sequence a whole number of times."""
    n = len(seq)
    for length in range(1, n // 2 + 1):
        if n % length == 0 and all(seq[i] == seq[i % length] for i in range(length, n)):
            return tuple(seq[:length])
    return tuple(seq)


def weak_period_pattern(seq: Sequence[T]) -> Tuple[T, ...]:
    """Smallest prefix that reproduces the sequence by cyclic indexing.

    Unlike period_pattern the prefix length need not divide len(seq), so
    (a, b, a, b, a) reduces to (a, b).
    """
    n = len(seq)
    for length in range(1, n + 1):
        if all(seq[i] == seq[i % length] for i in range(length, n)):
            return tuple(seq[:length])
    return tuple(seq)


def rotations(seq: Sequence[T]) -> List[Tuple[T, ...]]:
    """All distinct rotations, starting from the sequence itself."""
    return [rotate(seq, i) for i in range(len(period_pattern(seq)))]


def rotation_offset(target: Sequence[T], seq: Sequence[T]) -> Optional[int]:
    """Smallest r with rotate(seq, r) == target, or None."""
    if len(target) != len(seq):
        return None
    goal = tuple(target)
    for r in range(max(1, len(seq))):
        if rotate(seq, r) == goal:
            return r
    return None


def word_on_degree(word: Sequence[T], degree: int, length: int) -> Tuple[T, ...]:
    """Subword of the given length starting on the given degree, wrapping around."""
    n = len(word)
    if n == 0 or length <= 0:
        return ()
    rotated = rotate(word, degree)
    whole, rest = divmod(length, n)
    return rotated * whole + rotated[:rest]


def replace(word: Sequence[int], old: int, new: int) -> Tuple[int, ...]:
    return tuple(new if x == old else x for x in word)


def delete(word: Sequence[int], step_class: int) -> Tuple[int, ...]:
    return tuple(x for x in word if x != step_class)


def subst(template: Sequence[int], x: int, filler: Sequence[int]) -> Tuple[int, ...]:
    """Replace the i-th occurrence of `x` by filler[i % len(filler)].

    An empty filler deletes every occurrence.
    """
    if not filler:
        return delete(template, x)
    out: List[int] = []
    i = 0
    for letter in template:
        if letter == x:
            out.append(filler[i % len(filler)])
            i += 1
        else:
            out.append(letter)
    return tuple(out)


def compress_classes(word: Sequence[int]) -> Tuple[int, ...]:
    """Renumber the classes present to 0..k-1, keeping their order."""
    present = sorted(set(word))
    index = {c: i for i, c in enumerate(present)}
    return tuple(index[c] for c in word)


def string_to_word(text: str) -> Tuple[int, ...]:
    """Parse a letter string such as "LmLsLmL" into step-class ids.

    Symbols are numbered by rank among those present, so "LLs" and "Lm" are
    both two-class words. Any word made of a single repeated symbol is
    accepted as a one-class word.
    """
    symbols = [ch for ch in text if not ch.isspace()]
    if not symbols:
        raise ValueError("word must contain at least one step")
    distinct = set(symbols)
    if len(distinct) > 3:
        raise ValueError(f"word has {len(distinct)} distinct step sizes; at most 3 are supported")
    if len(distinct) == 1:
        return (0,) * len(symbols)
    unknown = sorted(distinct - set(SIZE_ORDER))
    if unknown:
        raise ValueError(f"unknown step symbol(s) {''.join(unknown)!r}; use letters from {SIZE_ORDER!r}")
    ranked = sorted(distinct, key=SIZE_ORDER.index)
    index = {sym: i for i, sym in enumerate(ranked)}
    return tuple(index[sym] for sym in symbols)


def word_to_string(word: Sequence[int]) -> str:
    if not word:
        return ""
    present = sorted(set(word))
    letters = STEP_LETTERS[len(present)]
    index = {c: letters[i] for i, c in enumerate(present)}
    return "".join(index[c] for c in word)
