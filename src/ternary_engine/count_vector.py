from __future__ import annotations

"""
Count vectors over step classes.

A count vector records how many steps of each class an interval contains
(or, for differences of intervals, a signed count). The system never has
more than three step classes, so vectors are fixed 3-slot tuples indexed by
class id 0 (L), 1 (m) and 2 (s).
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Sequence, Tuple

NUM_CLASSES = 3


@dataclass(frozen=True, order=True)
class CountVector:
    counts: Tuple[int, int, int] = (0, 0, 0)

    @classmethod
    def of(cls, *counts: int) -> "CountVector":
        if len(counts) > NUM_CLASSES:
            raise ValueError(f"count vector has at most {NUM_CLASSES} entries, got {len(counts)}")
        padded = tuple(int(c) for c in counts) + (0,) * (NUM_CLASSES - len(counts))
        return cls(padded)  # type: ignore[arg-type]

    @classmethod
    def from_word(cls, word: Iterable[int]) -> "CountVector":
        counts = [0, 0, 0]
        for step in word:
            counts[step] += 1
        return cls(tuple(counts))  # type: ignore[arg-type]

    def get(self, step_class: int) -> int:
        if 0 <= step_class < NUM_CLASSES:
            return self.counts[step_class]
        return 0

    def add(self, other: "CountVector") -> "CountVector":
        return CountVector(tuple(a + b for a, b in zip(self.counts, other.counts)))  # type: ignore[arg-type]

    def negate(self) -> "CountVector":
        return CountVector(tuple(-a for a in self.counts))  # type: ignore[arg-type]

    def scalar_mul(self, lam: int) -> "CountVector":
        return CountVector(tuple(lam * a for a in self.counts))  # type: ignore[arg-type]

    def length(self) -> int:
        """Taxicab norm: total number of steps, ignoring sign."""
        return sum(abs(a) for a in self.counts)

    def is_zero(self) -> bool:
        return self == ZERO

    def as_list(self) -> List[int]:
        return list(self.counts)

    def __add__(self, other: "CountVector") -> "CountVector":
        return self.add(other)

    def __neg__(self) -> "CountVector":
        return self.negate()

    def __sub__(self, other: "CountVector") -> "CountVector":
        return self.add(other.negate())


ZERO = CountVector()


def total(vectors: Iterable[CountVector]) -> CountVector:
    acc = ZERO
    for v in vectors:
        acc = acc.add(v)
    return acc


class Rank(IntEnum):
    RANK1 = 1
    RANK2 = 2
    RANK3 = 3


@dataclass(frozen=True)
class StepSignature:
    """Number of steps of each class, padded to three entries."""

    counts: Tuple[int, int, int]

    @classmethod
    def of(cls, counts: Sequence[int]) -> "StepSignature":
        if isinstance(counts, (str, bytes)) or not isinstance(counts, Sequence):
            raise ValueError(f"step signature must be a list of counts, got {counts!r}")
        if any(isinstance(c, bool) or not isinstance(c, int) for c in counts):
            raise ValueError(f"step signature entries must be integers: {list(counts)}")
        values = list(counts)
        if len(values) > NUM_CLASSES:
            raise ValueError(f"step signature has at most {NUM_CLASSES} entries, got {len(values)}")
        if any(c < 0 for c in values):
            raise ValueError(f"step signature entries must be nonnegative: {values}")
        if sum(values) < 1:
            raise ValueError("step signature must contain at least one step")
        values += [0] * (NUM_CLASSES - len(values))
        return cls(tuple(values))  # type: ignore[arg-type]

    @property
    def arity(self) -> int:
        return sum(1 for c in self.counts if c > 0)

    @property
    def rank(self) -> Rank:
        return Rank(self.arity)

    @property
    def size(self) -> int:
        return sum(self.counts)

    def as_count_vector(self) -> CountVector:
        return CountVector(self.counts)


def word_signature(word: Iterable[int]) -> CountVector:
    """Step signature of a word as a 3-entry count vector."""
    return CountVector.from_word(word)
