from __future__ import annotations

"""
Guide-frame search.

A guide frame is a guided generator sequence (gs), the minimal periodic
chain of k-step intervals that regenerates the scale, together with a
polyoffset: the offsets of parallel copies of that chain for interleaved
scales. Frames are ranked by complexity = len(gs) * multiplicity.
"""

from dataclasses import dataclass
from math import gcd
from typing import Any, Dict, List, Sequence, Tuple

from .count_vector import ZERO, CountVector, total
from .words import rotate, rotation_offset, rotations, weak_period_pattern, word_on_degree

Chain = Tuple[CountVector, ...]


@dataclass(frozen=True)
class GuideFrame:
    gs: Chain
    polyoffset: Chain = (ZERO,)

    @property
    def aggregate(self) -> CountVector:
        return total(self.gs)

    @property
    def multiplicity(self) -> int:
        return len(self.polyoffset)

    @property
    def complexity(self) -> int:
        return len(self.gs) * self.multiplicity

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gs": [v.as_list() for v in self.gs],
            "aggregate": self.aggregate.as_list(),
            "polyoffset": [v.as_list() for v in self.polyoffset],
            "multiplicity": self.multiplicity,
            "complexity": self.complexity,
        }


def stacked_k_steps(k: int, word: Sequence[int]) -> Chain:
    """The k-step interval on degrees 0, k, 2k, ... (n of them)."""
    return tuple(CountVector.from_word(word_on_degree(word, k * i, k)) for i in range(len(word)))


def stacked_k_steps_of_chain(k: int, chain: Sequence[CountVector]) -> Chain:
    """Same as stacked_k_steps for a scale whose steps are count vectors."""
    n = len(chain)
    return tuple(total(chain[(i * k + j) % n] for j in range(k)) for i in range(n))


def guided_gs_chains(chain: Sequence[CountVector]) -> List[Chain]:
    """Generator sequences read off a stack of k-step intervals.

    A rotation qualifies when its last interval (the one that closes the
    circle) differs from all the others; what remains is reduced to its
    weak period.
    """
    out: List[Chain] = []
    for rotation in rotations(chain):
        prefix, closing = rotation[:-1], rotation[-1]
        if prefix and closing not in prefix:
            out.append(weak_period_pattern(prefix))
    return out


def _subscale_gs_list(subscale: Chain) -> List[Chain]:
    if len(subscale) == 2:
        return [(subscale[0],)]
    n = len(subscale)
    out: List[Chain] = []
    for k in range(1, n // 2 + 1):
        if gcd(k, n) == 1:
            out.extend(guided_gs_chains(stacked_k_steps_of_chain(k, subscale)))
    return out


def try_simple_guide_frames(word: Sequence[int], k: int) -> List[GuideFrame]:
    n = len(word)
    if n == 0 or gcd(k, n) != 1:
        return []
    return [GuideFrame(gs) for gs in guided_gs_chains(stacked_k_steps(k, word))]


def try_multiple_guide_frames(word: Sequence[int], m: int, k: int) -> List[GuideFrame]:
    """Interleaved frames: m copies of one chain, offset from each other.

    Only the case gcd(k, n) == m with (n / m) not divisible by m is searched.
    """
    n = len(word)
    if m <= 1 or n == 0 or n % m != 0:
        return []
    d = gcd(k, n)
    co_d = n // d
    if co_d % m == 0 or d != m:
        return []

    subscales = [stacked_k_steps(d, rotate(word, degree))[:co_d] for degree in range(d)]
    root = subscales[0]
    offsets: List[CountVector] = []
    for i, subscale in enumerate(subscales):
        r = rotation_offset(root, subscale)
        if r is None:
            return []
        offsets.append(CountVector.from_word(word_on_degree(word, 0, r * d + i)))
    offsets.sort(key=CountVector.length)
    polyoffset = tuple(offsets)
    return [GuideFrame(gs, polyoffset) for gs in _subscale_gs_list(root)]


def guide_frames(word: Sequence[int]) -> List[GuideFrame]:
    """All guide frames of a word, lowest complexity first, without duplicates."""
    n = len(word)
    frames: List[GuideFrame] = []
    for k in range(2, n - 1):
        frames.extend(try_simple_guide_frames(word, k))
    if len(set(word)) > 1:
        for m in range(2, n):
            if n % m:
                continue
            for k in range(2, n - 1):
                frames.extend(try_multiple_guide_frames(word, m, k))

    frames = [f for f in frames if f.gs]
    frames.sort(key=lambda f: f.complexity)
    seen = set()
    ranked: List[GuideFrame] = []
    for frame in frames:
        if frame in seen:
            continue
        seen.add(frame)
        ranked.append(frame)
    return ranked
