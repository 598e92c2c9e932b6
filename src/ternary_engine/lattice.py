from __future__ import annotations

"""
Lattice basis selection and the exact linear algebra behind it.

A ternary scale lives in Z^3 (counts of L, m, s). Modulo the equave, given by
the step signature, pitch classes form a 2-D lattice; two interval vectors v
and w span it exactly when det(signature, v, w) = +-1.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import List, Optional, Sequence, Tuple

from .count_vector import CountVector
from .guide import GuideFrame

Matrix = List[List[int]]


@dataclass(frozen=True)
class LatticeBasis:
    vectors: Tuple[CountVector, CountVector]
    frame: GuideFrame


def det3(u: CountVector, v: CountVector, w: CountVector) -> int:
    a0, a1, a2 = u.counts
    b0, b1, b2 = v.counts
    c0, c1, c2 = w.counts
    return (
        a0 * b1 * c2
        + a1 * b2 * c0
        + a2 * b0 * c1
        - a2 * b1 * c0
        - a1 * b0 * c2
        - a0 * b2 * c1
    )


def lattice_basis(frames: Sequence[GuideFrame], signature: CountVector) -> Optional[LatticeBasis]:
    """First unimodular pair found in the ranked frames, or None.

    Within a frame, pairs of gs vectors are tried before (gs, offset) pairs.
    """
    for frame in frames:
        gs = frame.gs
        for i in range(len(gs)):
            for j in range(i, len(gs)):
                if abs(det3(signature, gs[i], gs[j])) == 1:
                    return LatticeBasis((gs[i], gs[j]), frame)
        for g in gs:
            for offset in frame.polyoffset:
                if abs(det3(signature, g, offset)) == 1:
                    return LatticeBasis((g, offset), frame)
    return None


def solve_linear_system(matrix: Sequence[Sequence[int]], rhs: Sequence[int]) -> Optional[List[Fraction]]:
    """Solve matrix @ x = rhs exactly by Gaussian elimination.

    Returns None when the matrix is singular.
    """
    n = len(matrix)
    aug = [[Fraction(x) for x in row] + [Fraction(b)] for row, b in zip(matrix, rhs)]
    if len(aug) != n or any(len(row) != n + 1 for row in aug):
        raise ValueError("expected a square system")

    for col in range(n):
        pivot = max(range(col, n), key=lambda r: abs(aug[r][col]))
        if aug[pivot][col] == 0:
            return None
        aug[col], aug[pivot] = aug[pivot], aug[col]
        for r in range(col + 1, n):
            factor = aug[r][col] / aug[col][col]
            if factor:
                for c in range(col, n + 1):
                    aug[r][c] -= factor * aug[col][c]

    x = [Fraction(0)] * n
    for r in range(n - 1, -1, -1):
        acc = aug[r][n] - sum(aug[r][c] * x[c] for c in range(r + 1, n))
        x[r] = acc / aug[r][r]
    return x


def unimodular_inverse(matrix: Sequence[Sequence[int]]) -> Optional[Matrix]:
    """Integer inverse of a square matrix, or None if it is not unimodular."""
    n = len(matrix)
    columns = []
    for i in range(n):
        unit = [1 if r == i else 0 for r in range(n)]
        col = solve_linear_system(matrix, unit)
        if col is None or any(x.denominator != 1 for x in col):
            return None
        columns.append([int(x) for x in col])
    return [[columns[c][r] for c in range(n)] for r in range(n)]


def matrix_times_vector(matrix: Sequence[Sequence[int]], vector: Sequence[int]) -> List[int]:
    return [sum(a * b for a, b in zip(row, vector)) for row in matrix]


def pitch_class_coordinates(
    word: Sequence[int],
    basis: Tuple[CountVector, CountVector],
) -> Optional[List[Tuple[int, int]]]:
    """2-D lattice coordinates of each scale degree in the given basis.

    Degree i is the count vector of the first i steps; it is written in the
    basis (equave, v, w) and the equave coordinate dropped.
    """
    equave = CountVector.from_word(word)
    v, w = basis
    matrix = [[equave.counts[r], v.counts[r], w.counts[r]] for r in range(3)]
    inverse = unimodular_inverse(matrix)
    if inverse is None:
        return None
    coords: List[Tuple[int, int]] = []
    for degree in range(len(word)):
        _, a, b = matrix_times_vector(inverse, CountVector.from_word(word[:degree]).counts)
        coords.append((a, b))
    return coords
