from __future__ import annotations

"""
Moment-of-symmetry (MOS) construction and MOS-substitution scales.

darkest_mode() rasterizes the line from (0, 0) to (a, b), the same integer
walk that Bjorklund/Euclidean rhythms use to spread pulses evenly.
"""

from math import gcd
from typing import List, Sequence, Tuple

from .count_vector import CountVector
from .words import canonical_rotation, rotate, subst


class InvariantViolation(RuntimeError):
    """Internal consistency failure; never caused by user input."""


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) with a*x + b*y == g == gcd(a, b)."""
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def modinv(a: int, m: int) -> int:
    g, x, _ = extended_gcd(a % m, m)
    if g != 1:
        raise InvariantViolation(f"{a} has no inverse modulo {m}")
    return x % m


def darkest_mode(a: int, b: int) -> Tuple[Tuple[int, ...], CountVector]:
    """Darkest mode of the MOS aL bs, with its (dark) generator.

    Class 0 is the step that occurs `a` times. The generator is the count
    vector of the first a^-1 mod (a+b) steps.
    """
    if a < 1 or b < 1:
        raise ValueError(f"MOS step counts must be positive, got ({a}, {b})")
    d = gcd(a, b)
    if d > 1:
        word, gener = darkest_mode(a // d, b // d)
        return word * d, gener

    steps: List[int] = []
    x = y = 0
    while (x, y) != (a, b):
        if a * y >= b * (x + 1):
            x += 1
            steps.append(0)
        else:
            y += 1
            steps.append(1)
    k = modinv(a, a + b)
    return tuple(steps), CountVector.from_word(steps[:k])


def mos_substitution_scales_one_perm(n0: int, n1: int, n2: int) -> List[Tuple[int, ...]]:
    """Substitute rotations of the filler MOS n1 m, n2 s into the template MOS n0 L, (n1+n2) x."""
    template, _ = darkest_mode(n0, n1 + n2)
    filler_word, gener = darkest_mode(n1, n2)
    filler = tuple(x + 1 for x in filler_word)
    step = gener.length()
    return [
        subst(template, 1, rotate(filler, (i * step) % len(filler)))
        for i in range(n1 + n2)
    ]


def mos_substitution_scales(signature: Sequence[int]) -> List[Tuple[int, ...]]:
    """Canonical MOS-substitution scales for a 3-class signature, sorted."""
    n0, n1, n2 = (tuple(signature) + (0, 0, 0))[:3]
    if min(n0, n1, n2) < 1:
        return []
    words = list(mos_substitution_scales_one_perm(n0, n1, n2))
    words += [
        tuple((x + 1) % 3 for x in w)
        for w in mos_substitution_scales_one_perm(n1, n2, n0)
    ]
    words += [
        tuple(2 if x == 0 else x - 1 for x in w)
        for w in mos_substitution_scales_one_perm(n2, n0, n1)
    ]
    return sorted({canonical_rotation(w) for w in words})
