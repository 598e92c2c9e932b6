from __future__ import annotations

"""
Equal-division (ED) tunings for a step signature.

A candidate assigns integer sizes l > m > s >= 1 to the three step classes;
the equave is then divided into ed = l*n0 + m*n1 + s*n2 equal parts.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

ED_BOUND = 111
S_LOWER = 20.0
S_UPPER = 200.0
EQUAVE_CENTS = 1200.0


@dataclass(frozen=True)
class TuningCandidate:
    steps: Tuple[int, int, int]
    ed: int

    def ed_string(self) -> List[str]:
        return [f"{size}\\{self.ed}" for size in self.steps]

    def step_cents(self, equave_cents: float = EQUAVE_CENTS) -> List[float]:
        return [size * equave_cents / self.ed for size in self.steps]


def ed_tunings(
    signature: Sequence[int],
    ed_bound: int = ED_BOUND,
    s_lower: float = S_LOWER,
    s_upper: float = S_UPPER,
    equave_cents: float = EQUAVE_CENTS,
) -> List[TuningCandidate]:
    """All (l, m, s) with 3 <= l < ed_bound, 2 <= m < l, 1 <= s < m,
    ed <= ed_bound and the s step between s_lower and s_upper cents."""
    n0, n1, n2 = (tuple(signature) + (0, 0, 0))[:3]
    out: List[TuningCandidate] = []
    for l in range(3, ed_bound):
        # ed only grows with l, m and s, so each loop can stop at the first overflow
        if l * n0 + 2 * n1 + n2 > ed_bound:
            break
        for m in range(2, l):
            if l * n0 + m * n1 + n2 > ed_bound:
                break
            for s in range(1, m):
                ed = l * n0 + m * n1 + s * n2
                if ed > ed_bound:
                    break
                cents = s * equave_cents / ed
                if s_lower <= cents <= s_upper:
                    out.append(TuningCandidate((l, m, s), ed))
    return out


def degree_cents(
    word: Sequence[int],
    tuning: TuningCandidate,
    equave_cents: float = EQUAVE_CENTS,
) -> List[float]:
    """Cents of each scale degree from the root, ending on the equave."""
    step_cents = tuning.step_cents(equave_cents)
    out = [0.0]
    for step in word:
        out.append(out[-1] + step_cents[step])
    return out
