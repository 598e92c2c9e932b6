from __future__ import annotations

import pytest

from ternary_engine.tuning import TuningCandidate, degree_cents, ed_tunings


def _brute_force(sig, bound, lo, hi, equave=1200.0):
    n0, n1, n2 = sig
    out = []
    for l in range(3, bound):
        for m in range(2, l):
            for s in range(1, m):
                ed = l * n0 + m * n1 + s * n2
                if ed <= bound and lo <= s * equave / ed <= hi:
                    out.append(((l, m, s), ed))
    return out


@pytest.mark.parametrize(
    "sig,bound",
    [((5, 2, 2), 60), ((4, 3, 1), 45), ((2, 0, 3), 40), ((1, 1, 1), 30)],
)
def test_ed_tunings_sound_and_complete(sig, bound):
    found = ed_tunings(sig, ed_bound=bound)
    assert [(t.steps, t.ed) for t in found] == _brute_force(sig, bound, 20.0, 200.0)
    for t in found:
        l, m, s = t.steps
        assert 3 <= l and 2 <= m < l and 1 <= s < m
        assert t.ed <= bound
        assert 20.0 <= t.step_cents()[2] <= 200.0


def test_ed_string_and_default_bound():
    found = ed_tunings((5, 2, 2))
    assert TuningCandidate((3, 2, 1), 21) in found
    assert TuningCandidate((3, 2, 1), 21).ed_string() == ["3\\21", "2\\21", "1\\21"]
    assert all(t.ed <= 111 for t in found)


def test_tight_bounds_give_no_tunings():
    assert ed_tunings((5, 2, 2), ed_bound=10) == []
    assert ed_tunings((5, 2, 2), s_lower=150.0, s_upper=160.0, ed_bound=30) == []


def test_cents_window_and_equave():
    found = ed_tunings((5, 2, 2), ed_bound=60, s_lower=60.0, s_upper=80.0, equave_cents=1901.955)
    assert found
    for t in found:
        assert 60.0 <= t.step_cents(1901.955)[2] <= 80.0


def test_degree_cents_ends_on_equave():
    word = (0, 1, 0, 2, 0, 1, 0, 2, 0)
    cents = degree_cents(word, TuningCandidate((3, 2, 1), 21))
    assert len(cents) == len(word) + 1
    assert cents[0] == 0.0
    assert cents[1] == pytest.approx(3 * 1200 / 21)
    assert cents[-1] == pytest.approx(1200.0)
