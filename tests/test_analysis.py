from __future__ import annotations

from ternary_engine.analysis import (
    Chirality,
    block_balance,
    chirality,
    distinct_spectrum,
    is_mos,
    is_mos_subst,
    is_pairwise_mos,
    is_strict_variety,
    maximum_variety,
    monotone_lm,
    monotone_ms,
    monotone_s0,
    step_variety,
)
from ternary_engine.count_vector import CountVector
from ternary_engine.mos import darkest_mode

DIASEM = (0, 1, 0, 2, 0, 1, 0, 2, 0)


def test_maximum_variety_basic():
    assert maximum_variety((0, 0, 1)) == 2
    assert maximum_variety(()) == 0
    assert maximum_variety((0,)) == 0
    assert maximum_variety((0, 1, 2)) == 3
    assert maximum_variety(DIASEM) >= 3


def test_distinct_spectrum():
    assert distinct_spectrum((0, 0, 1), 1) == {CountVector.of(1), CountVector.of(0, 1)}
    assert distinct_spectrum((0, 1, 0, 1), 2) == {CountVector.of(1, 1)}


def test_monotone_flags_on_diasem():
    assert monotone_lm(DIASEM)
    assert monotone_ms(DIASEM)
    assert monotone_s0(DIASEM)
    assert is_pairwise_mos(DIASEM)


def test_monotone_flags_fail():
    # LmLmss -> LLLLss, where the s steps are clumped
    assert not monotone_lm((0, 1, 0, 1, 2, 2))
    assert not monotone_s0((0, 0, 0, 1, 1, 2))


def test_is_mos_subst():
    assert is_mos_subst(DIASEM, 0, 1, 2)
    assert not is_mos_subst((0, 0, 1), 0, 1, 2)


def test_chirality():
    assert chirality((0, 1, 2)) is Chirality.RIGHT
    assert chirality((2, 1, 0)) is Chirality.LEFT
    assert chirality(DIASEM) is Chirality.RIGHT
    assert chirality(tuple(reversed(DIASEM))) is Chirality.LEFT
    assert chirality((0, 1, 0, 2)) is Chirality.ACHIRAL
    assert Chirality.RIGHT.value == "Right"


def test_mos_measures():
    word, _ = darkest_mode(5, 2)
    assert is_mos(word)
    assert not is_mos(DIASEM)
    assert step_variety(word) == 2
    assert block_balance(word) == 1
    assert is_strict_variety(word)
    assert not is_strict_variety((0, 0, 1, 1))
