from __future__ import annotations

import pytest

from ternary_engine.analysis import Chirality, maximum_variety
from ternary_engine.count_vector import CountVector, Rank
from ternary_engine.guide import guide_frames
from ternary_engine.necklaces import necklaces_fixed_content
from ternary_engine.query import Constraint, QueryOptions, TuningOptions, by_step_signature, by_word
from ternary_engine.tuning import ed_tunings
from ternary_engine.words import word_to_string

cv = CountVector.of


def test_by_word_lms():
    result = by_word("Lms")
    profile = result.profile
    assert profile.word == "Lms"
    assert profile.steps == (0, 1, 2)
    assert profile.chirality is Chirality.RIGHT
    assert profile.reversed == "Lsm"
    assert profile.mv == 3
    if profile.structure is not None:
        s = profile.structure
        assert s.complexity == len(s.gs) * s.multiplicity
    assert result.ed_tunings == ed_tunings((1, 1, 1))


def test_by_word_diasem_profile():
    profile = by_word("LmLsLmLsL").profile
    assert profile.word == "LLmLsLmLs"
    assert profile.structure is not None
    assert profile.structure.complexity == 2
    assert profile.structure.gs == (cv(1, 1), cv(1, 0, 1))
    assert profile.lattice_basis == (cv(1, 1), cv(1, 0, 1))
    assert profile.lm and profile.ms and profile.s0
    assert profile.subst_l_ms
    assert profile.chirality is Chirality.RIGHT
    d = profile.to_dict()
    assert d["lattice_basis"] == [[1, 1, 0], [1, 0, 1]]
    assert d["chirality"] == "Right"


def test_by_word_accepts_class_ids():
    assert by_word([2, 2, 0]).profile.word == "Lss"
    assert by_word([0, 1, 0, 2, 0, 1, 0, 2, 0]).profile.word == "LLmLsLmLs"


@pytest.mark.parametrize("bad", ["", "LMms", "Lq", [], [0, 1, 2, 3], [0, -1], [0, 1.5], [True, False]])
def test_by_word_rejects(bad):
    with pytest.raises(ValueError):
        by_word(bad)


@pytest.mark.parametrize("bad", [[0, 0, 0], [], [1, 1, 1, 1], [2, -1, 1], [2.5, 1, 1], 5, "522"])
def test_by_step_signature_rejects(bad):
    with pytest.raises(ValueError):
        by_step_signature(bad)


def test_constraint_mode_validated():
    with pytest.raises(ValueError):
        Constraint(2, "roughly")
    assert Constraint(2, "at most").accepts(1)
    assert not Constraint(2, "exactly").accepts(1)
    assert not Constraint().active


def _lowest_frame_key(profile):
    frames = guide_frames(profile.steps)
    return (not frames, frames[0].complexity if frames else 0)


@pytest.mark.parametrize("sig,count", [([5, 2, 2], 84), ([4, 3, 2], 140)])
def test_by_step_signature_sorted_by_lowest_frame(sig, count):
    result = by_step_signature(sig)
    assert len(result.profiles) == count
    assert len({p.word for p in result.profiles}) == count
    keys = [_lowest_frame_key(p) for p in result.profiles]
    assert keys == sorted(keys)
    assert result.ed_tunings == ed_tunings(sig)


def test_diasem_in_enumeration():
    assert "LLmLsLmLs" in {p.word for p in by_step_signature([5, 2, 2]).profiles}


def test_monotone_filters():
    opts = QueryOptions(monotone_lm=True, monotone_ms=True, monotone_s0=True)
    profiles = by_step_signature([5, 2, 2], opts).profiles
    assert profiles
    assert all(p.lm and p.ms and p.s0 for p in profiles)
    assert "LLmLsLmLs" in {p.word for p in profiles}


def test_numeric_filters():
    mv_profiles = by_step_signature([5, 2, 2], QueryOptions(mv=Constraint(3, "at most"))).profiles
    assert mv_profiles
    assert all(p.mv <= 3 for p in mv_profiles)

    gs_profiles = by_step_signature([5, 2, 2], QueryOptions(ggs_len=Constraint(2, "exactly"))).profiles
    assert gs_profiles
    for p in gs_profiles:
        assert len(guide_frames(p.steps)[0].gs) == 2

    cx_profiles = by_step_signature([5, 2, 2], QueryOptions(complexity=Constraint(2, "at most"))).profiles
    assert cx_profiles
    for p in cx_profiles:
        assert guide_frames(p.steps)[0].complexity <= 2


@pytest.mark.parametrize("sig", [[5, 2, 2], [4, 3, 2]])
def test_filters_match_direct_computation(sig):
    words = necklaces_fixed_content(sig)

    mv3 = {p.word for p in by_step_signature(sig, QueryOptions(mv=Constraint(3, "exactly"))).profiles}
    assert mv3 == {word_to_string(w) for w in words if maximum_variety(w) == 3}

    gs2 = {p.word for p in by_step_signature(sig, QueryOptions(ggs_len=Constraint(2, "exactly"))).profiles}
    expected = set()
    for w in words:
        frames = guide_frames(w)
        if frames and len(frames[0].gs) == 2:
            expected.add(word_to_string(w))
    assert gs2 == expected

    cx = {p.word for p in by_step_signature(sig, QueryOptions(complexity=Constraint(3, "at most"))).profiles}
    expected = set()
    for w in words:
        frames = guide_frames(w)
        if frames and frames[0].complexity <= 3:
            expected.add(word_to_string(w))
    assert cx == expected


def test_profile_carries_supplementary_measures():
    profile = by_word("LmLsLmLsL").profile
    assert profile.rank is Rank.RANK3
    assert profile.pairwise_mos
    assert profile.block_balance >= 1
    assert profile.coordinates is not None
    assert profile.coordinates[0] == (0, 0)
    assert len(set(profile.coordinates)) == 9
    d = profile.to_dict()
    assert d["rank"] == 3
    assert d["coordinates"][1] == [-2, -2]

    two_class = by_word("LLs").profile
    assert two_class.rank is Rank.RANK2
    assert two_class.strict_variety
    assert two_class.coordinates is None
    assert two_class.to_dict()["coordinates"] is None


def test_mos_substitution_toggle():
    profiles = by_step_signature([5, 2, 2], QueryOptions(mos_substitution=True)).profiles
    assert profiles
    for p in profiles:
        assert p.subst_l_ms or p.subst_m_ls or p.subst_s_lm


def test_tuning_options_pass_through():
    opts = QueryOptions(tuning=TuningOptions(ed_bound=30))
    result = by_step_signature([5, 2, 2], opts)
    assert result.ed_tunings == ed_tunings((5, 2, 2), ed_bound=30)
    assert all(t.ed <= 30 for t in result.ed_tunings)
