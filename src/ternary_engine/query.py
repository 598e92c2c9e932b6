from __future__ import annotations

"""
Query entry points: enumerate scales by step signature, or analyze one word.

Both are pure functions of their arguments; options arrive as dataclasses
(see config.py for loading them from JSON).
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from .analysis import maximum_variety, monotone_lm, monotone_ms, monotone_s0
from .count_vector import StepSignature
from .guide import GuideFrame, guide_frames
from .mos import mos_substitution_scales
from .necklaces import necklaces_fixed_content
from .profile import ScaleProfile, word_to_profile
from .tuning import ED_BOUND, EQUAVE_CENTS, S_LOWER, S_UPPER, TuningCandidate, ed_tunings
from .words import canonical_rotation, compress_classes, string_to_word

CONSTRAINT_MODES = ("exactly", "at most")


@dataclass(frozen=True)
class Constraint:
    """Numeric filter; a value of 0 disables it."""

    value: int = 0
    mode: str = "exactly"

    def __post_init__(self) -> None:
        if self.mode not in CONSTRAINT_MODES:
            raise ValueError(f"constraint mode must be one of {CONSTRAINT_MODES}, got {self.mode!r}")
        if self.value < 0:
            raise ValueError(f"constraint value must be nonnegative, got {self.value}")

    @property
    def active(self) -> bool:
        return self.value > 0

    def accepts(self, x: int) -> bool:
        if self.mode == "exactly":
            return x == self.value
        return x <= self.value


@dataclass(frozen=True)
class TuningOptions:
    ed_bound: int = ED_BOUND
    s_lower_cents: float = S_LOWER
    s_upper_cents: float = S_UPPER
    equave_cents: float = EQUAVE_CENTS


@dataclass(frozen=True)
class QueryOptions:
    monotone_lm: bool = False
    monotone_ms: bool = False
    monotone_s0: bool = False
    ggs_len: Constraint = field(default_factory=Constraint)
    complexity: Constraint = field(default_factory=Constraint)
    mv: Constraint = field(default_factory=Constraint)
    mos_substitution: bool = False
    tuning: TuningOptions = field(default_factory=TuningOptions)


@dataclass(frozen=True)
class SignatureResult:
    profiles: List[ScaleProfile]
    ed_tunings: List[TuningCandidate]


@dataclass(frozen=True)
class WordResult:
    profile: ScaleProfile
    ed_tunings: List[TuningCandidate]


def _tunings_for(counts: Sequence[int], opts: TuningOptions) -> List[TuningCandidate]:
    return ed_tunings(
        counts,
        ed_bound=opts.ed_bound,
        s_lower=opts.s_lower_cents,
        s_upper=opts.s_upper_cents,
        equave_cents=opts.equave_cents,
    )


def _passes(word: Tuple[int, ...], frames: List[GuideFrame], options: QueryOptions) -> bool:
    if options.monotone_lm and not monotone_lm(word):
        return False
    if options.monotone_ms and not monotone_ms(word):
        return False
    if options.monotone_s0 and not monotone_s0(word):
        return False
    if options.ggs_len.active:
        if not frames or not options.ggs_len.accepts(len(frames[0].gs)):
            return False
    if options.mv.active and not options.mv.accepts(maximum_variety(word)):
        return False
    if options.complexity.active:
        if not frames or not options.complexity.accepts(frames[0].complexity):
            return False
    return True


def by_step_signature(signature: Sequence[int], options: QueryOptions = QueryOptions()) -> SignatureResult:
    """Enumerate, filter and rank every scale with the given step signature.

    Profiles are ordered by the complexity of each word's lowest-complexity
    guide frame, frameless words last. A profile's `structure` is the frame
    that produced its lattice basis, which can be a more complex one, so
    `structure.complexity` is not necessarily ascending across the list.
    """
    sig = StepSignature.of(signature)
    if options.mos_substitution:
        words = mos_substitution_scales(sig.counts)
    else:
        words = necklaces_fixed_content(sig.counts)

    ranked: List[Tuple[Optional[int], ScaleProfile]] = []
    for word in words:
        frames = guide_frames(word)
        if not _passes(word, frames, options):
            continue
        ranked.append((frames[0].complexity if frames else None, word_to_profile(word, frames)))

    # frameless scales go last
    ranked.sort(key=lambda item: (item[0] is None, item[0] or 0))
    return SignatureResult(
        profiles=[profile for _, profile in ranked],
        ed_tunings=_tunings_for(sig.counts, options.tuning),
    )


def by_word(word: Union[str, Sequence[int]], options: QueryOptions = QueryOptions()) -> WordResult:
    if isinstance(word, str):
        steps = string_to_word(word)
    else:
        if not word:
            raise ValueError("word must contain at least one step")
        if any(isinstance(x, bool) or not isinstance(x, int) or x < 0 for x in word):
            raise ValueError(f"step classes must be nonnegative integers: {list(word)}")
        steps = compress_classes(word)
    sig = StepSignature.of([steps.count(c) for c in range(max(steps) + 1)])
    brightest = canonical_rotation(steps)
    return WordResult(
        profile=word_to_profile(brightest),
        ed_tunings=_tunings_for(sig.counts, options.tuning),
    )
