from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .analysis import (
    Chirality,
    block_balance,
    chirality,
    is_mos_subst,
    is_pairwise_mos,
    is_strict_variety,
    maximum_variety,
    monotone_lm,
    monotone_ms,
    monotone_s0,
)
from .count_vector import CountVector, Rank, StepSignature, word_signature
from .guide import GuideFrame, guide_frames
from .lattice import lattice_basis, pitch_class_coordinates
from .words import canonical_rotation, word_to_string


@dataclass(frozen=True)
class ScaleProfile:
    word: str
    steps: Tuple[int, ...]
    lattice_basis: Optional[Tuple[CountVector, CountVector]]
    chirality: Chirality
    reversed: str
    structure: Optional[GuideFrame]
    lm: bool
    ms: bool
    s0: bool
    subst_l_ms: bool
    subst_m_ls: bool
    subst_s_lm: bool
    mv: int
    rank: Rank
    pairwise_mos: bool
    strict_variety: bool
    block_balance: int
    # lattice position of each degree, present when lattice_basis is
    coordinates: Optional[List[Tuple[int, int]]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "steps": list(self.steps),
            "lattice_basis": [v.as_list() for v in self.lattice_basis] if self.lattice_basis else None,
            "chirality": self.chirality.value,
            "reversed": self.reversed,
            "structure": self.structure.to_dict() if self.structure else None,
            "lm": self.lm,
            "ms": self.ms,
            "s0": self.s0,
            "subst_l_ms": self.subst_l_ms,
            "subst_m_ls": self.subst_m_ls,
            "subst_s_lm": self.subst_s_lm,
            "mv": self.mv,
            "rank": int(self.rank),
            "pairwise_mos": self.pairwise_mos,
            "strict_variety": self.strict_variety,
            "block_balance": self.block_balance,
            "coordinates": [list(c) for c in self.coordinates] if self.coordinates is not None else None,
        }


def word_to_profile(word: Sequence[int], frames: Optional[List[GuideFrame]] = None) -> ScaleProfile:
    """Analyze one word. `frames` may be passed in when already computed."""
    brightest = canonical_rotation(word)
    if frames is None:
        frames = guide_frames(brightest)
    signature = word_signature(brightest)
    basis = lattice_basis(frames, signature)
    coordinates = pitch_class_coordinates(brightest, basis.vectors) if basis else None
    if basis is not None:
        structure: Optional[GuideFrame] = basis.frame
    else:
        structure = frames[0] if frames else None
    return ScaleProfile(
        word=word_to_string(brightest),
        steps=brightest,
        lattice_basis=basis.vectors if basis else None,
        chirality=chirality(brightest),
        reversed=word_to_string(canonical_rotation(tuple(reversed(brightest)))),
        structure=structure,
        lm=monotone_lm(brightest),
        ms=monotone_ms(brightest),
        s0=monotone_s0(brightest),
        subst_l_ms=is_mos_subst(brightest, 0, 1, 2),
        subst_m_ls=is_mos_subst(brightest, 1, 0, 2),
        subst_s_lm=is_mos_subst(brightest, 2, 0, 1),
        mv=maximum_variety(brightest),
        rank=StepSignature.of(signature.counts).rank,
        pairwise_mos=is_pairwise_mos(brightest),
        strict_variety=is_strict_variety(brightest),
        block_balance=block_balance(brightest),
        coordinates=coordinates,
    )
