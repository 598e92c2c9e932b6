from __future__ import annotations

"""
Run records for query results: a CSV row per profile and a JSON dump.
"""

import csv
import json
import os
from typing import Any, Dict, List

from .profile import ScaleProfile
from .tuning import TuningCandidate

LOG_FIELDS = [
    "word",
    "mv",
    "chirality",
    "complexity",
    "multiplicity",
    "gs",
    "lm",
    "ms",
    "s0",
    "subst_l_ms",
    "subst_m_ls",
    "subst_s_lm",
    "lattice_basis",
    "rank",
    "pairwise_mos",
    "block_balance",
]


def _vectors(vectors) -> str:
    return " ".join(",".join(str(x) for x in v.counts) for v in vectors)


def profile_row(profile: ScaleProfile) -> Dict[str, Any]:
    structure = profile.structure
    return {
        "word": profile.word,
        "mv": profile.mv,
        "chirality": profile.chirality.value,
        "complexity": structure.complexity if structure else "",
        "multiplicity": structure.multiplicity if structure else "",
        "gs": _vectors(structure.gs) if structure else "",
        "lm": int(profile.lm),
        "ms": int(profile.ms),
        "s0": int(profile.s0),
        "subst_l_ms": int(profile.subst_l_ms),
        "subst_m_ls": int(profile.subst_m_ls),
        "subst_s_lm": int(profile.subst_s_lm),
        "lattice_basis": _vectors(profile.lattice_basis) if profile.lattice_basis else "",
        "rank": int(profile.rank),
        "pairwise_mos": int(profile.pairwise_mos),
        "block_balance": profile.block_balance,
    }


def write_profile_log(profiles: List[ScaleProfile], log_path: str) -> None:
    os.makedirs(os.path.dirname(log_path) or ".", exist_ok=True)
    with open(log_path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=LOG_FIELDS)
        writer.writeheader()
        for profile in profiles:
            writer.writerow(profile_row(profile))


def results_to_dict(profiles: List[ScaleProfile], tunings: List[TuningCandidate]) -> Dict[str, Any]:
    return {
        "profiles": [p.to_dict() for p in profiles],
        "ed_tunings": [t.ed_string() for t in tunings],
    }


def write_results_json(profiles: List[ScaleProfile], tunings: List[TuningCandidate], out_path: str) -> None:
    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    with open(out_path, "w") as f:
        json.dump(results_to_dict(profiles, tunings), f, indent=2)
