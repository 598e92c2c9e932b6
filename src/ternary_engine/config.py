from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .count_vector import StepSignature
from .query import Constraint, QueryOptions, TuningOptions


def _constraint_from_dict(d: Optional[Dict[str, Any]]) -> Constraint:
    if not d:
        return Constraint()
    return Constraint(
        value=int(d.get("value", d.get("len", 0))),
        mode=str(d.get("mode", "exactly")),
    )


def _tuning_from_dict(d: Optional[Dict[str, Any]]) -> TuningOptions:
    if not d:
        return TuningOptions()
    defaults = TuningOptions()
    return TuningOptions(
        ed_bound=int(d.get("ed_bound", defaults.ed_bound)),
        s_lower_cents=float(d.get("s_lower_cents", defaults.s_lower_cents)),
        s_upper_cents=float(d.get("s_upper_cents", defaults.s_upper_cents)),
        equave_cents=float(d.get("equave_cents", defaults.equave_cents)),
    )


def _options_from_dict(d: Optional[Dict[str, Any]]) -> QueryOptions:
    if not d:
        return QueryOptions()
    return QueryOptions(
        monotone_lm=bool(d.get("monotone_lm", False)),
        monotone_ms=bool(d.get("monotone_ms", False)),
        monotone_s0=bool(d.get("monotone_s0", False)),
        ggs_len=_constraint_from_dict(d.get("ggs_len")),
        complexity=_constraint_from_dict(d.get("complexity")),
        mv=_constraint_from_dict(d.get("mv")),
        mos_substitution=bool(d.get("mos_substitution", False)),
        tuning=_tuning_from_dict(d.get("tuning")),
    )


@dataclass
class QueryConfig:
    signature: Optional[List[int]] = None
    word: Optional[str] = None
    options: QueryOptions = field(default_factory=QueryOptions)
    out: Optional[str] = None
    log_path: Optional[str] = None
    midi_out: Optional[str] = None
    # which ED tuning to audition (index into the tuning list)
    tuning_index: int = 0
    bpm: float = 120.0
    ppq: int = 480


def load_query_config(path: str) -> QueryConfig:
    with open(path, "r") as f:
        data = json.load(f)
    return query_config_from_dict(data)


def query_config_from_dict(data: Dict[str, Any]) -> QueryConfig:
    signature = data.get("signature")
    word = data.get("word")
    if (signature is None) == (word is None):
        raise ValueError("config needs exactly one of 'signature' or 'word'")
    return QueryConfig(
        signature=list(StepSignature.of(signature).counts) if signature is not None else None,
        word=str(word) if word is not None else None,
        options=_options_from_dict(data.get("options")),
        out=data.get("out"),
        log_path=data.get("log_path"),
        midi_out=data.get("midi_out"),
        tuning_index=int(data.get("tuning_index", 0)),
        bpm=float(data.get("bpm", 120.0)),
        ppq=int(data.get("ppq", 480)),
    )
