from __future__ import annotations

import argparse
import os
import sys
from typing import List

from .audition import scale_events
from .config import QueryConfig, load_query_config
from .midi_writer import write_midi
from .profile import ScaleProfile
from .query import Constraint, QueryOptions, TuningOptions, by_step_signature, by_word
from .report import write_profile_log, write_results_json
from .tuning import TuningCandidate


def _add_output_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--out", default=None, help="Write profiles and tunings as JSON")
    p.add_argument("--log-path", default=None, help="Write one CSV row per profile")
    p.add_argument("--midi-out", default=None, help="Render the first scale under an ED tuning to MIDI")
    p.add_argument("--tuning-index", type=int, default=0, help="Which ED tuning to use for --midi-out")
    p.add_argument("--bpm", type=float, default=120.0)
    p.add_argument("--ppq", type=int, default=480)
    p.add_argument("--ed-bound", type=int, default=TuningOptions.ed_bound)
    p.add_argument("--s-lower", type=float, default=TuningOptions.s_lower_cents, help="Smallest allowed s step (cents)")
    p.add_argument("--s-upper", type=float, default=TuningOptions.s_upper_cents, help="Largest allowed s step (cents)")
    p.add_argument("--equave", type=float, default=TuningOptions.equave_cents, help="Equave size in cents")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Enumerate and analyze ternary scales")
    parser.add_argument("--config", default=None, help="Run the query described by a JSON config instead")
    sub = parser.add_subparsers(dest="command")

    p_sig = sub.add_parser("sig", help="Enumerate scales with a step signature, e.g. 'sig 5 2 2'")
    p_sig.add_argument("counts", type=int, nargs="+", help="Step counts for L, m, s")
    p_sig.add_argument("--lm", action="store_true", help="Keep only scales that stay MOS when L = m")
    p_sig.add_argument("--ms", action="store_true", help="Keep only scales that stay MOS when m = s")
    p_sig.add_argument("--s0", action="store_true", help="Keep only scales that stay MOS when s = 0")
    p_sig.add_argument("--mos-subst", action="store_true", help="Enumerate MOS-substitution scales only")
    for name in ("ggs-len", "complexity", "mv"):
        p_sig.add_argument(f"--{name}", type=int, default=0, help=f"Filter on {name} (0 = off)")
        p_sig.add_argument(
            f"--{name}-mode", choices=["exactly", "at most"], default="exactly"
        )
    _add_output_args(p_sig)

    p_word = sub.add_parser("word", help="Analyze one scale word, e.g. 'word LmLsLmL'")
    p_word.add_argument("word")
    _add_output_args(p_word)
    return parser


def _config_from_args(args: argparse.Namespace) -> QueryConfig:
    tuning = TuningOptions(
        ed_bound=args.ed_bound,
        s_lower_cents=args.s_lower,
        s_upper_cents=args.s_upper,
        equave_cents=args.equave,
    )
    cfg = QueryConfig(
        out=args.out,
        log_path=args.log_path,
        midi_out=args.midi_out,
        tuning_index=args.tuning_index,
        bpm=args.bpm,
        ppq=args.ppq,
    )
    if args.command == "word":
        cfg.word = args.word
        cfg.options = QueryOptions(tuning=tuning)
        return cfg
    cfg.signature = list(args.counts)
    cfg.options = QueryOptions(
        monotone_lm=args.lm,
        monotone_ms=args.ms,
        monotone_s0=args.s0,
        ggs_len=Constraint(args.ggs_len, args.ggs_len_mode),
        complexity=Constraint(args.complexity, args.complexity_mode),
        mv=Constraint(args.mv, args.mv_mode),
        mos_substitution=args.mos_subst,
        tuning=tuning,
    )
    return cfg


def _print_summary(profiles: List[ScaleProfile], tunings: List[TuningCandidate]) -> None:
    for p in profiles:
        if p.structure is not None:
            frame = f"complexity={p.structure.complexity} gs={[list(v.counts) for v in p.structure.gs]}"
        else:
            frame = "no guide frame"
        print(f"{p.word:<20} mv={p.mv} {p.chirality.value:<7} {frame}")
    shown = ", ".join(" ".join(t.ed_string()) for t in tunings[:5])
    more = f" (+{len(tunings) - 5} more)" if len(tunings) > 5 else ""
    print(f"{len(profiles)} scale(s); ED tunings: {shown or 'none'}{more}")


def run_query(cfg: QueryConfig) -> int:
    if cfg.word is not None:
        result = by_word(cfg.word, cfg.options)
        profiles = [result.profile]
        tunings = result.ed_tunings
    else:
        sig_result = by_step_signature(cfg.signature or [], cfg.options)
        profiles = sig_result.profiles
        tunings = sig_result.ed_tunings

    _print_summary(profiles, tunings)

    if cfg.out:
        write_results_json(profiles, tunings, cfg.out)
        print(f"Wrote results to {cfg.out}")
    if cfg.log_path:
        write_profile_log(profiles, cfg.log_path)
        print(f"Wrote profile log to {cfg.log_path}")
    if cfg.midi_out:
        if not profiles:
            raise ValueError("no scale to render")
        if not 0 <= cfg.tuning_index < len(tunings):
            raise ValueError(f"no ED tuning at index {cfg.tuning_index} ({len(tunings)} available)")
        tuning = tunings[cfg.tuning_index]
        events = scale_events(
            profiles[0].steps,
            tuning,
            ppq=cfg.ppq,
            equave_cents=cfg.options.tuning.equave_cents,
        )
        os.makedirs(os.path.dirname(cfg.midi_out) or ".", exist_ok=True)
        write_midi(events, ppq=cfg.ppq, bpm=cfg.bpm, out_path=cfg.midi_out)
        print(f"Wrote {profiles[0].word} in {' '.join(tuning.ed_string())} to {cfg.midi_out}")
    return 0


def main(argv: List[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.config is None and args.command is None:
        parser.error("give a command (sig, word) or --config PATH")
    try:
        if args.config is not None:
            cfg = load_query_config(args.config)
        else:
            cfg = _config_from_args(args)
        return run_query(cfg)
    except (ValueError, KeyError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
