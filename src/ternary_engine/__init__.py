"""
Ternary scale engine: enumeration and structural analysis of scales built
from up to three step sizes (L, m, s).

Query entry points live in `query` (by_step_signature, by_word); the CLI
in `cli` wraps them and can export results as JSON, CSV and MIDI.
"""

__all__ = [
    "count_vector",
    "words",
    "necklaces",
    "mos",
    "analysis",
    "guide",
    "lattice",
    "tuning",
    "profile",
    "query",
    "config",
    "report",
    "midi_writer",
    "audition",
    "cli",
]
