from __future__ import annotations

"""
Render a scale under an ED tuning as MIDI notes, one per beat, root to equave.

Each degree is played on the nearest 12-tone key with a pitch bend for the
remaining cents. Bends assume the common +-2 semitone wheel range.
"""

from typing import List, Sequence

from .midi_writer import MidiEvent, PITCHWHEEL_MAX
from .tuning import EQUAVE_CENTS, TuningCandidate, degree_cents

BEND_RANGE_CENTS = 200.0


def cents_to_note_and_bend(cents: float, root_note: int = 60):
    note = root_note + int(round(cents / 100.0))
    residual = cents - 100.0 * (note - root_note)
    bend = int(round(residual / BEND_RANGE_CENTS * (PITCHWHEEL_MAX + 1)))
    return note, bend


def scale_events(
    word: Sequence[int],
    tuning: TuningCandidate,
    ppq: int = 480,
    root_note: int = 60,
    velocity: int = 96,
    equave_cents: float = EQUAVE_CENTS,
) -> List[MidiEvent]:
    events: List[MidiEvent] = []
    for i, cents in enumerate(degree_cents(word, tuning, equave_cents)):
        note, bend = cents_to_note_and_bend(cents, root_note)
        events.append(
            MidiEvent(
                note=note,
                vel=velocity,
                start_abs_tick=i * ppq,
                dur_tick=int(ppq * 0.9),
                bend=bend,
            )
        )
    return events
