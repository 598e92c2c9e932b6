from __future__ import annotations

from pathlib import Path

import mido

from ternary_engine.audition import cents_to_note_and_bend, scale_events
from ternary_engine.midi_writer import MidiEvent, write_midi
from ternary_engine.tuning import TuningCandidate


def test_cents_to_note_and_bend():
    assert cents_to_note_and_bend(0.0) == (60, 0)
    assert cents_to_note_and_bend(1200.0) == (72, 0)
    assert cents_to_note_and_bend(50.0) == (60, 2048)
    assert cents_to_note_and_bend(150.0) == (62, -2048)
    assert cents_to_note_and_bend(100.0, root_note=48) == (49, 0)


def test_scale_events_one_per_beat():
    word = (0, 1, 0, 2, 0, 1, 0)
    events = scale_events(word, TuningCandidate((4, 3, 1), 23), ppq=120)
    assert len(events) == len(word) + 1
    assert [e.start_abs_tick for e in events] == [i * 120 for i in range(len(word) + 1)]
    assert events[0].note == 60 and events[0].bend == 0
    assert events[-1].note == 72 and events[-1].bend == 0
    assert all(-8192 <= e.bend <= 8191 for e in events)


def test_write_midi_orders_bend_before_note(tmp_path: Path):
    out = tmp_path / "two.mid"
    events = [
        MidiEvent(note=60, vel=100, start_abs_tick=0, dur_tick=100, bend=1000),
        MidiEvent(note=62, vel=100, start_abs_tick=100, dur_tick=100, bend=99999),
    ]
    write_midi(events, ppq=100, bpm=120, out_path=str(out))

    mid = mido.MidiFile(str(out))
    msgs = [m for m in mid.tracks[0] if not m.is_meta]
    types = [m.type for m in msgs]
    assert types == ["pitchwheel", "note_on", "note_off", "pitchwheel", "note_on", "note_off"]
    assert msgs[0].pitch == 1000
    assert msgs[3].pitch == 8191
    assert msgs[3].time == 0
