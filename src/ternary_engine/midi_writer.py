from __future__ import annotations

from dataclasses import dataclass
from typing import List

from mido import Message, MetaMessage, MidiFile, MidiTrack, bpm2tempo

PITCHWHEEL_MIN = -8192
PITCHWHEEL_MAX = 8191


@dataclass
class MidiEvent:
    note: int
    vel: int
    start_abs_tick: int
    dur_tick: int
    channel: int = 0
    # pitchwheel value sent just before the note, 0 = no bend
    bend: int = 0


def write_midi(events: List[MidiEvent], ppq: int, bpm: float, out_path: str) -> None:
    """
    Write a single-track MIDI file using absolute tick scheduling.
    Steps:
      - create track, set tempo meta
      - per event: pitchwheel + note_on at start, note_off at end
      - sort by (tick, note_off before pitchwheel before note_on)
      - delta-encode times
    """
    mid = MidiFile(type=1)
    mid.ticks_per_beat = int(ppq)

    track = MidiTrack()
    mid.tracks.append(track)
    track.append(MetaMessage("set_tempo", tempo=bpm2tempo(bpm), time=0))

    msgs = []
    for ev in events:
        start = ev.start_abs_tick
        end = ev.start_abs_tick + max(1, ev.dur_tick)
        bend = max(PITCHWHEEL_MIN, min(PITCHWHEEL_MAX, int(ev.bend)))
        msgs.append((start, 1, Message("pitchwheel", pitch=bend, channel=ev.channel, time=0)))
        msgs.append((start, 2, Message("note_on", note=ev.note, velocity=ev.vel, channel=ev.channel, time=0)))
        msgs.append((end, 0, Message("note_off", note=ev.note, velocity=0, channel=ev.channel, time=0)))

    msgs.sort(key=lambda t: (t[0], t[1]))

    last_t = 0
    for abs_t, _prio, msg in msgs:
        msg.time = max(0, abs_t - last_t)
        track.append(msg)
        last_t = abs_t

    mid.save(out_path)
