"""
MIDI export - renders spelled scales as playable MIDI.

This module handles conversion from pitch sequences to MIDI files using mido.
All operations are deterministic: same input → same output.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from mido import Message, MetaMessage, MidiFile, MidiTrack

from chuk_mcp_scales.core.pitch import Pitch, absolute_semitone

# Standard ticks per beat (quarter note) - industry standard
TICKS_PER_BEAT = 480


@dataclass(frozen=True)
class MidiEvent:
    """
    A single MIDI note event.

    All times are in ticks (absolute from start of track).
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int  # Absolute start time in ticks
    duration_ticks: int  # Duration in ticks
    velocity: int  # 0-127
    channel: int = 0  # 0-15

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


def events_to_midi(
    events: Sequence[MidiEvent],
    tempo_bpm: int = 120,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> MidiFile:
    """
    Convert a sequence of MidiEvents to a MidiFile.

    Args:
        events: Sequence of MidiEvent objects
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)

    Returns:
        A mido MidiFile ready to be saved
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    tempo_us = int(60_000_000 / tempo_bpm)
    track.append(MetaMessage("set_tempo", tempo=tempo_us, time=0))

    messages: list[tuple[int, Message]] = []
    for event in events:
        messages.append(
            (
                event.start_ticks,
                Message(
                    "note_on",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=event.velocity,
                    time=0,
                ),
            )
        )
        messages.append(
            (
                event.start_ticks + event.duration_ticks,
                Message("note_off", channel=event.channel, note=event.pitch, velocity=0, time=0),
            )
        )

    # note_off before note_on at the same tick
    messages.sort(key=lambda x: (x[0], x[1].type != "note_off"))

    # Convert to delta times
    current_time = 0
    for abs_time, msg in messages:
        msg.time = abs_time - current_time
        track.append(msg)
        current_time = abs_time

    track.append(MetaMessage("end_of_track", time=0))

    return mid


def root_midi_note(root: Pitch, octave: int = 4) -> int:
    """
    MIDI note number of a root pitch in a given octave. C4 = 60.

    Accidentals can cross the octave boundary (Cb4 = 59, B#4 = 72).
    """
    return (octave + 1) * 12 + absolute_semitone(root)


def pitch_to_midi(pitch: Pitch, root: Pitch, root_midi: int) -> int:
    """MIDI note number of a pitch, measured from the root's semitone offset."""
    return root_midi + pitch.semitone_offset - root.semitone_offset


def scale_to_events(
    pitches: Sequence[Pitch],
    octave: int = 4,
    note_beats: float = 1.0,
    velocity: int = 100,
    channel: int = 0,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> list[MidiEvent]:
    """
    Lay out a spelled scale as consecutive notes.

    The first pitch is treated as the root and placed in the given octave.
    """
    if not pitches:
        return []

    root = pitches[0]
    root_midi = root_midi_note(root, octave)
    note_ticks = beats_to_ticks(note_beats, ticks_per_beat)

    return [
        MidiEvent(
            pitch=pitch_to_midi(pitch, root, root_midi),
            start_ticks=i * note_ticks,
            duration_ticks=note_ticks,
            velocity=velocity,
            channel=channel,
        )
        for i, pitch in enumerate(pitches)
    ]


def scale_to_midi(
    pitches: Sequence[Pitch],
    octave: int = 4,
    tempo_bpm: int = 120,
    note_beats: float = 1.0,
    velocity: int = 100,
) -> MidiFile:
    """
    Render a spelled scale to a MidiFile, one note per pitch.

    Args:
        pitches: Scale pitches, root first (as from generate_scale_pitches)
        octave: Octave of the root (C4 = 60)
        tempo_bpm: Tempo in beats per minute
        note_beats: Length of each note in beats
        velocity: Note velocity (0-127)

    Returns:
        A mido MidiFile ready to be saved

    Example:
        pitches = generate_scale_pitches(Pitch.parse("D"), major.intervals)
        scale_to_midi(pitches).save("d_major.mid")
    """
    events = scale_to_events(pitches, octave=octave, note_beats=note_beats, velocity=velocity)
    return events_to_midi(events, tempo_bpm=tempo_bpm)


def beats_to_ticks(beats: float, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """Convert a beat position to ticks."""
    return int(beats * ticks_per_beat)
