"""
Export pipeline - renders spelled scales to MIDI.

The pipeline:
    ScaleDefinition + root Pitch
    → generate_scale_pitches (spelled pitches)
    → MidiEvent list
    → MIDI File
"""

from chuk_mcp_scales.compiler.midi import (
    TICKS_PER_BEAT,
    MidiEvent,
    events_to_midi,
    pitch_to_midi,
    root_midi_note,
    scale_to_events,
    scale_to_midi,
)

__all__ = [
    "TICKS_PER_BEAT",
    "MidiEvent",
    "events_to_midi",
    "pitch_to_midi",
    "root_midi_note",
    "scale_to_events",
    "scale_to_midi",
]
