"""
Core music-theory engine - pure functions over immutable values.

- Interval: size + quality + diatonic/semitone offsets
- Pitch: letter + accidental + cumulative offsets
- Interval arithmetic: classify, create, invert, add, lookups
- Pitch arithmetic: apply an interval, measure between pitches, transpose
- Scale walker: root + interval list -> pitches
"""

from chuk_mcp_scales.core.interval import (
    Interval,
    InvalidIntervalCombination,
    add_intervals,
    classify_quality,
    create_interval,
    get_pitch_offset,
    get_semitone_offset,
    interval_from_name,
    invert_interval,
)
from chuk_mcp_scales.core.pitch import (
    Pitch,
    absolute_semitone,
    accidental_from_offset,
    diatonic_step,
    get_interval_between,
    get_pitch,
    transpose_pitch,
)
from chuk_mcp_scales.core.scale import generate_scale_pitches, spell_scale

__all__ = [
    # Interval
    "Interval",
    "InvalidIntervalCombination",
    "classify_quality",
    "create_interval",
    "invert_interval",
    "add_intervals",
    "get_semitone_offset",
    "get_pitch_offset",
    "interval_from_name",
    # Pitch
    "Pitch",
    "get_pitch",
    "get_interval_between",
    "transpose_pitch",
    "diatonic_step",
    "absolute_semitone",
    "accidental_from_offset",
    # Scale
    "generate_scale_pitches",
    "spell_scale",
]
