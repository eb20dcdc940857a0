"""
Scale walker - turns a root pitch and an interval list into pitches.

Scale intervals are measured from the root (not from degree to degree),
so every pitch is computed against the root directly.
"""

from __future__ import annotations

from collections.abc import Sequence

from .interval import Interval
from .pitch import Pitch, get_pitch


def generate_scale_pitches(root: Pitch, intervals: Sequence[Interval]) -> list[Pitch]:
    """
    Generate the pitches of a scale.

    Args:
        root: The root pitch (returned unchanged as the first element)
        intervals: Ordered intervals, each measured from the root

    Returns:
        [root] followed by one pitch per interval

    Example:
        generate_scale_pitches(C, [M2, M3]) -> [C, D, E]
    """
    pitches = [root]
    for interval in intervals:
        pitches.append(get_pitch(root, interval))
    return pitches


def spell_scale(root: Pitch, intervals: Sequence[Interval]) -> list[str]:
    """Get the display names of a scale's pitches (e.g. ['D', 'E', 'F#', ...])."""
    return [str(pitch) for pitch in generate_scale_pitches(root, intervals)]
