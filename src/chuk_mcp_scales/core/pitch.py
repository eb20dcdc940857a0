"""
Pitch primitives - Pitch and pitch arithmetic.

A Pitch is a diatonic letter plus an accidental, carrying cumulative
pitch/semitone offsets from an implicit reference (usually a scale root).
Applying an interval picks the new letter from the step count and derives
the accidental from the gap between expected and actual semitones.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from chuk_mcp_scales.constants import (
    ACCIDENTAL_BY_OFFSET,
    Accidental,
    DiatonicPitchClass,
    IntervalSize,
)
from chuk_mcp_scales.core.interval import Interval, classify_quality

# Letter followed by an accidental in ASCII or unicode form
_PITCH_NAME = re.compile(r"^([A-Ga-g])(bb|b|##|#|x|♭♭|♭|♯♯|♯|♮)?$")
_ACCIDENTAL_SPELLINGS = {
    None: Accidental.NATURAL,
    "♮": Accidental.NATURAL,
    "b": Accidental.FLAT,
    "♭": Accidental.FLAT,
    "bb": Accidental.DOUBLE_FLAT,
    "♭♭": Accidental.DOUBLE_FLAT,
    "#": Accidental.SHARP,
    "♯": Accidental.SHARP,
    "##": Accidental.DOUBLE_SHARP,
    "♯♯": Accidental.DOUBLE_SHARP,
    "x": Accidental.DOUBLE_SHARP,
}


class Pitch(BaseModel):
    """
    A spelled pitch with cumulative offsets.

    The offsets are displacement from a reference pitch, not an
    absolute register: they accumulate across interval applications.

    Serializes as {name, accidental, pitchOffset, semitoneOffset}.
    Immutable and hashable.
    """

    name: DiatonicPitchClass = Field(..., description="Diatonic letter (C-B)")
    accidental: Accidental = Field(Accidental.NATURAL, description="Accidental")
    pitch_offset: int = Field(0, description="Cumulative diatonic steps from the reference")
    semitone_offset: int = Field(0, description="Cumulative semitones from the reference")

    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}

    def transpose(self, semitones: int) -> Pitch:
        """Shift the semitone counter (spelling is unchanged)."""
        return transpose_pitch(self, semitones)

    def interval_to(self, other: Pitch) -> Interval:
        """Get the interval from this pitch to another."""
        return get_interval_between(self, other)

    def __add__(self, interval: Interval) -> Pitch:
        """Apply an interval to this pitch."""
        if not isinstance(interval, Interval):
            return NotImplemented
        return get_pitch(self, interval)

    def __str__(self) -> str:
        return f"{self.name.value}{self.accidental.symbol}"

    @classmethod
    def parse(cls, name: str) -> Pitch:
        """Parse a pitch from a string like 'C', 'F#', 'Bb', 'Ebb' or 'G##'."""
        match = _PITCH_NAME.match(name.strip())
        if match is None:
            raise ValueError(f"Unknown pitch: {name}")
        return cls(
            name=DiatonicPitchClass(match.group(1).upper()),
            accidental=_ACCIDENTAL_SPELLINGS[match.group(2)],
        )

    @classmethod
    def coerce(cls, value: Pitch | str | dict[str, Any]) -> Pitch:
        """
        Build a pitch from a name string, a wire dict, or a Pitch.

        A dict gives both offsets or neither; neither means a reference pitch.
        """
        if isinstance(value, Pitch):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        has_pitch = "pitchOffset" in value or "pitch_offset" in value
        has_semitone = "semitoneOffset" in value or "semitone_offset" in value
        if has_pitch != has_semitone:
            raise ValueError("Pitch needs both pitchOffset and semitoneOffset, or neither")
        return cls.model_validate(value)


def diatonic_step(name: DiatonicPitchClass, steps: int) -> DiatonicPitchClass:
    """Advance around the C-B cycle by a number of steps (negative-safe)."""
    return DiatonicPitchClass.from_index(name.index + steps)


def absolute_semitone(pitch: Pitch) -> int:
    """Semitones above C for the pitch's spelling, ignoring its offsets."""
    return pitch.name.semitones + pitch.accidental.offset


def accidental_from_offset(offset: int) -> Accidental:
    """Map a semitone difference to an accidental; unmapped values are Natural."""
    return ACCIDENTAL_BY_OFFSET.get(offset, Accidental.NATURAL)


def get_pitch(start: Pitch, interval: Interval) -> Pitch:
    """
    Apply an interval to a pitch.

    The letter advances by the interval's step count; the accidental is
    whatever makes the letter land on the expected semitone.

    Args:
        start: Starting pitch
        interval: Interval to apply

    Returns:
        The resulting Pitch, with offsets accumulated from start

    Example:
        get_pitch(C, m2) -> Db
        get_pitch(A#, M2) -> B#
    """
    new_name = diatonic_step(start.name, interval.pitch_offset)
    expected_semitones = (absolute_semitone(start) + interval.semitone_offset) % 12
    actual_semitones = new_name.semitones
    accidental_offset = expected_semitones - actual_semitones

    # Bring the difference into [-6, 6]
    if accidental_offset < -6:
        accidental_offset += 12
    elif accidental_offset > 6:
        accidental_offset -= 12

    return Pitch(
        name=new_name,
        accidental=accidental_from_offset(accidental_offset),
        pitch_offset=start.pitch_offset + interval.pitch_offset,
        semitone_offset=start.semitone_offset + interval.semitone_offset,
    )


def get_interval_between(from_pitch: Pitch, to_pitch: Pitch) -> Interval:
    """
    Get the interval from one pitch to another.

    Descending deltas are raised by whole octaves (7 steps / 12 semitones)
    until non-negative. Unlike create_interval, the returned interval
    stores these normalized offsets rather than the signed deltas.
    """
    pitch_offset = to_pitch.pitch_offset - from_pitch.pitch_offset
    semitone_offset = to_pitch.semitone_offset - from_pitch.semitone_offset

    while pitch_offset < 0:
        pitch_offset += 7
    while semitone_offset < 0:
        semitone_offset += 12

    size = IntervalSize.from_index(pitch_offset % 7)
    quality = classify_quality(size, semitone_offset % 12)

    return Interval(
        name=size,
        quality=quality,
        pitch_offset=pitch_offset,
        semitone_offset=semitone_offset,
    )


def transpose_pitch(pitch: Pitch, semitones: int) -> Pitch:
    """
    Transpose a pitch by raw semitones.

    Only the semitone counter moves; letter, accidental and
    pitch offset are left as they are (no respelling).
    """
    return Pitch(
        name=pitch.name,
        accidental=pitch.accidental,
        pitch_offset=pitch.pitch_offset,
        semitone_offset=pitch.semitone_offset + semitones,
    )
