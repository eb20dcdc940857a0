"""
Interval primitives - Interval and interval arithmetic.

An interval carries two offsets: diatonic steps (pitch_offset) and
semitones (semitone_offset). Size is read from the step count mod 7,
quality from the semitone count mod 12 through a per-size table.

Offsets are never forced back into a single octave here; compound
intervals keep their true span and still classify correctly.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from chuk_mcp_scales.constants import IntervalQuality, IntervalSize


class InvalidIntervalCombination(ValueError):
    """Raised when a size/quality pair does not exist (e.g. a Perfect Second)."""

    def __init__(self, size: IntervalSize, quality: IntervalQuality):
        self.size = size
        self.quality = quality
        super().__init__(f"Invalid quality '{quality.value}' for {size.value} interval")


def _read_only(table: dict[Any, dict[Any, Any]]) -> MappingProxyType:
    """Wrap a table of tables so neither level can be mutated."""
    return MappingProxyType({key: MappingProxyType(inner) for key, inner in table.items()})


# semitones (mod 12) -> quality, per size; anything unlisted is Diminished
_QUALITY_TABLE = _read_only(
    {
        IntervalSize.UNISON: {0: IntervalQuality.PERFECT, 1: IntervalQuality.AUGMENTED},
        IntervalSize.SECOND: {
            1: IntervalQuality.MINOR,
            2: IntervalQuality.MAJOR,
            3: IntervalQuality.AUGMENTED,
        },
        IntervalSize.THIRD: {
            3: IntervalQuality.MINOR,
            4: IntervalQuality.MAJOR,
            5: IntervalQuality.AUGMENTED,
        },
        IntervalSize.FOURTH: {5: IntervalQuality.PERFECT, 6: IntervalQuality.AUGMENTED},
        IntervalSize.FIFTH: {7: IntervalQuality.PERFECT, 8: IntervalQuality.AUGMENTED},
        IntervalSize.SIXTH: {
            8: IntervalQuality.MINOR,
            9: IntervalQuality.MAJOR,
            10: IntervalQuality.AUGMENTED,
        },
        IntervalSize.SEVENTH: {
            10: IntervalQuality.MINOR,
            11: IntervalQuality.MAJOR,
            0: IntervalQuality.AUGMENTED,
        },
        IntervalSize.OCTAVE: {0: IntervalQuality.PERFECT, 1: IntervalQuality.AUGMENTED},
    }
)

# Canonical semitone span for every valid size/quality pair
_SEMITONE_TABLE = _read_only(
    {
        IntervalSize.UNISON: {
            IntervalQuality.DIMINISHED: -1,
            IntervalQuality.PERFECT: 0,
            IntervalQuality.AUGMENTED: 1,
        },
        IntervalSize.SECOND: {
            IntervalQuality.DIMINISHED: 0,
            IntervalQuality.MINOR: 1,
            IntervalQuality.MAJOR: 2,
            IntervalQuality.AUGMENTED: 3,
        },
        IntervalSize.THIRD: {
            IntervalQuality.DIMINISHED: 2,
            IntervalQuality.MINOR: 3,
            IntervalQuality.MAJOR: 4,
            IntervalQuality.AUGMENTED: 5,
        },
        IntervalSize.FOURTH: {
            IntervalQuality.DIMINISHED: 4,
            IntervalQuality.PERFECT: 5,
            IntervalQuality.AUGMENTED: 6,
        },
        IntervalSize.FIFTH: {
            IntervalQuality.DIMINISHED: 6,
            IntervalQuality.PERFECT: 7,
            IntervalQuality.AUGMENTED: 8,
        },
        IntervalSize.SIXTH: {
            IntervalQuality.DIMINISHED: 7,
            IntervalQuality.MINOR: 8,
            IntervalQuality.MAJOR: 9,
            IntervalQuality.AUGMENTED: 10,
        },
        IntervalSize.SEVENTH: {
            IntervalQuality.DIMINISHED: 9,
            IntervalQuality.MINOR: 10,
            IntervalQuality.MAJOR: 11,
            IntervalQuality.AUGMENTED: 12,
        },
        IntervalSize.OCTAVE: {
            IntervalQuality.DIMINISHED: 11,
            IntervalQuality.PERFECT: 12,
            IntervalQuality.AUGMENTED: 13,
        },
    }
)

# Short names like 'P5', 'm3', 'aug4', 'dim7' (also 'A4', 'd5')
_SHORT_NAME = re.compile(r"^(P|M|m|A|aug|d|dim)([1-8])$")
_SHORT_QUALITIES = MappingProxyType(
    {
        "P": IntervalQuality.PERFECT,
        "M": IntervalQuality.MAJOR,
        "m": IntervalQuality.MINOR,
        "A": IntervalQuality.AUGMENTED,
        "aug": IntervalQuality.AUGMENTED,
        "d": IntervalQuality.DIMINISHED,
        "dim": IntervalQuality.DIMINISHED,
    }
)


class Interval(BaseModel):
    """
    Distance between two pitches, as size + quality + offsets.

    Serializes as {name, quality, pitchOffset, semitoneOffset}
    with enum values as their symbolic names.

    Immutable and hashable.
    """

    name: IntervalSize = Field(..., description="Interval size (Unison ... Octave)")
    quality: IntervalQuality = Field(..., description="Interval quality")
    pitch_offset: int = Field(0, description="Diatonic steps spanned")
    semitone_offset: int = Field(0, description="Semitones spanned")

    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}

    @property
    def size(self) -> IntervalSize:
        """Alias for name - the diatonic size."""
        return self.name

    def invert(self) -> Interval:
        """Invert within the octave (M3 -> m6, P8 -> P1)."""
        return invert_interval(self)

    def __add__(self, other: Interval) -> Interval:
        """Add two intervals offset by offset."""
        if not isinstance(other, Interval):
            return NotImplemented
        return add_intervals(self, other)

    def __str__(self) -> str:
        return f"{self.quality.abbreviation}{self.name.index + 1}"

    @classmethod
    def parse(cls, text: str) -> Interval:
        """Parse a short name like 'M3', 'P5', 'aug4' or 'dim7'."""
        match = _SHORT_NAME.match(text.strip())
        if match is None:
            raise ValueError(f"Unknown interval: {text}")
        quality = _SHORT_QUALITIES[match.group(1)]
        size = IntervalSize.from_index(int(match.group(2)) - 1)
        return interval_from_name(size, quality)

    @classmethod
    def coerce(cls, value: Interval | str | dict[str, Any]) -> Interval:
        """
        Build an interval from a short name, a wire dict, or an Interval.

        A dict missing either offset gets it from the size/quality lookup.
        """
        if isinstance(value, Interval):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        data = dict(value)
        has_pitch = "pitchOffset" in data or "pitch_offset" in data
        has_semitone = "semitoneOffset" in data or "semitone_offset" in data
        if not (has_pitch and has_semitone):
            canonical = interval_from_name(
                IntervalSize.parse(data["name"]), IntervalQuality.parse(data["quality"])
            )
            if not has_pitch:
                data["pitchOffset"] = canonical.pitch_offset
            if not has_semitone:
                data["semitoneOffset"] = canonical.semitone_offset
        return cls.model_validate(data)


def classify_quality(size: IntervalSize, semitones: int) -> IntervalQuality:
    """
    Classify the quality of an interval from its size and semitone count.

    Total over every size and every integer: values not listed for a
    size fall into Diminished, even where that is musically odd.
    """
    return _QUALITY_TABLE[size].get(semitones % 12, IntervalQuality.DIMINISHED)


def create_interval(semitone_offset: int, pitch_offset: int) -> Interval:
    """
    Create an interval from raw offsets.

    Size and quality come from the normalized (mod 7 / mod 12) view,
    but the returned interval keeps the offsets exactly as given.

    Args:
        semitone_offset: Semitones spanned (any integer)
        pitch_offset: Diatonic steps spanned (any integer)

    Returns:
        The classified Interval

    Example:
        create_interval(2, 1) -> Major Second (pitch 1, semitones 2)
        create_interval(12, 7) -> Perfect Unison (pitch 7, semitones 12)
    """
    normalized_semitones = semitone_offset % 12
    normalized_pitches = pitch_offset % 7

    size = IntervalSize.from_index(normalized_pitches)
    quality = classify_quality(size, normalized_semitones)

    return Interval(
        name=size,
        quality=quality,
        pitch_offset=pitch_offset,
        semitone_offset=semitone_offset,
    )


def invert_interval(interval: Interval) -> Interval:
    """
    Invert an interval within the octave.

    An exact octave (7 steps or 12 semitones) inverts to a unison.
    """
    inverse_pitch_offset = 7 - interval.pitch_offset
    inverse_semitone_offset = 12 - interval.semitone_offset

    if interval.pitch_offset == 7 or interval.semitone_offset == 12:
        inverse_pitch_offset = 0
        inverse_semitone_offset = 0

    return create_interval(inverse_semitone_offset, inverse_pitch_offset)


def add_intervals(first: Interval, second: Interval) -> Interval:
    """
    Add two intervals by summing their offsets.

    The sum is classified from the combined offsets, so
    M2 + M3 (6 semitones over 3 steps) is an augmented fourth.
    """
    return create_interval(
        first.semitone_offset + second.semitone_offset,
        first.pitch_offset + second.pitch_offset,
    )


def get_semitone_offset(size: IntervalSize, quality: IntervalQuality) -> int:
    """
    Get the canonical semitone span of a size/quality pair.

    Raises:
        InvalidIntervalCombination: If the quality does not apply to the size
    """
    try:
        return _SEMITONE_TABLE[size][quality]
    except KeyError:
        raise InvalidIntervalCombination(size, quality) from None


def get_pitch_offset(size: IntervalSize) -> int:
    """Get the diatonic step count of a size (Unison=0 ... Octave=7)."""
    return size.index


def interval_from_name(size: IntervalSize, quality: IntervalQuality) -> Interval:
    """Build a fully populated interval from its size and quality."""
    return Interval(
        name=size,
        quality=quality,
        pitch_offset=get_pitch_offset(size),
        semitone_offset=get_semitone_offset(size, quality),
    )
