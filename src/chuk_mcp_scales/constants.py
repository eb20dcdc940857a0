"""
Constants and enums for the scale system.

No magic strings - use enums for constrained values.
Enum values are the symbolic names used on the wire ("Major", "Sharp").
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class _SymbolicEnum(str, Enum):
    """Base for enums whose value is their wire name."""

    @classmethod
    def parse(cls, name: str):  # type: ignore[no-untyped-def]
        """
        Parse a member from its symbolic name.

        Matching ignores case, spaces, hyphens and underscores,
        so 'DoubleFlat', 'double_flat' and 'Double Flat' are equivalent.
        """
        wanted = name.strip().replace(" ", "").replace("_", "").replace("-", "").lower()
        for member in cls:
            if member.value.lower() == wanted or member.name.replace("_", "").lower() == wanted:
                return member
        raise ValueError(f"Unknown {cls.__name__}: {name}")


class DiatonicPitchClass(_SymbolicEnum):
    """The seven natural note letters, in cyclic order (index 0-6)."""

    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    A = "A"
    B = "B"

    @property
    def index(self) -> int:
        """Position in the C-B cycle."""
        return _DIATONIC_ORDER.index(self)

    @property
    def semitones(self) -> int:
        """Semitones above C."""
        return SEMITONES_FROM_C[self]

    @classmethod
    def from_index(cls, index: int) -> DiatonicPitchClass:
        """Get the letter at a cycle position (wraps, negative-safe)."""
        return _DIATONIC_ORDER[index % 7]


class Accidental(_SymbolicEnum):
    """Semitone modifier applied to a diatonic letter."""

    DOUBLE_FLAT = "DoubleFlat"
    FLAT = "Flat"
    NATURAL = "Natural"
    SHARP = "Sharp"
    DOUBLE_SHARP = "DoubleSharp"

    @property
    def offset(self) -> int:
        """Semitone modifier (-2 to +2)."""
        return ACCIDENTAL_OFFSETS[self]

    @property
    def symbol(self) -> str:
        """ASCII display symbol ('bb', 'b', '', '#', '##')."""
        return _ACCIDENTAL_SYMBOLS[self]


class IntervalSize(_SymbolicEnum):
    """Diatonic step count of an interval (index 0-7)."""

    UNISON = "Unison"
    SECOND = "Second"
    THIRD = "Third"
    FOURTH = "Fourth"
    FIFTH = "Fifth"
    SIXTH = "Sixth"
    SEVENTH = "Seventh"
    OCTAVE = "Octave"

    @property
    def index(self) -> int:
        """Number of diatonic steps (Unison=0 ... Octave=7)."""
        return _SIZE_ORDER.index(self)

    @property
    def is_perfect_class(self) -> bool:
        """True for sizes that take Perfect rather than Major/Minor."""
        return self in _PERFECT_CLASS_SIZES

    @classmethod
    def from_index(cls, index: int) -> IntervalSize:
        """Get the size for a step count 0-7."""
        if not 0 <= index <= 7:
            raise ValueError(f"Interval size index must be 0-7, got {index}")
        return _SIZE_ORDER[index]


class IntervalQuality(_SymbolicEnum):
    """Semitone-precision refinement of an interval size."""

    DIMINISHED = "Diminished"
    MINOR = "Minor"
    MAJOR = "Major"
    PERFECT = "Perfect"
    AUGMENTED = "Augmented"

    @property
    def abbreviation(self) -> str:
        """Short form used in interval names (P, M, m, aug, dim)."""
        return _QUALITY_ABBREVIATIONS[self]


# Lookup tables (module level to avoid enum member issues)
_DIATONIC_ORDER: tuple[DiatonicPitchClass, ...] = tuple(DiatonicPitchClass)
_SIZE_ORDER: tuple[IntervalSize, ...] = tuple(IntervalSize)

_PERFECT_CLASS_SIZES = frozenset(
    {IntervalSize.UNISON, IntervalSize.FOURTH, IntervalSize.FIFTH, IntervalSize.OCTAVE}
)

SEMITONES_FROM_C = MappingProxyType(
    {
        DiatonicPitchClass.C: 0,
        DiatonicPitchClass.D: 2,
        DiatonicPitchClass.E: 4,
        DiatonicPitchClass.F: 5,
        DiatonicPitchClass.G: 7,
        DiatonicPitchClass.A: 9,
        DiatonicPitchClass.B: 11,
    }
)

ACCIDENTAL_OFFSETS = MappingProxyType(
    {
        Accidental.DOUBLE_FLAT: -2,
        Accidental.FLAT: -1,
        Accidental.NATURAL: 0,
        Accidental.SHARP: 1,
        Accidental.DOUBLE_SHARP: 2,
    }
)

ACCIDENTAL_BY_OFFSET = MappingProxyType({v: k for k, v in ACCIDENTAL_OFFSETS.items()})

_ACCIDENTAL_SYMBOLS = MappingProxyType(
    {
        Accidental.DOUBLE_FLAT: "bb",
        Accidental.FLAT: "b",
        Accidental.NATURAL: "",
        Accidental.SHARP: "#",
        Accidental.DOUBLE_SHARP: "##",
    }
)

_QUALITY_ABBREVIATIONS = MappingProxyType(
    {
        IntervalQuality.DIMINISHED: "dim",
        IntervalQuality.MINOR: "m",
        IntervalQuality.MAJOR: "M",
        IntervalQuality.PERFECT: "P",
        IntervalQuality.AUGMENTED: "aug",
    }
)

# Schema version for persisted scale files - frozen for v1
SCALE_SCHEMA_VERSION = "scale/v1"


class ErrorMessages:
    """Standardized error messages."""

    SCALE_NOT_FOUND = "Scale not found: {scale_id}"
    INVALID_SCALE_ID = "Invalid scale id: '{scale_id}'. Expected a UUID."
    INVALID_SCALE = "Scale failed validation: {issues}"
    EMPTY_SEARCH = "Search query cannot be empty or whitespace"


class SuccessMessages:
    """Standardized success messages."""

    SCALE_CREATED = "Created scale '{name}'."
    SCALE_UPDATED = "Updated scale '{name}'."
    SCALE_DELETED = "Scale '{scale_id}' deleted"
    SCALES_SEEDED = "Seeded {count} scales."
    SCALE_EXPORTED = "Exported {count} pitches to {path}."
