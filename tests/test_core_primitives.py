"""
Tests for the core music-theory engine.

Tests cover:
- Enums and lookup tables (constants.py)
- Interval arithmetic (interval.py)
- Pitch arithmetic (pitch.py)
- Scale walker (scale.py)
"""

import pytest

from chuk_mcp_scales.constants import (
    Accidental,
    DiatonicPitchClass,
    IntervalQuality,
    IntervalSize,
)
from chuk_mcp_scales.core import (
    Interval,
    InvalidIntervalCombination,
    Pitch,
    absolute_semitone,
    accidental_from_offset,
    add_intervals,
    classify_quality,
    create_interval,
    diatonic_step,
    generate_scale_pitches,
    get_interval_between,
    get_pitch,
    get_pitch_offset,
    get_semitone_offset,
    interval_from_name,
    invert_interval,
    spell_scale,
    transpose_pitch,
)
from chuk_mcp_scales.core.interval import _QUALITY_TABLE, _SEMITONE_TABLE, _SHORT_QUALITIES

MAJOR = [Interval.parse(n) for n in ("M2", "M3", "P4", "P5", "M6", "M7", "P8")]
NATURAL_MINOR = [Interval.parse(n) for n in ("M2", "m3", "P4", "P5", "m6", "m7", "P8")]


def pitch(name: str, pitch_offset: int = 0, semitone_offset: int = 0) -> Pitch:
    """Build a pitch from a name with explicit offsets."""
    p = Pitch.parse(name)
    return Pitch(
        name=p.name,
        accidental=p.accidental,
        pitch_offset=pitch_offset,
        semitone_offset=semitone_offset,
    )


class TestEnums:
    """Tests for the symbolic enums."""

    def test_diatonic_cycle(self) -> None:
        """Letters wrap around the C-B cycle."""
        assert DiatonicPitchClass.C.index == 0
        assert DiatonicPitchClass.B.index == 6
        assert DiatonicPitchClass.from_index(7) == DiatonicPitchClass.C
        assert DiatonicPitchClass.from_index(-1) == DiatonicPitchClass.B

    def test_diatonic_semitones(self) -> None:
        """Letters map to semitones above C."""
        assert [p.semitones for p in DiatonicPitchClass] == [0, 2, 4, 5, 7, 9, 11]

    def test_accidental_offsets(self) -> None:
        """Accidentals modify by -2 to +2 semitones."""
        assert [a.offset for a in Accidental] == [-2, -1, 0, 1, 2]

    def test_interval_size_index(self) -> None:
        """Sizes count diatonic steps."""
        assert IntervalSize.UNISON.index == 0
        assert IntervalSize.OCTAVE.index == 7
        assert IntervalSize.from_index(4) == IntervalSize.FIFTH

    def test_interval_size_index_out_of_range(self) -> None:
        """Step counts outside 0-7 have no size."""
        with pytest.raises(ValueError):
            IntervalSize.from_index(8)

    def test_perfect_class(self) -> None:
        """Unison, fourth, fifth and octave are perfect-class."""
        perfect = [s for s in IntervalSize if s.is_perfect_class]
        assert perfect == [
            IntervalSize.UNISON,
            IntervalSize.FOURTH,
            IntervalSize.FIFTH,
            IntervalSize.OCTAVE,
        ]

    def test_parse(self) -> None:
        """Enums parse from their names, loosely."""
        assert Accidental.parse("DoubleFlat") == Accidental.DOUBLE_FLAT
        assert Accidental.parse("double_flat") == Accidental.DOUBLE_FLAT
        assert Accidental.parse("Double Sharp") == Accidental.DOUBLE_SHARP
        assert IntervalQuality.parse("perfect") == IntervalQuality.PERFECT
        assert IntervalSize.parse("SEVENTH") == IntervalSize.SEVENTH

    def test_parse_unknown(self) -> None:
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown IntervalQuality"):
            IntervalQuality.parse("Huge")


class TestClassifyQuality:
    """Tests for quality classification."""

    def test_table_entries(self) -> None:
        """Listed semitone counts classify as expected."""
        assert classify_quality(IntervalSize.UNISON, 0) == IntervalQuality.PERFECT
        assert classify_quality(IntervalSize.UNISON, 1) == IntervalQuality.AUGMENTED
        assert classify_quality(IntervalSize.SECOND, 1) == IntervalQuality.MINOR
        assert classify_quality(IntervalSize.SECOND, 2) == IntervalQuality.MAJOR
        assert classify_quality(IntervalSize.THIRD, 4) == IntervalQuality.MAJOR
        assert classify_quality(IntervalSize.FOURTH, 6) == IntervalQuality.AUGMENTED
        assert classify_quality(IntervalSize.FIFTH, 7) == IntervalQuality.PERFECT
        assert classify_quality(IntervalSize.SIXTH, 8) == IntervalQuality.MINOR
        assert classify_quality(IntervalSize.SEVENTH, 10) == IntervalQuality.MINOR
        assert classify_quality(IntervalSize.SEVENTH, 0) == IntervalQuality.AUGMENTED
        assert classify_quality(IntervalSize.OCTAVE, 0) == IntervalQuality.PERFECT

    def test_unlisted_is_diminished(self) -> None:
        """Anything a size does not list falls into Diminished."""
        assert classify_quality(IntervalSize.SECOND, 0) == IntervalQuality.DIMINISHED
        assert classify_quality(IntervalSize.FOURTH, 4) == IntervalQuality.DIMINISHED
        assert classify_quality(IntervalSize.FIFTH, 6) == IntervalQuality.DIMINISHED
        assert classify_quality(IntervalSize.UNISON, 5) == IntervalQuality.DIMINISHED

    def test_reduces_mod_12(self) -> None:
        """Semitone counts are reduced into one octave, negatives included."""
        assert classify_quality(IntervalSize.THIRD, 16) == IntervalQuality.MAJOR
        assert classify_quality(IntervalSize.SEVENTH, -2) == IntervalQuality.MINOR


class TestCreateInterval:
    """Tests for create_interval."""

    def test_simple(self) -> None:
        """Offsets inside one octave classify directly."""
        interval = create_interval(7, 4)
        assert interval.name == IntervalSize.FIFTH
        assert interval.quality == IntervalQuality.PERFECT
        assert interval.pitch_offset == 4
        assert interval.semitone_offset == 7

    def test_octave_keeps_offsets(self) -> None:
        """A full octave reads as a unison but keeps its span."""
        interval = create_interval(12, 7)
        assert interval.name == IntervalSize.UNISON
        assert interval.quality == IntervalQuality.PERFECT
        assert interval.pitch_offset == 7
        assert interval.semitone_offset == 12

    @pytest.mark.parametrize(
        ("semitones", "steps", "size", "quality"),
        [
            (-2, -1, IntervalSize.SEVENTH, IntervalQuality.MINOR),
            (-1, -1, IntervalSize.SEVENTH, IntervalQuality.MAJOR),
            (-5, -3, IntervalSize.FIFTH, IntervalQuality.PERFECT),
            (13, 8, IntervalSize.SECOND, IntervalQuality.MINOR),
            (24, 14, IntervalSize.UNISON, IntervalQuality.PERFECT),
            (15, 9, IntervalSize.THIRD, IntervalQuality.MINOR),
        ],
    )
    def test_out_of_octave(
        self,
        semitones: int,
        steps: int,
        size: IntervalSize,
        quality: IntervalQuality,
    ) -> None:
        """Negative and compound offsets classify by their reduced form."""
        interval = create_interval(semitones, steps)
        assert interval.name == size
        assert interval.quality == quality
        assert interval.pitch_offset == steps
        assert interval.semitone_offset == semitones


class TestInvertInterval:
    """Tests for invert_interval."""

    def test_major_third(self) -> None:
        """M3 inverts to m6."""
        inverted = invert_interval(Interval.parse("M3"))
        assert inverted.name == IntervalSize.SIXTH
        assert inverted.quality == IntervalQuality.MINOR
        assert (inverted.pitch_offset, inverted.semitone_offset) == (5, 8)

    def test_perfect_fifth(self) -> None:
        """P5 inverts to P4."""
        assert invert_interval(Interval.parse("P5")) == Interval.parse("P4")

    def test_minor_second(self) -> None:
        """m2 inverts to M7."""
        assert invert_interval(Interval.parse("m2")) == Interval.parse("M7")

    def test_augmented_fourth(self) -> None:
        """aug4 inverts to dim5."""
        inverted = invert_interval(Interval.parse("aug4"))
        assert inverted.name == IntervalSize.FIFTH
        assert inverted.quality == IntervalQuality.DIMINISHED

    def test_octave_becomes_unison(self) -> None:
        """An exact octave inverts to a zero-span unison."""
        inverted = invert_interval(Interval.parse("P8"))
        assert inverted.name == IntervalSize.UNISON
        assert inverted.quality == IntervalQuality.PERFECT
        assert (inverted.pitch_offset, inverted.semitone_offset) == (0, 0)

    def test_unison_becomes_octave_span(self) -> None:
        """A unison inverts to a full-octave span classified as unison."""
        inverted = invert_interval(Interval.parse("P1"))
        assert inverted.name == IntervalSize.UNISON
        assert (inverted.pitch_offset, inverted.semitone_offset) == (7, 12)

    def test_method(self) -> None:
        """Interval.invert delegates to invert_interval."""
        assert Interval.parse("M6").invert() == Interval.parse("m3")


class TestAddIntervals:
    """Tests for add_intervals."""

    def test_minor_thirds(self) -> None:
        """m3 + m3 is a diminished fifth."""
        total = add_intervals(Interval.parse("m3"), Interval.parse("m3"))
        assert total.name == IntervalSize.FIFTH
        assert total.quality == IntervalQuality.DIMINISHED
        assert (total.pitch_offset, total.semitone_offset) == (4, 6)

    def test_perfect_fourths(self) -> None:
        """P4 + P4 is a minor seventh."""
        total = add_intervals(Interval.parse("P4"), Interval.parse("P4"))
        assert total.name == IntervalSize.SEVENTH
        assert total.quality == IntervalQuality.MINOR
        assert (total.pitch_offset, total.semitone_offset) == (6, 10)

    def test_major_second_plus_major_third(self) -> None:
        """M2 + M3 is an augmented fourth."""
        total = Interval.parse("M2") + Interval.parse("M3")
        assert total == Interval.parse("aug4")

    def test_fifth_plus_fourth(self) -> None:
        """P5 + P4 spans an octave and reads as a unison."""
        total = Interval.parse("P5") + Interval.parse("P4")
        assert total.name == IntervalSize.UNISON
        assert (total.pitch_offset, total.semitone_offset) == (7, 12)


class TestLookups:
    """Tests for semitone and pitch offset lookups."""

    @pytest.mark.parametrize(
        ("size", "quality", "expected"),
        [
            (IntervalSize.UNISON, IntervalQuality.DIMINISHED, -1),
            (IntervalSize.UNISON, IntervalQuality.PERFECT, 0),
            (IntervalSize.SECOND, IntervalQuality.DIMINISHED, 0),
            (IntervalSize.THIRD, IntervalQuality.MAJOR, 4),
            (IntervalSize.FOURTH, IntervalQuality.AUGMENTED, 6),
            (IntervalSize.FIFTH, IntervalQuality.DIMINISHED, 6),
            (IntervalSize.SIXTH, IntervalQuality.AUGMENTED, 10),
            (IntervalSize.SEVENTH, IntervalQuality.AUGMENTED, 12),
            (IntervalSize.OCTAVE, IntervalQuality.DIMINISHED, 11),
            (IntervalSize.OCTAVE, IntervalQuality.PERFECT, 12),
            (IntervalSize.OCTAVE, IntervalQuality.AUGMENTED, 13),
        ],
    )
    def test_semitone_offset(
        self, size: IntervalSize, quality: IntervalQuality, expected: int
    ) -> None:
        """Valid pairs have a canonical semitone span."""
        assert get_semitone_offset(size, quality) == expected

    @pytest.mark.parametrize(
        ("size", "quality"),
        [
            (IntervalSize.SECOND, IntervalQuality.PERFECT),
            (IntervalSize.FIFTH, IntervalQuality.MAJOR),
            (IntervalSize.OCTAVE, IntervalQuality.MINOR),
            (IntervalSize.UNISON, IntervalQuality.MAJOR),
        ],
    )
    def test_invalid_combination(self, size: IntervalSize, quality: IntervalQuality) -> None:
        """Pairs that do not exist raise InvalidIntervalCombination."""
        with pytest.raises(InvalidIntervalCombination) as exc_info:
            get_semitone_offset(size, quality)
        assert exc_info.value.size == size
        assert exc_info.value.quality == quality

    def test_invalid_combination_is_value_error(self) -> None:
        """InvalidIntervalCombination is a ValueError."""
        with pytest.raises(ValueError, match="Invalid quality 'Perfect' for Third"):
            get_semitone_offset(IntervalSize.THIRD, IntervalQuality.PERFECT)

    def test_pitch_offset(self) -> None:
        """Pitch offset is the size's step count."""
        assert [get_pitch_offset(s) for s in IntervalSize] == list(range(8))

    def test_interval_from_name(self) -> None:
        """Size and quality fill in both offsets."""
        interval = interval_from_name(IntervalSize.SIXTH, IntervalQuality.MAJOR)
        assert (interval.pitch_offset, interval.semitone_offset) == (5, 9)


class TestIntervalParsing:
    """Tests for Interval short names."""

    def test_parse(self) -> None:
        """Short names parse to fully populated intervals."""
        assert Interval.parse("M3") == interval_from_name(
            IntervalSize.THIRD, IntervalQuality.MAJOR
        )
        assert Interval.parse("m3").quality == IntervalQuality.MINOR
        assert Interval.parse("A4") == Interval.parse("aug4")
        assert Interval.parse("d5") == Interval.parse("dim5")

    def test_parse_unknown(self) -> None:
        """Malformed short names raise ValueError."""
        with pytest.raises(ValueError):
            Interval.parse("X9")

    def test_parse_invalid_combination(self) -> None:
        """Well-formed names for impossible intervals are rejected."""
        with pytest.raises(InvalidIntervalCombination):
            Interval.parse("P3")

    def test_str(self) -> None:
        """Intervals display as short names."""
        assert str(Interval.parse("M2")) == "M2"
        assert str(Interval.parse("P8")) == "P8"
        assert str(Interval.parse("A4")) == "aug4"
        assert str(Interval.parse("d5")) == "dim5"

    def test_coerce(self) -> None:
        """Intervals coerce from names and dicts."""
        expected = Interval.parse("m7")
        assert Interval.coerce("m7") == expected
        assert Interval.coerce({"name": "Seventh", "quality": "Minor"}) == expected
        assert (
            Interval.coerce(
                {"name": "Seventh", "quality": "Minor", "pitchOffset": 6, "semitoneOffset": 10}
            )
            == expected
        )
        assert Interval.coerce(expected) is expected

    def test_lookup_tables_are_read_only(self) -> None:
        """The quality, semitone and short-name tables reject writes."""
        with pytest.raises(TypeError):
            _QUALITY_TABLE[IntervalSize.SECOND][4] = IntervalQuality.MAJOR  # type: ignore[index]
        with pytest.raises(TypeError):
            _SEMITONE_TABLE[IntervalSize.THIRD][IntervalQuality.MAJOR] = 5  # type: ignore[index]
        with pytest.raises(TypeError):
            _SHORT_QUALITIES["X"] = IntervalQuality.PERFECT  # type: ignore[index]


class TestPitchParsing:
    """Tests for Pitch names."""

    def test_parse(self) -> None:
        """Pitch names parse letter and accidental."""
        assert Pitch.parse("C") == Pitch(name=DiatonicPitchClass.C)
        assert Pitch.parse("f#").accidental == Accidental.SHARP
        assert Pitch.parse("Bb").accidental == Accidental.FLAT
        assert Pitch.parse("Ebb").accidental == Accidental.DOUBLE_FLAT
        assert Pitch.parse("G##").accidental == Accidental.DOUBLE_SHARP
        assert Pitch.parse("Gx").accidental == Accidental.DOUBLE_SHARP
        assert Pitch.parse("B♭").accidental == Accidental.FLAT

    def test_parse_starts_at_zero(self) -> None:
        """Parsed pitches carry zero offsets."""
        p = Pitch.parse("D")
        assert p.pitch_offset == 0
        assert p.semitone_offset == 0

    def test_parse_unknown(self) -> None:
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown pitch"):
            Pitch.parse("H")

    def test_str(self) -> None:
        """Pitches display with ASCII accidentals."""
        assert str(Pitch.parse("Db")) == "Db"
        assert str(Pitch.parse("F##")) == "F##"
        assert str(Pitch.parse("A")) == "A"


class TestPitchHelpers:
    """Tests for small pitch helpers."""

    def test_diatonic_step(self) -> None:
        """Letters advance with wrap in both directions."""
        assert diatonic_step(DiatonicPitchClass.A, 2) == DiatonicPitchClass.C
        assert diatonic_step(DiatonicPitchClass.C, -1) == DiatonicPitchClass.B
        assert diatonic_step(DiatonicPitchClass.D, 7) == DiatonicPitchClass.D

    def test_absolute_semitone(self) -> None:
        """Spelling maps to semitones above C."""
        assert absolute_semitone(Pitch.parse("A#")) == 10
        assert absolute_semitone(Pitch.parse("Cb")) == -1
        assert absolute_semitone(Pitch.parse("B#")) == 12

    def test_accidental_from_offset(self) -> None:
        """Offsets -2..2 map to accidentals, others fall back to Natural."""
        assert accidental_from_offset(-2) == Accidental.DOUBLE_FLAT
        assert accidental_from_offset(1) == Accidental.SHARP
        assert accidental_from_offset(3) == Accidental.NATURAL
        assert accidental_from_offset(-5) == Accidental.NATURAL


class TestGetPitch:
    """Tests for applying intervals to pitches."""

    def test_minor_second_from_c(self) -> None:
        """C + m2 is Db."""
        result = get_pitch(Pitch.parse("C"), Interval.parse("m2"))
        assert result.name == DiatonicPitchClass.D
        assert result.accidental == Accidental.FLAT

    def test_augmented_fourth_from_f(self) -> None:
        """F + aug4 is B natural."""
        result = get_pitch(Pitch.parse("F"), Interval.parse("aug4"))
        assert result.name == DiatonicPitchClass.B
        assert result.accidental == Accidental.NATURAL

    def test_augmented_second_from_c(self) -> None:
        """C + aug2 is D sharp."""
        result = get_pitch(Pitch.parse("C"), Interval.parse("aug2"))
        assert result.name == DiatonicPitchClass.D
        assert result.accidental == Accidental.SHARP

    def test_wraps_across_octave(self) -> None:
        """A# + M2 is B#, spelled through the octave wrap."""
        result = get_pitch(Pitch.parse("A#"), Interval.parse("M2"))
        assert result.name == DiatonicPitchClass.B
        assert result.accidental == Accidental.SHARP

    def test_wraps_downward(self) -> None:
        """B + m2 is C natural."""
        result = get_pitch(Pitch.parse("B"), Interval.parse("m2"))
        assert str(result) == "C"

    def test_wraps_upward(self) -> None:
        """B + dim2 and Cb + P1 are both Cb, spelled through the upper wrap."""
        result = get_pitch(Pitch.parse("B"), Interval.parse("d2"))
        assert result.name == DiatonicPitchClass.C
        assert result.accidental == Accidental.FLAT

        result = get_pitch(Pitch.parse("Cb"), Interval.parse("P1"))
        assert result.name == DiatonicPitchClass.C
        assert result.accidental == Accidental.FLAT

    def test_offsets_accumulate(self) -> None:
        """The result carries start offsets plus interval offsets."""
        start = pitch("E", 2, 4)
        result = get_pitch(start, Interval.parse("P5"))
        assert str(result) == "B"
        assert result.pitch_offset == 6
        assert result.semitone_offset == 11

    def test_unmapped_offset_falls_back_to_natural(self) -> None:
        """An accidental gap beyond double sharp is spelled natural."""
        odd = Interval(
            name=IntervalSize.UNISON,
            quality=IntervalQuality.AUGMENTED,
            pitch_offset=0,
            semitone_offset=3,
        )
        result = get_pitch(Pitch.parse("C"), odd)
        assert result.name == DiatonicPitchClass.C
        assert result.accidental == Accidental.NATURAL
        assert result.semitone_offset == 3

    def test_add_operator(self) -> None:
        """Pitch + Interval applies the interval."""
        assert str(Pitch.parse("G") + Interval.parse("M3")) == "B"


class TestGetIntervalBetween:
    """Tests for measuring intervals between pitches."""

    def test_ascending(self) -> None:
        """C to E is a major third."""
        interval = get_interval_between(pitch("C"), pitch("E", 2, 4))
        assert interval == Interval.parse("M3")

    def test_same_pitch(self) -> None:
        """A pitch to itself is a perfect unison."""
        interval = get_interval_between(pitch("G", 4, 7), pitch("G", 4, 7))
        assert interval.name == IntervalSize.UNISON
        assert interval.quality == IntervalQuality.PERFECT

    def test_descending_normalizes(self) -> None:
        """D (8, 14) down to C (0, 0) reads as a minor seventh."""
        interval = get_interval_between(pitch("D", 8, 14), pitch("C"))
        assert interval.name == IntervalSize.SEVENTH
        assert interval.quality == IntervalQuality.MINOR
        assert interval.pitch_offset == 6
        assert interval.semitone_offset == 10

    def test_method(self) -> None:
        """Pitch.interval_to delegates to get_interval_between."""
        assert pitch("C").interval_to(pitch("G", 4, 7)) == Interval.parse("P5")


class TestTransposePitch:
    """Tests for raw semitone transposition."""

    def test_only_semitones_move(self) -> None:
        """Transposition leaves the spelling and pitch offset alone."""
        start = pitch("C#", 3, 1)
        result = transpose_pitch(start, 12)
        assert result.name == DiatonicPitchClass.C
        assert result.accidental == Accidental.SHARP
        assert result.pitch_offset == 3
        assert result.semitone_offset == 13

    def test_negative(self) -> None:
        """Semitones can go below zero."""
        assert Pitch.parse("A").transpose(-3).semitone_offset == -3


class TestScaleWalker:
    """Tests for generate_scale_pitches."""

    def test_c_major(self) -> None:
        """C major spells with no accidentals and ends on C."""
        pitches = generate_scale_pitches(Pitch.parse("C"), MAJOR)
        assert len(pitches) == 8
        assert [str(p) for p in pitches] == ["C", "D", "E", "F", "G", "A", "B", "C"]
        assert pitches[-1].pitch_offset == 7
        assert pitches[-1].semitone_offset == 12

    def test_d_major(self) -> None:
        """D major picks up F# and C#."""
        assert spell_scale(Pitch.parse("D"), MAJOR) == ["D", "E", "F#", "G", "A", "B", "C#", "D"]

    def test_f_major(self) -> None:
        """F major picks up Bb."""
        assert spell_scale(Pitch.parse("F"), MAJOR) == ["F", "G", "A", "Bb", "C", "D", "E", "F"]

    def test_c_natural_minor(self) -> None:
        """C natural minor spells with flats."""
        assert spell_scale(Pitch.parse("C"), NATURAL_MINOR) == [
            "C",
            "D",
            "Eb",
            "F",
            "G",
            "Ab",
            "Bb",
            "C",
        ]

    def test_root_first_and_unchanged(self) -> None:
        """The root comes back as the first element, as given."""
        root = pitch("E", 2, 4)
        pitches = generate_scale_pitches(root, MAJOR)
        assert pitches[0] is root

    def test_intervals_measured_from_root(self) -> None:
        """Each pitch is the root plus its interval, not the previous pitch plus it."""
        pitches = generate_scale_pitches(Pitch.parse("C"), [Interval.parse("M3")] * 3)
        assert [str(p) for p in pitches] == ["C", "E", "E", "E"]
        assert all(p.semitone_offset == 4 for p in pitches[1:])

    def test_empty_intervals(self) -> None:
        """No intervals gives just the root."""
        root = Pitch.parse("A")
        assert generate_scale_pitches(root, []) == [root]


class TestProperties:
    """Algebraic properties of the engine."""

    @pytest.mark.parametrize(
        "name",
        [
            "m2", "M2", "aug2", "dim3", "m3", "M3", "aug3", "dim4", "P4", "aug4",
            "dim5", "P5", "aug5", "dim6", "m6", "M6", "aug6", "dim7", "m7", "M7",
        ],
    )  # fmt: skip
    def test_double_inversion(self, name: str) -> None:
        """Inverting twice restores size, quality and offsets."""
        interval = Interval.parse(name)
        assert invert_interval(invert_interval(interval)) == interval

    @pytest.mark.parametrize("size", list(IntervalSize))
    def test_classify_is_total(self, size: IntervalSize) -> None:
        """Every size classifies every semitone count."""
        for semitones in range(-24, 25):
            assert isinstance(classify_quality(size, semitones), IntervalQuality)

    def test_create_major_second(self) -> None:
        """Two semitones over one step is a major second."""
        interval = create_interval(2, 1)
        assert interval == Interval(
            name=IntervalSize.SECOND,
            quality=IntervalQuality.MAJOR,
            pitch_offset=1,
            semitone_offset=2,
        )

    def test_addition_sums_offsets(self) -> None:
        """Sums carry the summed offsets of their parts."""
        names = ["m2", "M3", "P4", "aug4", "P5", "M6", "M7"]
        for a in names:
            for b in names:
                first, second = Interval.parse(a), Interval.parse(b)
                total = first + second
                assert total.pitch_offset == first.pitch_offset + second.pitch_offset
                assert total.semitone_offset == first.semitone_offset + second.semitone_offset

    def test_walk_is_root_relative(self) -> None:
        """Each walked pitch equals applying its interval to the root."""
        root = Pitch.parse("Eb")
        pitches = generate_scale_pitches(root, MAJOR)
        assert len(pitches) == len(MAJOR) + 1
        for interval, walked in zip(MAJOR, pitches[1:]):
            assert walked == get_pitch(root, interval)

    def test_major_second_from_c(self) -> None:
        """C + M2 is D natural at (1, 2)."""
        assert get_pitch(Pitch.parse("C"), Interval.parse("M2")) == Pitch(
            name=DiatonicPitchClass.D,
            accidental=Accidental.NATURAL,
            pitch_offset=1,
            semitone_offset=2,
        )
