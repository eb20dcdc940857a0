"""
Theory tools - MCP tools for interval and pitch arithmetic.

Stateless tools over the core engine. Pitches and intervals can be given
as short names ('F#', 'M3') or as wire dicts with explicit offsets.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_scales.constants import IntervalQuality, IntervalSize
from chuk_mcp_scales.core import (
    Interval,
    Pitch,
    add_intervals,
    classify_quality,
    create_interval,
    generate_scale_pitches,
    get_interval_between,
    get_pitch,
    get_pitch_offset,
    get_semitone_offset,
    invert_interval,
    transpose_pitch,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def interval_payload(interval: Interval) -> dict[str, Any]:
    """Wire form of an interval plus its short display name."""
    return {**interval.model_dump(mode="json", by_alias=True), "display": str(interval)}


def pitch_payload(pitch: Pitch) -> dict[str, Any]:
    """Wire form of a pitch plus its display name."""
    return {**pitch.model_dump(mode="json", by_alias=True), "display": str(pitch)}


def register_theory_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register interval and pitch arithmetic tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_classify_interval(size: str, semitones: int) -> str:
        """
        Classify the quality of an interval.

        Args:
            size: Interval size (Unison, Second, ... Octave)
            semitones: Semitone count (any integer, reduced mod 12)

        Returns:
            JSON string with the quality

        Example:
            music_classify_interval(size="Third", semitones=4)
        """
        try:
            interval_size = IntervalSize.parse(size)
            quality = classify_quality(interval_size, semitones)
            return json.dumps(
                {
                    "status": "success",
                    "size": interval_size.value,
                    "semitones": semitones,
                    "quality": quality.value,
                }
            )
        except Exception as e:
            logger.exception("Failed to classify interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_classify_interval"] = music_classify_interval

    @mcp.tool  # type: ignore[arg-type]
    async def music_create_interval(semitone_offset: int, pitch_offset: int) -> str:
        """
        Create an interval from raw offsets.

        The interval keeps the offsets exactly as given; size and quality
        come from the offsets reduced into one octave.

        Args:
            semitone_offset: Semitones spanned
            pitch_offset: Diatonic steps spanned

        Returns:
            JSON string with the interval

        Example:
            music_create_interval(semitone_offset=7, pitch_offset=4)
        """
        try:
            interval = create_interval(semitone_offset, pitch_offset)
            return json.dumps({"status": "success", "interval": interval_payload(interval)})
        except Exception as e:
            logger.exception("Failed to create interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_create_interval"] = music_create_interval

    @mcp.tool  # type: ignore[arg-type]
    async def music_invert_interval(interval: str | dict[str, Any]) -> str:
        """
        Invert an interval within the octave.

        Args:
            interval: Short name ('M3') or wire dict

        Returns:
            JSON string with the inverted interval

        Example:
            music_invert_interval(interval="M3")
        """
        try:
            inverted = invert_interval(Interval.coerce(interval))
            return json.dumps({"status": "success", "interval": interval_payload(inverted)})
        except Exception as e:
            logger.exception("Failed to invert interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_invert_interval"] = music_invert_interval

    @mcp.tool  # type: ignore[arg-type]
    async def music_add_intervals(
        first: str | dict[str, Any],
        second: str | dict[str, Any],
    ) -> str:
        """
        Add two intervals.

        Args:
            first: Short name or wire dict
            second: Short name or wire dict

        Returns:
            JSON string with the combined interval

        Example:
            music_add_intervals(first="m3", second="m3")
        """
        try:
            total = add_intervals(Interval.coerce(first), Interval.coerce(second))
            return json.dumps({"status": "success", "interval": interval_payload(total)})
        except Exception as e:
            logger.exception("Failed to add intervals")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_add_intervals"] = music_add_intervals

    @mcp.tool  # type: ignore[arg-type]
    async def music_get_semitone_offset(size: str, quality: str) -> str:
        """
        Look up the semitone span of a size/quality pair.

        Args:
            size: Interval size (e.g. 'Fifth')
            quality: Interval quality (e.g. 'Perfect')

        Returns:
            JSON string with the semitone offset

        Example:
            music_get_semitone_offset(size="Seventh", quality="Minor")
        """
        try:
            interval_size = IntervalSize.parse(size)
            interval_quality = IntervalQuality.parse(quality)
            semitones = get_semitone_offset(interval_size, interval_quality)
            return json.dumps(
                {
                    "status": "success",
                    "size": interval_size.value,
                    "quality": interval_quality.value,
                    "semitone_offset": semitones,
                }
            )
        except Exception as e:
            logger.exception("Failed to look up semitone offset")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_get_semitone_offset"] = music_get_semitone_offset

    @mcp.tool  # type: ignore[arg-type]
    async def music_get_pitch_offset(size: str) -> str:
        """
        Look up the diatonic step count of a size.

        Args:
            size: Interval size (e.g. 'Sixth')

        Returns:
            JSON string with the pitch offset

        Example:
            music_get_pitch_offset(size="Octave")
        """
        try:
            interval_size = IntervalSize.parse(size)
            return json.dumps(
                {
                    "status": "success",
                    "size": interval_size.value,
                    "pitch_offset": get_pitch_offset(interval_size),
                }
            )
        except Exception as e:
            logger.exception("Failed to look up pitch offset")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_get_pitch_offset"] = music_get_pitch_offset

    @mcp.tool  # type: ignore[arg-type]
    async def music_get_pitch(
        start: str | dict[str, Any],
        interval: str | dict[str, Any],
    ) -> str:
        """
        Apply an interval to a pitch.

        Args:
            start: Pitch name ('F', 'Bb') or wire dict
            interval: Short name ('aug4') or wire dict

        Returns:
            JSON string with the resulting pitch

        Example:
            music_get_pitch(start="F", interval="aug4")
        """
        try:
            pitch = get_pitch(Pitch.coerce(start), Interval.coerce(interval))
            return json.dumps({"status": "success", "pitch": pitch_payload(pitch)})
        except Exception as e:
            logger.exception("Failed to apply interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_get_pitch"] = music_get_pitch

    @mcp.tool  # type: ignore[arg-type]
    async def music_get_interval_between(
        from_pitch: str | dict[str, Any],
        to_pitch: str | dict[str, Any],
    ) -> str:
        """
        Measure the interval between two pitches.

        The interval is computed from the pitches' offsets, so pass wire
        dicts to measure pitches that came out of earlier calculations.

        Args:
            from_pitch: Pitch name or wire dict
            to_pitch: Pitch name or wire dict

        Returns:
            JSON string with the interval

        Example:
            music_get_interval_between(
                from_pitch={"name": "D", "accidental": "Natural",
                            "pitchOffset": 8, "semitoneOffset": 14},
                to_pitch="C"
            )
        """
        try:
            interval = get_interval_between(Pitch.coerce(from_pitch), Pitch.coerce(to_pitch))
            return json.dumps({"status": "success", "interval": interval_payload(interval)})
        except Exception as e:
            logger.exception("Failed to measure interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_get_interval_between"] = music_get_interval_between

    @mcp.tool  # type: ignore[arg-type]
    async def music_transpose_pitch(pitch: str | dict[str, Any], semitones: int) -> str:
        """
        Transpose a pitch by raw semitones.

        Only the semitone offset moves; the spelling is not changed.

        Args:
            pitch: Pitch name or wire dict
            semitones: Semitones to add (may be negative)

        Returns:
            JSON string with the transposed pitch

        Example:
            music_transpose_pitch(pitch="C", semitones=12)
        """
        try:
            transposed = transpose_pitch(Pitch.coerce(pitch), semitones)
            return json.dumps({"status": "success", "pitch": pitch_payload(transposed)})
        except Exception as e:
            logger.exception("Failed to transpose pitch")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_transpose_pitch"] = music_transpose_pitch

    @mcp.tool  # type: ignore[arg-type]
    async def music_generate_scale_pitches(
        root: str | dict[str, Any],
        intervals: list[str | dict[str, Any]],
    ) -> str:
        """
        Spell a scale from a root and intervals measured from the root.

        Args:
            root: Root pitch name or wire dict
            intervals: Intervals from the root, as short names or wire dicts

        Returns:
            JSON string with the root followed by one pitch per interval

        Example:
            music_generate_scale_pitches(
                root="D",
                intervals=["M2", "M3", "P4", "P5", "M6", "M7", "P8"]
            )
        """
        try:
            pitches = generate_scale_pitches(
                Pitch.coerce(root), [Interval.coerce(i) for i in intervals]
            )
            return json.dumps(
                {
                    "status": "success",
                    "spelling": [str(p) for p in pitches],
                    "pitches": [pitch_payload(p) for p in pitches],
                }
            )
        except Exception as e:
            logger.exception("Failed to generate scale pitches")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_generate_scale_pitches"] = music_generate_scale_pitches

    return tools
