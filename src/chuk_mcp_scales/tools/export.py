"""
Export tools - MCP tools for MIDI export.

Tools for rendering stored scales to MIDI files.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_scales.catalog import ScaleCatalog
from chuk_mcp_scales.compiler import root_midi_note, scale_to_midi
from chuk_mcp_scales.constants import ErrorMessages, SuccessMessages
from chuk_mcp_scales.core import Pitch

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_export_tools(
    mcp: ChukMCPServer,
    catalog: ScaleCatalog,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register export tools with the MCP server.

    Args:
        mcp: The MCP server instance
        catalog: The scale catalog
        output_dir: Directory for output files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_export_scale_midi(
        scale_id: str,
        root: str,
        octave: int = 4,
        tempo: int = 120,
        output_name: str | None = None,
    ) -> str:
        """
        Export a stored scale as a MIDI file.

        Spells the scale from the root and plays it upward,
        one quarter note per pitch.

        Args:
            scale_id: Scale id (UUID)
            root: Root pitch name (e.g. 'D', 'Bb')
            octave: Octave of the root (C4 = middle C)
            tempo: Tempo in BPM
            output_name: Optional output filename (without .mid extension)

        Returns:
            JSON string with the file path and the exported spelling

        Example:
            music_export_scale_midi(
                scale_id="550e8400-e29b-41d4-a716-446655440001",
                root="D"
            )
        """
        try:
            root_pitch = Pitch.parse(root)
            pitches = await catalog.get_scale_pitches(scale_id, root_pitch)
            if pitches is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.SCALE_NOT_FOUND.format(scale_id=scale_id),
                    }
                )

            midi_file = scale_to_midi(pitches, octave=octave, tempo_bpm=tempo)

            filename = f"{output_name or f'{scale_id}-{root_pitch}{octave}'}.mid"
            output_path = output_dir / filename
            output_dir.mkdir(parents=True, exist_ok=True)
            midi_file.save(str(output_path))

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "spelling": [str(p) for p in pitches],
                    "root_note": root_midi_note(root_pitch, octave),
                    "message": SuccessMessages.SCALE_EXPORTED.format(
                        count=len(pitches), path=output_path
                    ),
                }
            )
        except Exception as e:
            logger.exception("Failed to export scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_export_scale_midi"] = music_export_scale_midi

    return tools
