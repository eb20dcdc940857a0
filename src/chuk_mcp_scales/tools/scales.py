"""
Scale tools - MCP tools for the scale catalog.

Tools for listing, finding, creating, updating and deleting scales,
and for spelling stored scales from a root pitch.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_scales.catalog import ScaleCatalog, ScaleValidationError
from chuk_mcp_scales.constants import ErrorMessages, SuccessMessages
from chuk_mcp_scales.core import Interval, Pitch
from chuk_mcp_scales.models import ScaleDefinition
from chuk_mcp_scales.tools.theory import pitch_payload

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def scale_summary(scale: ScaleDefinition) -> dict[str, Any]:
    """Short listing form of a scale."""
    return {
        "id": str(scale.id),
        "name": scale.primary_name,
        "names": scale.metadata.names,
        "intervals": [str(i) for i in scale.intervals],
    }


def validation_error(e: ScaleValidationError) -> str:
    """Error JSON for a rejected scale, with every issue listed."""
    return json.dumps(
        {
            "status": "error",
            "message": ErrorMessages.INVALID_SCALE.format(issues=str(e)),
            "issues": [str(issue) for issue in e.result.issues],
        }
    )


def register_scale_tools(mcp: ChukMCPServer, catalog: ScaleCatalog) -> dict[str, Any]:
    """
    Register scale catalog tools with the MCP server.

    Args:
        mcp: The MCP server instance
        catalog: The scale catalog

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_list_scales() -> str:
        """
        List all scales in the catalog.

        Returns:
            JSON string with scale summaries ordered by name

        Example:
            music_list_scales()
        """
        try:
            scales = await catalog.list_scales()
            return json.dumps(
                {
                    "status": "success",
                    "count": len(scales),
                    "scales": [scale_summary(s) for s in scales],
                }
            )
        except Exception as e:
            logger.exception("Failed to list scales")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_list_scales"] = music_list_scales

    @mcp.tool  # type: ignore[arg-type]
    async def music_get_scale(scale_id: str) -> str:
        """
        Get the full definition of a scale.

        Args:
            scale_id: Scale id (UUID)

        Returns:
            JSON string with the scale definition

        Example:
            music_get_scale(scale_id="550e8400-e29b-41d4-a716-446655440001")
        """
        try:
            scale = await catalog.get(scale_id)
            if scale is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.SCALE_NOT_FOUND.format(scale_id=scale_id),
                    }
                )

            return json.dumps({"status": "success", "scale": scale.to_yaml_dict()})
        except Exception as e:
            logger.exception("Failed to get scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_get_scale"] = music_get_scale

    @mcp.tool  # type: ignore[arg-type]
    async def music_search_scales(query: str) -> str:
        """
        Search scales by name.

        Matches any of a scale's names, case-insensitively, as a substring.

        Args:
            query: Text to look for (e.g. 'minor', 'mode')

        Returns:
            JSON string with matching scale summaries

        Example:
            music_search_scales(query="minor")
        """
        try:
            if not query.strip():
                return json.dumps({"status": "error", "message": ErrorMessages.EMPTY_SEARCH})

            scales = await catalog.search_by_name(query)
            return json.dumps(
                {
                    "status": "success",
                    "query": query,
                    "count": len(scales),
                    "scales": [scale_summary(s) for s in scales],
                }
            )
        except Exception as e:
            logger.exception("Failed to search scales")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_search_scales"] = music_search_scales

    @mcp.tool  # type: ignore[arg-type]
    async def music_find_scale_by_intervals(intervals: list[str | dict[str, Any]]) -> str:
        """
        Find the scale with exactly this interval structure.

        Args:
            intervals: Intervals from the root, as short names or wire dicts

        Returns:
            JSON string with the matching scale, or scale=null if none

        Example:
            music_find_scale_by_intervals(
                intervals=["M2", "m3", "P4", "P5", "m6", "m7", "P8"]
            )
        """
        try:
            scale = await catalog.find_by_intervals([Interval.coerce(i) for i in intervals])
            return json.dumps(
                {
                    "status": "success",
                    "scale": scale_summary(scale) if scale else None,
                }
            )
        except Exception as e:
            logger.exception("Failed to find scale by intervals")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_find_scale_by_intervals"] = music_find_scale_by_intervals

    @mcp.tool  # type: ignore[arg-type]
    async def music_create_scale(
        names: list[str],
        intervals: list[str | dict[str, Any]],
        description: str | None = None,
        origin: str | None = None,
    ) -> str:
        """
        Create a new scale.

        The first name is the primary name. Intervals are measured from
        the root, not from degree to degree.

        Args:
            names: Scale names (at least one)
            intervals: Intervals from the root (at least one)
            description: Optional description
            origin: Optional origin/culture information

        Returns:
            JSON string with the new scale's id and summary

        Example:
            music_create_scale(
                names=["Hirajoshi"],
                intervals=["M2", "m3", "P5", "m6", "P8"],
                origin="Japan"
            )
        """
        try:
            scale = await catalog.create(
                names=names,
                intervals=[Interval.coerce(i) for i in intervals],
                description=description,
                origin=origin,
            )
            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.SCALE_CREATED.format(name=scale.primary_name),
                    "scale": scale_summary(scale),
                }
            )
        except ScaleValidationError as e:
            return validation_error(e)
        except Exception as e:
            logger.exception("Failed to create scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_create_scale"] = music_create_scale

    @mcp.tool  # type: ignore[arg-type]
    async def music_update_scale(
        scale_id: str,
        names: list[str],
        intervals: list[str | dict[str, Any]],
        description: str | None = None,
        origin: str | None = None,
    ) -> str:
        """
        Replace a scale's names, intervals and metadata.

        The id and creation time are kept.

        Args:
            scale_id: Scale id (UUID)
            names: New scale names
            intervals: New intervals from the root
            description: Optional description
            origin: Optional origin/culture information

        Returns:
            JSON string with the updated scale summary

        Example:
            music_update_scale(
                scale_id="...",
                names=["Hirajoshi", "Japanese Pentatonic"],
                intervals=["M2", "m3", "P5", "m6", "P8"]
            )
        """
        try:
            scale = await catalog.update(
                scale_id,
                names=names,
                intervals=[Interval.coerce(i) for i in intervals],
                description=description,
                origin=origin,
            )
            if scale is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.SCALE_NOT_FOUND.format(scale_id=scale_id),
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.SCALE_UPDATED.format(name=scale.primary_name),
                    "scale": scale_summary(scale),
                }
            )
        except ScaleValidationError as e:
            return validation_error(e)
        except Exception as e:
            logger.exception("Failed to update scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_update_scale"] = music_update_scale

    @mcp.tool  # type: ignore[arg-type]
    async def music_delete_scale(scale_id: str) -> str:
        """
        Delete a scale.

        Args:
            scale_id: Scale id (UUID)

        Returns:
            JSON string with deletion result

        Example:
            music_delete_scale(scale_id="...")
        """
        try:
            deleted = await catalog.delete(scale_id)
            if not deleted:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.SCALE_NOT_FOUND.format(scale_id=scale_id),
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.SCALE_DELETED.format(scale_id=scale_id),
                }
            )
        except Exception as e:
            logger.exception("Failed to delete scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_delete_scale"] = music_delete_scale

    @mcp.tool  # type: ignore[arg-type]
    async def music_get_scale_pitches(scale_id: str, root: str | dict[str, Any]) -> str:
        """
        Spell a stored scale from a root pitch.

        Args:
            scale_id: Scale id (UUID)
            root: Root pitch name ('D', 'Eb') or wire dict

        Returns:
            JSON string with the spelled pitches

        Example:
            music_get_scale_pitches(
                scale_id="550e8400-e29b-41d4-a716-446655440001",
                root="D"
            )
        """
        try:
            pitches = await catalog.get_scale_pitches(scale_id, Pitch.coerce(root))
            if pitches is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.SCALE_NOT_FOUND.format(scale_id=scale_id),
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "spelling": [str(p) for p in pitches],
                    "pitches": [pitch_payload(p) for p in pitches],
                }
            )
        except Exception as e:
            logger.exception("Failed to get scale pitches")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_get_scale_pitches"] = music_get_scale_pitches

    @mcp.tool  # type: ignore[arg-type]
    async def music_seed_scales(force: bool = False) -> str:
        """
        Seed the catalog with the built-in scale library.

        Does nothing if the catalog already has scales, unless forced.
        Library scales have fixed ids, so forcing overwrites them in place.

        Args:
            force: Seed even if the catalog is not empty

        Returns:
            JSON string with the number of scales seeded

        Example:
            music_seed_scales()
        """
        try:
            count = await catalog.seed(force=force)
            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.SCALES_SEEDED.format(count=count),
                    "count": count,
                }
            )
        except ScaleValidationError as e:
            return validation_error(e)
        except Exception as e:
            logger.exception("Failed to seed scales")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_seed_scales"] = music_seed_scales

    return tools
