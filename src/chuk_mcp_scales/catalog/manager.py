"""
Scale Catalog - handles scale definition lifecycle.

Provides async operations for creating, finding, updating and deleting
scale definitions, backed by one YAML file per scale. Also seeds the
catalog from the built-in scale library and runs the scale walker for
stored scales.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, datetime
from pathlib import Path
from uuid import UUID

import yaml

from chuk_mcp_scales.catalog.validator import ScaleValidationError, ScaleValidator
from chuk_mcp_scales.constants import ErrorMessages
from chuk_mcp_scales.core.interval import Interval
from chuk_mcp_scales.core.pitch import Pitch
from chuk_mcp_scales.core.scale import generate_scale_pitches
from chuk_mcp_scales.models.scale import ScaleDefinition, ScaleMetadata

logger = logging.getLogger(__name__)

SCALE_FILE_SUFFIX = ".scale.yaml"


class ScaleCatalog:
    """
    Manages the scale catalog with file persistence.

    Every write goes straight to disk; reads check the in-memory
    cache first. All operations are async-ready.
    """

    def __init__(self, scales_dir: Path, library_path: Path | None = None):
        """
        Initialize the catalog.

        Args:
            scales_dir: Directory for storing scale files
            library_path: Directory of seed scales (default: built-in library)
        """
        self.scales_dir = scales_dir
        self.library_path = library_path or (Path(__file__).parent / "library")
        self._cache: dict[UUID, ScaleDefinition] = {}
        self._validator = ScaleValidator()

    async def create(
        self,
        names: list[str],
        intervals: Sequence[Interval],
        description: str | None = None,
        origin: str | None = None,
    ) -> ScaleDefinition:
        """
        Create and store a new scale.

        Args:
            names: Scale names, primary name first
            intervals: Intervals from the root
            description: Optional description
            origin: Optional origin/culture information

        Returns:
            The stored ScaleDefinition with a fresh id and timestamps

        Raises:
            ScaleValidationError: If the names or intervals are invalid
        """
        now = datetime.now(UTC)
        scale = ScaleDefinition(
            metadata=ScaleMetadata(names=list(names), description=description, origin=origin),
            intervals=list(intervals),
            created_at=now,
            updated_at=now,
        )
        self._check(scale)

        self._save(scale)
        logger.info("Created scale %s (%s)", scale.primary_name, scale.id)
        return scale

    async def get(self, scale_id: UUID | str) -> ScaleDefinition | None:
        """
        Get a scale by id.

        Checks cache first, then loads from file if not cached.

        Args:
            scale_id: Scale id (UUID or its string form)

        Returns:
            The ScaleDefinition or None if not found
        """
        key = self._coerce_id(scale_id)

        if key in self._cache:
            return self._cache[key]

        path = self._get_path(key)
        if path.exists():
            return self._load(path)

        return None

    async def exists(self, scale_id: UUID | str) -> bool:
        """Check whether a scale is stored."""
        return await self.get(scale_id) is not None

    async def list_scales(self) -> list[ScaleDefinition]:
        """
        List all stored scales.

        Returns:
            Scales ordered by primary name (case-insensitive)
        """
        if not self.scales_dir.exists():
            return []

        result = []
        for path in self.scales_dir.glob(f"*{SCALE_FILE_SUFFIX}"):
            try:
                result.append(self._load(path))
            except Exception:
                logger.warning("Skipping unreadable scale file: %s", path)
                continue

        return sorted(result, key=lambda s: s.primary_name.lower())

    async def search_by_name(self, query: str) -> list[ScaleDefinition]:
        """
        Find scales whose names contain the query (case-insensitive).

        A blank query matches nothing.
        """
        if not query or not query.strip():
            return []
        return [scale for scale in await self.list_scales() if scale.matches_name(query)]

    async def find_by_intervals(self, intervals: Sequence[Interval]) -> ScaleDefinition | None:
        """
        Find the scale with exactly this interval structure.

        Returns None for an empty interval list or when nothing matches.
        """
        if not intervals:
            return None
        for scale in await self.list_scales():
            if scale.has_intervals(intervals):
                return scale
        return None

    async def update(
        self,
        scale_id: UUID | str,
        names: list[str],
        intervals: Sequence[Interval],
        description: str | None = None,
        origin: str | None = None,
    ) -> ScaleDefinition | None:
        """
        Replace a scale's metadata and intervals.

        The id and creation time are kept; the update time is refreshed.

        Returns:
            The updated ScaleDefinition, or None if not found

        Raises:
            ScaleValidationError: If the new names or intervals are invalid
        """
        existing = await self.get(scale_id)
        if existing is None:
            return None

        updated = existing.model_copy(
            update={
                "metadata": ScaleMetadata(
                    names=list(names), description=description, origin=origin
                ),
                "intervals": list(intervals),
                "updated_at": datetime.now(UTC),
            }
        )
        self._check(updated)

        self._save(updated)
        logger.info("Updated scale %s (%s)", updated.primary_name, updated.id)
        return updated

    async def delete(self, scale_id: UUID | str) -> bool:
        """
        Delete a scale.

        Returns:
            True if deleted, False if not found
        """
        key = self._coerce_id(scale_id)
        path = self._get_path(key)

        if path.exists():
            path.unlink()
            self._cache.pop(key, None)
            logger.info("Deleted scale %s", key)
            return True

        return False

    async def get_scale_pitches(self, scale_id: UUID | str, root: Pitch) -> list[Pitch] | None:
        """
        Spell a stored scale from a root pitch.

        Returns:
            The root followed by one pitch per interval, or None if not found
        """
        scale = await self.get(scale_id)
        if scale is None:
            return None
        return generate_scale_pitches(root, scale.intervals)

    async def seed(self, force: bool = False) -> int:
        """
        Seed the catalog from the scale library.

        Library scales keep their fixed ids, so re-seeding with force
        overwrites them in place instead of duplicating.

        Args:
            force: Seed even if the catalog already holds scales

        Returns:
            Number of scales seeded
        """
        if not force and await self.list_scales():
            logger.info("Catalog already contains scales, skipping seed")
            return 0

        # Check the whole library before writing anything
        scales = []
        for path in sorted(self.library_path.glob("*.yaml")):
            with open(path) as f:
                scale = ScaleDefinition.from_yaml_dict(yaml.safe_load(f))
            self._check(scale)
            scales.append(scale)

        for scale in scales:
            self._save(scale)

        logger.info("Successfully seeded %d scales", len(scales))
        return len(scales)

    def _check(self, scale: ScaleDefinition) -> None:
        """Raise if the scale has validation errors."""
        result = self._validator.validate(scale)
        for warning in result.warnings:
            logger.warning("%s: %s", scale.primary_name, warning)
        if not result.is_valid:
            raise ScaleValidationError(result)

    def _save(self, scale: ScaleDefinition) -> Path:
        """Write a scale to disk and cache it."""
        self.scales_dir.mkdir(parents=True, exist_ok=True)

        path = self._get_path(scale.id)
        with open(path, "w") as f:
            yaml.safe_dump(scale.to_yaml_dict(), f, default_flow_style=False, sort_keys=False)

        self._cache[scale.id] = scale
        return path

    def _load(self, path: Path) -> ScaleDefinition:
        """Load a scale from a file and cache it."""
        logger.debug("Loading scale file %s", path)
        with open(path) as f:
            data = yaml.safe_load(f)

        scale = ScaleDefinition.from_yaml_dict(data)
        self._cache[scale.id] = scale
        return scale

    def _get_path(self, scale_id: UUID) -> Path:
        """Get the file path for a scale."""
        return self.scales_dir / f"{scale_id}{SCALE_FILE_SUFFIX}"

    @staticmethod
    def _coerce_id(scale_id: UUID | str) -> UUID:
        """Accept a UUID or its string form."""
        if isinstance(scale_id, UUID):
            return scale_id
        try:
            return UUID(scale_id)
        except ValueError:
            raise ValueError(ErrorMessages.INVALID_SCALE_ID.format(scale_id=scale_id)) from None
