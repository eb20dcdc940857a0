"""
Scale model - the catalog entity.

A ScaleDefinition contains:
- Metadata (names, description, origin)
- Intervals (each measured from the root)
- Identity and timestamps

The core engine only ever reads the intervals; everything else is
catalog bookkeeping.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from chuk_mcp_scales.constants import SCALE_SCHEMA_VERSION
from chuk_mcp_scales.core.interval import Interval

_MODEL_CONFIG = {"alias_generator": to_camel, "populate_by_name": True}


class ScaleMetadata(BaseModel):
    """
    Descriptive information about a scale.

    The first name is the primary name; the rest are aliases
    (e.g. 'Major Scale', 'Ionian Mode').
    """

    names: list[str] = Field(default_factory=list, description="Scale names, primary first")
    description: str | None = Field(None, description="Optional description")
    origin: str | None = Field(None, description="Optional origin/culture information")

    model_config = _MODEL_CONFIG


class ScaleDefinition(BaseModel):
    """
    A named scale in the catalog.

    Name and interval constraints are checked by the catalog validator
    rather than here, so bad payloads can be reported issue by issue.
    """

    id: UUID = Field(default_factory=uuid4, description="Unique identifier")
    metadata: ScaleMetadata = Field(default_factory=ScaleMetadata, description="Scale metadata")
    intervals: list[Interval] = Field(
        default_factory=list, description="Intervals from the root, in order"
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="Creation timestamp"
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="Last updated"
    )

    model_config = _MODEL_CONFIG

    @property
    def primary_name(self) -> str:
        """The first name, or a placeholder for unnamed scales."""
        return self.metadata.names[0] if self.metadata.names else "Unnamed Scale"

    def matches_name(self, query: str) -> bool:
        """Case-insensitive substring match against any of the names."""
        needle = query.strip().lower()
        return bool(needle) and any(needle in name.lower() for name in self.metadata.names)

    def has_intervals(self, intervals: Sequence[Interval]) -> bool:
        """True if the interval list matches exactly (size, quality, offsets, order)."""
        return self.intervals == list(intervals)

    def __str__(self) -> str:
        return f"{self.primary_name} ({len(self.intervals)} intervals)"

    def to_yaml_dict(self) -> dict[str, Any]:
        """
        Convert to a YAML-friendly dict.

        Uses the camelCase wire shape with enum names as strings.
        """
        return {
            "schema": SCALE_SCHEMA_VERSION,
            **self.model_dump(mode="json", by_alias=True),
        }

    @classmethod
    def from_yaml_dict(cls, data: dict[str, Any]) -> ScaleDefinition:
        """Create a ScaleDefinition from a YAML-parsed dict."""
        payload = {key: value for key, value in data.items() if key != "schema"}
        return cls.model_validate(payload)
