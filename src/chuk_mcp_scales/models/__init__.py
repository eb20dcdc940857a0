"""
Pydantic models for the scale catalog.

This module provides:
- ScaleDefinition: Catalog entity (id, metadata, intervals, timestamps)
- ScaleMetadata: Names, description and origin
"""

from chuk_mcp_scales.models.scale import ScaleDefinition, ScaleMetadata

__all__ = [
    "ScaleDefinition",
    "ScaleMetadata",
]
