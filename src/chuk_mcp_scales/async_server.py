#!/usr/bin/env python3
"""
Async Scales MCP Server using chuk-mcp-server

This server provides MCP tools for music-theory arithmetic and a
catalog of named scales. Scales are stored as YAML files you can
edit by hand or keep under version control.

The server provides tools for:
- Interval arithmetic (classify, create, invert, add)
- Pitch arithmetic (apply intervals, measure, transpose)
- Spelling scales from any root
- Creating, searching and managing scale definitions
- Exporting spelled scales to MIDI files
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_scales.catalog import ScaleCatalog
from chuk_mcp_scales.tools import (
    register_export_tools,
    register_scale_tools,
    register_theory_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-scales")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
SCALES_DIR = BASE_PATH / "scales"
OUTPUT_DIR = BASE_PATH / "output"
LIBRARY_PATH = Path(__file__).parent / "catalog" / "library"

# Create the catalog
catalog = ScaleCatalog(SCALES_DIR, LIBRARY_PATH)

# Register all tools
theory_tools = register_theory_tools(mcp)
scale_tools = register_scale_tools(mcp, catalog)
export_tools = register_export_tools(mcp, catalog, OUTPUT_DIR)

# Export tool functions for direct access
music_classify_interval = theory_tools["music_classify_interval"]
music_create_interval = theory_tools["music_create_interval"]
music_invert_interval = theory_tools["music_invert_interval"]
music_add_intervals = theory_tools["music_add_intervals"]
music_get_semitone_offset = theory_tools["music_get_semitone_offset"]
music_get_pitch_offset = theory_tools["music_get_pitch_offset"]
music_get_pitch = theory_tools["music_get_pitch"]
music_get_interval_between = theory_tools["music_get_interval_between"]
music_transpose_pitch = theory_tools["music_transpose_pitch"]
music_generate_scale_pitches = theory_tools["music_generate_scale_pitches"]

music_list_scales = scale_tools["music_list_scales"]
music_get_scale = scale_tools["music_get_scale"]
music_search_scales = scale_tools["music_search_scales"]
music_find_scale_by_intervals = scale_tools["music_find_scale_by_intervals"]
music_create_scale = scale_tools["music_create_scale"]
music_update_scale = scale_tools["music_update_scale"]
music_delete_scale = scale_tools["music_delete_scale"]
music_get_scale_pitches = scale_tools["music_get_scale_pitches"]
music_seed_scales = scale_tools["music_seed_scales"]

music_export_scale_midi = export_tools["music_export_scale_midi"]

logger.info("CHUK Scales MCP Server initialized")
logger.info(f"  Library path: {LIBRARY_PATH}")
logger.info(f"  Scales dir: {SCALES_DIR}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
