#!/usr/bin/env python3
"""
Example: Spell scales from the catalog and export them to MIDI.

This demonstrates the whole path - seed the catalog, look scales up,
spell them from different roots, and render one as a playable MIDI file.

Usage:
    python examples/spell_scales.py
    # Creates: examples/output/scales/*.scale.yaml
    #          examples/output/d_dorian.mid
"""

import asyncio
from pathlib import Path

from chuk_mcp_scales.catalog import ScaleCatalog
from chuk_mcp_scales.compiler import scale_to_midi
from chuk_mcp_scales.core import Interval, Pitch, get_interval_between


async def main() -> None:
    """Seed, search, spell and export."""
    output_dir = Path(__file__).parent / "output"
    catalog = ScaleCatalog(output_dir / "scales")

    count = await catalog.seed()
    print(f"Seeded {count} scales into {catalog.scales_dir}")

    # Example 1: Every catalog scale from C
    print("\nAll scales from C:")
    root = Pitch.parse("C")
    for scale in await catalog.list_scales():
        pitches = await catalog.get_scale_pitches(scale.id, root)
        print(f"  {scale.primary_name:<24} {' '.join(str(p) for p in pitches or [])}")

    # Example 2: One mode, several roots
    print("\nDorian from a few roots:")
    dorian = (await catalog.search_by_name("dorian"))[0]
    for name in ("D", "Eb", "F#", "Bb"):
        pitches = await catalog.get_scale_pitches(dorian.id, Pitch.parse(name))
        print(f"  {name:<3} {' '.join(str(p) for p in pitches or [])}")

    # Example 3: Identify a scale from its structure
    print("\nWhich scale is M2 m3 P4 P5 m6 m7 P8?")
    structure = [Interval.parse(n) for n in ("M2", "m3", "P4", "P5", "m6", "m7", "P8")]
    found = await catalog.find_by_intervals(structure)
    print(f"  {found.metadata.names if found else 'not in the catalog'}")

    # Example 4: Measure the intervals between scale degrees
    print("\nIntervals between neighbouring degrees of D Dorian:")
    pitches = await catalog.get_scale_pitches(dorian.id, Pitch.parse("D")) or []
    steps = [str(get_interval_between(a, b)) for a, b in zip(pitches, pitches[1:])]
    print(f"  {' '.join(steps)}")

    # Example 5: Render to MIDI
    midi_path = output_dir / "d_dorian.mid"
    scale_to_midi(pitches, octave=4, tempo_bpm=100).save(str(midi_path))
    print(f"\nCreated: {midi_path}")
    print("Open the MIDI file in your DAW to hear it.")


if __name__ == "__main__":
    asyncio.run(main())
