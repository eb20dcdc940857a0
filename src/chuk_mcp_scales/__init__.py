"""
CHUK Scales - music-theory engine and scale catalog exposed over MCP.
"""
