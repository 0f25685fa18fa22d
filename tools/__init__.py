# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool wrappers.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between MCP and core/.  mcp_server.py:
#     1. Declares each tool's parameters (names, bounds, enums) for the host
#     2. Awaits the matching core/reddit.py operation
#     3. Converts result dataclasses to dicts for JSON
#     4. Turns core errors into MCP tool errors
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT build Reddit URLs or read Reddit JSON (that's core/)
#   - They do NOT throttle (the gateway in core/ does)
#   - They do NOT know about Google ADK
# =============================================================================
