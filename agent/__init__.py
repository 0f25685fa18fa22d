# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK agent that acts as a reference host
# for the Reddit MCP server.
#
# ARCHITECTURAL ROLE:
#   The agent/ layer only orchestrates:
#     1. Receives the user's question ("What is r/python excited about?")
#     2. Decides which Reddit tools to call, via MCP
#     3. Summarises the results for the user
#
#   It contains no Reddit logic (that's core/) and no tool definitions
#   (that's tools/).
# =============================================================================
