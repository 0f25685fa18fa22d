# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic for the Reddit MCP server:
# the rate-limited gateway, parameter validation, and the projection of raw
# Reddit JSON into small, stable result objects.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK, or any orchestration
#   framework.  The only third-party import is httpx (inside the gateway).
#   Operations take the gateway as an argument, so every one of them can be
#   exercised with a fake HTTP transport and no network.
# =============================================================================
