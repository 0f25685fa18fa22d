# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the five read-only Reddit tools the host can call.  Each tool is
#   a thin wrapper around a core/reddit.py operation: it logs the call,
#   awaits the operation with the shared gateway, converts the dataclasses
#   to dicts, and turns core errors into MCP tool errors.
#
# HOW IT WORKS (the flow):
#   1. The host (e.g. the ADK agent in agent/) calls a tool by name via MCP
#   2. FastMCP validates the arguments against the tool signature
#   3. The tool calls core/, which throttles and fetches through the gateway
#   4. The projected result goes back to the host as JSON
#
# ONE GATEWAY FOR EVERYTHING:
#   `gateway` below is created once per process.  All five tools share it,
#   so the 1-request-per-second throttle covers every tool together.
#
# ERRORS:
#   Any RedditError (bad parameters, HTTP 404/429/5xx, network failure,
#   unexpected payload) becomes a fastmcp ToolError.  The host receives an
#   error result with a readable message; the server keeps running.
#
# RUNNING THIS SERVER:
#   a) python -m tools.mcp_server   (or the `reddit-mcp` console script)
#   b) spawned over stdio by an MCP host such as agent/reddit_agent.py
# =============================================================================

from dataclasses import asdict
import json
import logging
import sys
from typing import Annotated, Literal, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from core.errors import RedditError, ValidationError
from core.gateway import RedditGateway
from core.reddit import (
    get_comments as fetch_comments,
    get_hot_posts,
    get_subreddit_info as fetch_subreddit_info,
    get_top_posts,
    search_posts,
)

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: stdout carries the MCP JSON-RPC stream, and a stray log
# line there would corrupt it.
#
# ANSI colours make the terminal easy to scan:
#   CYAN requests, YELLOW status, GREEN responses, RED failures.
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logging.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(result, separators=(',', ':'))}{_RESET}")
    return result


def _log_error(tool_name: str, message: str) -> None:
    """Log a failed tool call in RED."""
    logging.error(f"{_RED}  ✗ {tool_name} failed: {message}{_RESET}")


def _tool_error(tool_name: str, exc: RedditError) -> ToolError:
    """Build the ToolError the host will see, logging it on the way."""
    if isinstance(exc, ValidationError):
        message = f"Invalid parameters: {exc}"
    else:
        message = str(exc)
    _log_error(tool_name, message)
    return ToolError(message)


# =============================================================================
# Server + shared gateway
# =============================================================================
# .env is loaded before the gateway reads REDDIT_* settings.
load_dotenv()

mcp = FastMCP("reddit-mcp")
gateway = RedditGateway()

Subreddit = Annotated[str, Field(description="Subreddit name without the r/ prefix, e.g. 'python'.")]
TimeWindow = Literal["hour", "day", "week", "month", "year", "all"]
SortMode = Literal["relevance", "hot", "top", "new", "comments"]


def _limit_param(default: int):
    return Field(ge=1, le=100, description=f"Number of items to return (1-100, default {default}).")


# =============================================================================
# TOOL 1: get_hot
# =============================================================================
@mcp.tool()
async def get_hot(
    subreddit: Subreddit,
    limit: Annotated[int, _limit_param(10)] = 10,
) -> dict:
    """Get hot posts from a subreddit.

    Returns:
        A dict with:
          - subreddit, count
          - posts: title, author, score, url, selftext (first 300 chars),
            num_comments, created (ISO-8601 UTC), permalink (full URL)
    """
    _log_request("get_hot", subreddit=subreddit, limit=limit)
    try:
        posts = await get_hot_posts(gateway, subreddit, limit)
    except RedditError as exc:
        raise _tool_error("get_hot", exc) from exc

    _log_status(f"Got {len(posts)} hot posts")
    return _log_response("get_hot", {
        "subreddit": subreddit,
        "count": len(posts),
        "posts": [asdict(p) for p in posts],
    })


# =============================================================================
# TOOL 2: get_top
# =============================================================================
@mcp.tool()
async def get_top(
    subreddit: Subreddit,
    time: Annotated[TimeWindow, Field(description="Time window for 'top'.")] = "week",
    limit: Annotated[int, _limit_param(10)] = 10,
) -> dict:
    """Get top posts from a subreddit over a time window.

    Returns:
        A dict with subreddit, time, count and posts
        (title, author, score, num_comments, permalink).
    """
    _log_request("get_top", subreddit=subreddit, time=time, limit=limit)
    try:
        posts = await get_top_posts(gateway, subreddit, time, limit)
    except RedditError as exc:
        raise _tool_error("get_top", exc) from exc

    _log_status(f"Got {len(posts)} top posts ({time})")
    return _log_response("get_top", {
        "subreddit": subreddit,
        "time": time,
        "count": len(posts),
        "posts": [asdict(p) for p in posts],
    })


# =============================================================================
# TOOL 3: search
# =============================================================================
@mcp.tool()
async def search(
    query: Annotated[str, Field(description="Search terms.")],
    subreddit: Annotated[Optional[str], Field(description="Restrict the search to this subreddit. Omit to search all of Reddit.")] = None,
    sort: Annotated[SortMode, Field(description="Result ordering.")] = "relevance",
    time: Annotated[TimeWindow, Field(description="Time window.")] = "all",
    limit: Annotated[int, _limit_param(10)] = 10,
) -> dict:
    """Search Reddit posts, site-wide or within one subreddit.

    Returns:
        A dict with query, subreddit, count and results
        (title, author, score, subreddit, permalink).
    """
    _log_request("search", query=query, subreddit=subreddit, sort=sort, time=time, limit=limit)
    try:
        results = await search_posts(gateway, query, subreddit, sort, time, limit)
    except RedditError as exc:
        raise _tool_error("search", exc) from exc

    _log_status(f"Search matched {len(results)} posts")
    return _log_response("search", {
        "query": query,
        "subreddit": subreddit,
        "count": len(results),
        "results": [asdict(r) for r in results],
    })


# =============================================================================
# TOOL 4: get_comments
# =============================================================================
@mcp.tool()
async def get_comments(
    subreddit: Subreddit,
    postId: Annotated[str, Field(description="Post ID (e.g. '1abc23').")],
    limit: Annotated[int, _limit_param(20)] = 20,
) -> dict:
    """Get top-level comments on a post.

    Returns:
        A dict with subreddit, post_id, count and comments
        (author, score, body (first 500 chars), created).
    """
    _log_request("get_comments", subreddit=subreddit, postId=postId, limit=limit)
    try:
        comments = await fetch_comments(gateway, subreddit, postId, limit)
    except RedditError as exc:
        raise _tool_error("get_comments", exc) from exc

    _log_status(f"Got {len(comments)} comments")
    return _log_response("get_comments", {
        "subreddit": subreddit,
        "post_id": postId,
        "count": len(comments),
        "comments": [asdict(c) for c in comments],
    })


# =============================================================================
# TOOL 5: get_subreddit_info
# =============================================================================
@mcp.tool()
async def get_subreddit_info(subreddit: Subreddit) -> dict:
    """Get subreddit metadata.

    Returns:
        A dict with name, title, description (first 500 chars), subscribers,
        active_users, created (ISO-8601 UTC) and nsfw.
    """
    _log_request("get_subreddit_info", subreddit=subreddit)
    try:
        info = await fetch_subreddit_info(gateway, subreddit)
    except RedditError as exc:
        raise _tool_error("get_subreddit_info", exc) from exc

    _log_status(f"r/{info.name}: {info.subscribers} subscribers")
    return _log_response("get_subreddit_info", asdict(info))


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    """Serve the tools over stdio until the host disconnects."""
    try:
        mcp.run()
    except Exception:
        logging.exception("Fatal: MCP server stopped")
        sys.exit(1)


if __name__ == "__main__":
    main()
