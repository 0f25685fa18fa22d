# =============================================================================
# core/validation.py  -  Parameter Validation
# =============================================================================
#
# Every operation validates its inputs here BEFORE the gateway is touched:
# a rejected call never takes a throttle slot or reaches Reddit.
#
# LIMIT POLICY:
#   `limit` outside [1, 100] is REJECTED (ValidationError), never clamped.
#   The MCP tool schemas declare the same bounds, so hosts see them up front.
# =============================================================================

import re
from typing import Optional

from core.errors import ValidationError

MIN_LIMIT = 1
MAX_LIMIT = 100

TIME_WINDOWS = ("hour", "day", "week", "month", "year", "all")
SORT_MODES = ("relevance", "hot", "top", "new", "comments")

# Letters, digits, underscores; "+" joins several subreddits (r/a+b).
_SUBREDDIT_RE = re.compile(r"^[A-Za-z0-9_+]+$")
_POST_ID_RE = re.compile(r"^[A-Za-z0-9]+$")


def require_text(value: Optional[str], name: str) -> str:
    """Return `value` stripped, or raise if it is missing or blank."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"'{name}' is required and must be non-empty text")
    return value.strip()


def validate_subreddit(value: Optional[str]) -> str:
    """Normalise a subreddit name: "r/Python" and "/r/Python/" become "Python"."""
    name = require_text(value, "subreddit").strip("/")
    if name[:2].lower() == "r/":
        name = name[2:]
    if not name or not _SUBREDDIT_RE.match(name):
        raise ValidationError(
            f"Invalid subreddit {value!r}: use letters, digits, '_' (or '+' to combine)"
        )
    return name


def validate_post_id(value: Optional[str]) -> str:
    """Normalise a post id: "t3_1abc23" becomes "1abc23"."""
    post_id = require_text(value, "postId")
    if post_id.lower().startswith("t3_"):
        post_id = post_id[3:]
    if not post_id or not _POST_ID_RE.match(post_id):
        raise ValidationError(f"Invalid post id {value!r}: expected something like '1abc23'")
    return post_id


def validate_limit(value: int) -> int:
    # bool is an int subclass; True must not sneak through as limit=1.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"'limit' must be an integer, got {value!r}")
    if not MIN_LIMIT <= value <= MAX_LIMIT:
        raise ValidationError(
            f"'limit' must be between {MIN_LIMIT} and {MAX_LIMIT}, got {value}"
        )
    return value


def validate_choice(value: str, choices: tuple, name: str) -> str:
    if value not in choices:
        raise ValidationError(
            f"'{name}' must be one of {', '.join(choices)}; got {value!r}"
        )
    return value
