# =============================================================================
# core/projection.py  -  Raw Reddit JSON → stable field values
# =============================================================================
#
# Reddit's JSON is loosely shaped: a self-post has no useful `url`, a
# deleted comment has no `body`, older listings may lack `created_utc`.
# The helpers below read one field each and say exactly what an absent or
# wrongly-typed value becomes:
#
#   text fields   →  ""      (text_field, truncate)
#   integer counts →  None   (int_field)
#   timestamps    →  None    (to_iso)
#   flags         →  False   (bool_field)
#   permalinks    →  ""      (full_permalink)
#
# Only the top-level envelope is mandatory.  If `data.children` is missing,
# listing_children() raises MalformedResponseError and the whole operation
# fails; a single odd child never does.
# =============================================================================

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from core.errors import MalformedResponseError

PERMALINK_HOST = "https://reddit.com"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def truncate(text: Any, limit: int) -> str:
    """Slice text to at most `limit` characters (mid-word cuts are fine)."""
    if not isinstance(text, str):
        return ""
    return text[:limit]


def to_iso(epoch_seconds: Any) -> Optional[str]:
    """Convert Reddit's `created_utc` (float seconds) to ISO-8601 UTC.

    Precision is whole milliseconds, truncated:
        0             → "1970-01-01T00:00:00.000Z"
        1700000000.5  → "2023-11-14T22:13:20.500Z"
    """
    if isinstance(epoch_seconds, bool) or not isinstance(epoch_seconds, (int, float)):
        return None
    try:
        moment = _EPOCH + timedelta(milliseconds=int(epoch_seconds * 1000))
    except (OverflowError, ValueError):
        return None
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def text_field(data: dict, key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""


def int_field(data: dict, key: str) -> Optional[int]:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return int(value)


def bool_field(data: dict, key: str) -> bool:
    return data.get(key) is True


def full_permalink(path: Any) -> str:
    """Turn "/r/python/comments/abc/title/" into an absolute reddit.com URL."""
    if not isinstance(path, str) or not path:
        return ""
    return f"{PERMALINK_HOST}{path}"


def listing_data(payload: Any, what: str = "listing") -> dict:
    """Return the `data` object of a Reddit envelope ({"kind": ..., "data": {...}})."""
    data = payload.get("data") if isinstance(payload, dict) else None
    if not isinstance(data, dict):
        raise MalformedResponseError(f"Reddit {what} response has no 'data' object")
    return data


def listing_children(payload: Any, what: str = "listing") -> list[dict]:
    """Return the `data.children` entries of a Listing payload."""
    children = listing_data(payload, what).get("children")
    if not isinstance(children, list):
        raise MalformedResponseError(f"Reddit {what} response has no 'data.children' list")
    return [child if isinstance(child, dict) else {} for child in children]


def child_data(child: dict) -> dict:
    """The `data` object of one listing child, or {} if it has none."""
    data = child.get("data")
    return data if isinstance(data, dict) else {}
