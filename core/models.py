# =============================================================================
# core/models.py  -  Projected Results (what each tool hands back)
# =============================================================================
#
# Reddit returns dozens of fields per post.  These dataclasses keep only
# the handful a host actually reasons about; the tool layer converts them
# with dataclasses.asdict() before FastMCP serialises them to JSON.
#
# ABSENT VALUES:
#   Text fields are "" when Reddit omits them, counts and timestamps are
#   None, and the nsfw flag is False.  See core/projection.py.
# =============================================================================

from dataclasses import dataclass
from typing import Optional


# -----------------------------------------------------------------------------
# Posts
# -----------------------------------------------------------------------------
@dataclass
class HotPost:
    """One post from a subreddit's hot listing."""

    title: str
    author: str
    score: Optional[int]
    url: str                           # Link target (the post itself for self-posts)
    selftext: str                      # First 300 characters of the body
    num_comments: Optional[int]
    created: Optional[str]             # ISO-8601, e.g. "2023-11-14T22:13:20.500Z"
    permalink: str                     # Full https://reddit.com/... URL


@dataclass
class TopPost:
    """One post from a subreddit's top listing."""

    title: str
    author: str
    score: Optional[int]
    num_comments: Optional[int]
    permalink: str


@dataclass
class SearchResult:
    """One search hit.  `subreddit` matters for site-wide searches."""

    title: str
    author: str
    score: Optional[int]
    subreddit: str
    permalink: str


# -----------------------------------------------------------------------------
# Comments
# -----------------------------------------------------------------------------
@dataclass
class Comment:
    """One comment (kind "t1") from a post's comment listing."""

    author: str
    score: Optional[int]
    body: str                          # First 500 characters
    created: Optional[str]


# -----------------------------------------------------------------------------
# Subreddit metadata
# -----------------------------------------------------------------------------
@dataclass
class SubredditInfo:
    """Public metadata from /r/{name}/about.json."""

    name: str                          # display_name, e.g. "Python"
    title: str
    description: str                   # public_description, first 500 characters
    subscribers: Optional[int]
    active_users: Optional[int]        # accounts_active
    created: Optional[str]
    nsfw: bool                         # over18
