# =============================================================================
# core/reddit.py  -  The Five Reddit Query Operations
# =============================================================================
#
# Each operation follows the same four steps:
#   1. validate the parameters           (core/validation.py)
#   2. build the request path            (path + query string)
#   3. fetch through the shared gateway  (core/gateway.py, throttled)
#   4. project the payload into models   (core/projection.py → core/models.py)
#
# Operations keep no state and never call each other.  They either return a
# complete result or raise a RedditError; nothing partial comes back.
#
# TRUNCATION CAPS:
#   post self-text          300 characters
#   comment body            500 characters
#   subreddit description   500 characters
# =============================================================================

from typing import Optional
from urllib.parse import quote, urlencode

from core.errors import MalformedResponseError
from core.gateway import RedditGateway
from core.models import Comment, HotPost, SearchResult, SubredditInfo, TopPost
from core.projection import (
    bool_field,
    child_data,
    full_permalink,
    int_field,
    listing_children,
    listing_data,
    text_field,
    to_iso,
    truncate,
)
from core.validation import (
    SORT_MODES,
    TIME_WINDOWS,
    require_text,
    validate_choice,
    validate_limit,
    validate_post_id,
    validate_subreddit,
)

SELFTEXT_MAX_CHARS = 300
COMMENT_MAX_CHARS = 500
DESCRIPTION_MAX_CHARS = 500

COMMENT_KIND = "t1"


def _sub_path(subreddit: str) -> str:
    return f"/r/{quote(subreddit, safe='+')}"


# =============================================================================
# Hot posts
# =============================================================================
async def get_hot_posts(gateway: RedditGateway, subreddit: str, limit: int = 10) -> list[HotPost]:
    """Fetch the current hot posts of a subreddit.

    Args:
        gateway: The shared rate-limited gateway.
        subreddit: Subreddit name ("python" or "r/python").
        limit: Number of posts, 1-100.

    Returns:
        Posts in Reddit's order, self-text cut to 300 characters.
    """
    subreddit = validate_subreddit(subreddit)
    limit = validate_limit(limit)

    payload = await gateway.fetch_json(f"{_sub_path(subreddit)}/hot.json?limit={limit}")

    posts = []
    for child in listing_children(payload, "hot posts"):
        p = child_data(child)
        posts.append(HotPost(
            title=text_field(p, "title"),
            author=text_field(p, "author"),
            score=int_field(p, "score"),
            url=text_field(p, "url"),
            selftext=truncate(p.get("selftext"), SELFTEXT_MAX_CHARS),
            num_comments=int_field(p, "num_comments"),
            created=to_iso(p.get("created_utc")),
            permalink=full_permalink(p.get("permalink")),
        ))
    return posts


# =============================================================================
# Top posts
# =============================================================================
async def get_top_posts(
    gateway: RedditGateway,
    subreddit: str,
    time: str = "week",
    limit: int = 10,
) -> list[TopPost]:
    """Fetch the top posts of a subreddit over a time window (hour ... all)."""
    subreddit = validate_subreddit(subreddit)
    time = validate_choice(time, TIME_WINDOWS, "time")
    limit = validate_limit(limit)

    payload = await gateway.fetch_json(
        f"{_sub_path(subreddit)}/top.json?t={time}&limit={limit}"
    )

    return [
        TopPost(
            title=text_field(p, "title"),
            author=text_field(p, "author"),
            score=int_field(p, "score"),
            num_comments=int_field(p, "num_comments"),
            permalink=full_permalink(p.get("permalink")),
        )
        for p in map(child_data, listing_children(payload, "top posts"))
    ]


# =============================================================================
# Search
# =============================================================================
async def search_posts(
    gateway: RedditGateway,
    query: str,
    subreddit: Optional[str] = None,
    sort: str = "relevance",
    time: str = "all",
    limit: int = 10,
) -> list[SearchResult]:
    """Search posts site-wide, or inside one subreddit when `subreddit` is given.

    An empty or None `subreddit` means a site-wide search.
    """
    query = require_text(query, "query")
    if subreddit is None or (isinstance(subreddit, str) and not subreddit.strip()):
        subreddit = None
    else:
        subreddit = validate_subreddit(subreddit)
    sort = validate_choice(sort, SORT_MODES, "sort")
    time = validate_choice(time, TIME_WINDOWS, "time")
    limit = validate_limit(limit)

    base = f"{_sub_path(subreddit)}/search.json" if subreddit else "/search.json"
    params = urlencode({
        "q": query,
        "sort": sort,
        "t": time,
        "limit": str(limit),
        "restrict_sr": "1" if subreddit else "0",
    })
    payload = await gateway.fetch_json(f"{base}?{params}")

    return [
        SearchResult(
            title=text_field(p, "title"),
            author=text_field(p, "author"),
            score=int_field(p, "score"),
            subreddit=text_field(p, "subreddit"),
            permalink=full_permalink(p.get("permalink")),
        )
        for p in map(child_data, listing_children(payload, "search"))
    ]


# =============================================================================
# Comments
# =============================================================================
def project_comments(children: list[dict]) -> list[Comment]:
    """Keep only real comments ("t1"); "more" stubs and other kinds are dropped.

    Replies nested under a comment are not flattened into the result.
    """
    comments = []
    for child in children:
        if child.get("kind") != COMMENT_KIND:
            continue
        c = child_data(child)
        comments.append(Comment(
            author=text_field(c, "author"),
            score=int_field(c, "score"),
            body=truncate(c.get("body"), COMMENT_MAX_CHARS),
            created=to_iso(c.get("created_utc")),
        ))
    return comments


async def get_comments(
    gateway: RedditGateway,
    subreddit: str,
    post_id: str,
    limit: int = 20,
) -> list[Comment]:
    """Fetch the top-level comments of a post.

    Reddit answers /comments/{id}.json with TWO listings: the post itself,
    then its comment tree.  Only the second one is read.
    """
    subreddit = validate_subreddit(subreddit)
    post_id = validate_post_id(post_id)
    limit = validate_limit(limit)

    payload = await gateway.fetch_json(
        f"{_sub_path(subreddit)}/comments/{post_id}.json?limit={limit}"
    )
    if not isinstance(payload, list) or len(payload) < 2:
        raise MalformedResponseError(
            "Reddit comments response is not a [post, comments] pair of listings"
        )
    return project_comments(listing_children(payload[1], "comments"))


# =============================================================================
# Subreddit info
# =============================================================================
async def get_subreddit_info(gateway: RedditGateway, subreddit: str) -> SubredditInfo:
    """Fetch public metadata (/about.json) for a subreddit."""
    subreddit = validate_subreddit(subreddit)

    payload = await gateway.fetch_json(f"{_sub_path(subreddit)}/about.json")
    s = listing_data(payload, "subreddit about")

    return SubredditInfo(
        name=text_field(s, "display_name"),
        title=text_field(s, "title"),
        description=truncate(s.get("public_description"), DESCRIPTION_MAX_CHARS),
        subscribers=int_field(s, "subscribers"),
        active_users=int_field(s, "accounts_active"),
        created=to_iso(s.get("created_utc")),
        nsfw=bool_field(s, "over18"),
    )
