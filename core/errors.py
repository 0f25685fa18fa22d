# =============================================================================
# core/errors.py  -  Error Taxonomy
# =============================================================================
#
# Every failure an operation can report is a RedditError subclass.  The tool
# layer catches RedditError and turns it into an MCP tool error, so the host
# sees a readable message instead of a crashed server.
#
#   ValidationError         bad parameters, raised before any network call
#   UpstreamError           Reddit answered with a non-2xx status
#   TransportError          Reddit could not be reached (DNS, refused, timeout)
#   MalformedResponseError  2xx answer whose body is not the expected shape
#
# Nothing is retried.  A 429 from Reddit is just UpstreamError(429).
# =============================================================================

from typing import Optional


class RedditError(Exception):
    """Base class for all failures of a Reddit query operation."""


class ValidationError(RedditError, ValueError):
    """A tool parameter failed its constraints."""


class UpstreamError(RedditError):
    """Reddit responded with a non-success HTTP status."""

    def __init__(self, status_code: int, path: Optional[str] = None):
        self.status_code = status_code
        self.path = path
        super().__init__(f"Reddit returned HTTP {status_code}")


class TransportError(RedditError):
    """The request never got an HTTP response."""


class MalformedResponseError(RedditError):
    """Reddit responded successfully but the payload has the wrong shape."""
