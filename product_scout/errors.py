"""
Failures that abort a scrape request.

Field-level misses are never errors; they surface as ``None`` on the
candidate instead.
"""


class ScrapeError(Exception):
    """Base class for scrape failures."""

    pass


class FetchError(ScrapeError):
    """The page could not be downloaded (network, DNS, timeout or HTTP status)."""

    pass


class ParseError(ScrapeError):
    """The downloaded markup could not be turned into a document tree."""

    pass


class URLError(ScrapeError):
    """The request URL is not an absolute http(s) URL."""

    pass
