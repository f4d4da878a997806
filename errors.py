"""
Exception types raised by the scraper.

Per-item errors (FetchError, ParseError) are recovered by the harvester.
ListingLayoutError and export OSErrors end the run.
"""


class ScraperError(Exception):
    """Base class for scraper errors."""


class FetchError(ScraperError):
    """A page could not be retrieved (network, timeout or non-2xx status)."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class ParseError(ScraperError):
    """A detail page does not have the expected layout."""


class MissingSpecTableError(ParseError):
    """The detail page has no specification table."""


class MissingProductNameError(ParseError):
    """The detail page has no product name heading."""


class ListingLayoutError(ScraperError):
    """The listing page yielded no product entries."""
