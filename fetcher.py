"""
HTTP fetching for the scraper.

Uses curl_cffi with Chrome impersonation to look like a regular browser,
and BeautifulSoup/lxml to turn responses into queryable documents.
"""

import logging
import threading
import time

from bs4 import BeautifulSoup
from curl_cffi import requests
from curl_cffi.requests import exceptions as requests_exceptions

import scraper_config
from errors import FetchError

logger = logging.getLogger(__name__)

RETRY_STATUSES = {408, 429}


def parse_html(html: str) -> BeautifulSoup:
    """Parse an HTML string into a document."""
    return BeautifulSoup(html, 'lxml')


class PageFetcher:
    """Fetches pages with retry logic. Safe to share between worker threads."""

    def __init__(self, impersonate=None, timeout=None, max_retries=None, retry_delay=None):
        """
        Initialize the fetcher.

        Args:
            impersonate: curl_cffi browser fingerprint (None = use config default)
            timeout: Per-request timeout in seconds (None = use config default)
            max_retries: Attempts per URL (None = use config default)
            retry_delay: Seconds between attempts (None = use config default)
        """
        self.impersonate = impersonate or scraper_config.IMPERSONATE
        self.timeout = timeout if timeout is not None else scraper_config.REQUEST_TIMEOUT
        self.max_retries = max(1, max_retries if max_retries is not None else scraper_config.MAX_RETRIES)
        self.retry_delay = retry_delay if retry_delay is not None else scraper_config.RETRY_DELAY

        # curl_cffi sessions must not be shared across threads, keep one per worker
        self._local = threading.local()
        self._sessions = []
        self._sessions_lock = threading.Lock()

    def _session(self):
        """Return the calling thread's session, creating it on first use."""
        session = getattr(self._local, 'session', None)
        if session is None:
            session = requests.Session()
            self._local.session = session
            with self._sessions_lock:
                self._sessions.append(session)
        return session

    def fetch_html(self, url: str) -> str:
        """
        Fetch a page and return its HTML.

        Args:
            url: Absolute URL to fetch

        Returns:
            Response body

        Raises:
            FetchError: If every attempt failed
        """
        reason = "no attempt made"

        for attempt in range(1, self.max_retries + 1):
            try:
                response = self._session().get(
                    url,
                    impersonate=self.impersonate,
                    timeout=self.timeout
                )
            except requests_exceptions.RequestException as e:
                reason = str(e)
            else:
                if 200 <= response.status_code < 300:
                    return response.text
                reason = f"HTTP {response.status_code}"

                # Other client errors will not go away on retry
                if response.status_code not in RETRY_STATUSES and response.status_code < 500:
                    break

            if attempt < self.max_retries:
                logger.warning(f"Attempt {attempt}/{self.max_retries} failed for {url}: {reason}, "
                               f"retrying in {self.retry_delay}s")
                time.sleep(self.retry_delay)

        raise FetchError(url, reason)

    def fetch(self, url: str) -> BeautifulSoup:
        """
        Fetch a page and parse it.

        Args:
            url: Absolute URL to fetch

        Returns:
            Parsed document

        Raises:
            FetchError: If the page could not be retrieved
        """
        return parse_html(self.fetch_html(url))

    def close(self) -> None:
        """Close every session opened by this fetcher."""
        with self._sessions_lock:
            sessions, self._sessions = self._sessions, []

        for session in sessions:
            try:
                session.close()
            except Exception as e:
                logger.warning(f"Error closing session: {e}")
