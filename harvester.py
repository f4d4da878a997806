"""
Concurrent harvest of product detail pages.

Every item link is fetched and parsed on a thread pool. A failing link
is logged and dropped; the others carry on. harvest() returns only once
every link has either produced a record or failed.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable, Iterator, List, Optional

import scraper_config
from extractors.item_page import parse_item
from extractors.list_page import normalize_url
from models import ProductRecord

logger = logging.getLogger(__name__)


class ResultSet:
    """Append-only, thread-safe collection of harvested records."""

    def __init__(self):
        self._records: List[ProductRecord] = []
        self._lock = threading.Lock()

    def add(self, record: ProductRecord) -> None:
        with self._lock:
            self._records.append(record)

    def records(self) -> List[ProductRecord]:
        """Return a snapshot of the records collected so far."""
        with self._lock:
            return list(self._records)

    def __iter__(self) -> Iterator[ProductRecord]:
        return iter(self.records())

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


class Harvester:
    """
    Fans item links out over a worker pool.

    The fetcher only needs a fetch(url) method returning a parsed document.
    """

    def __init__(self, fetcher, origin: Optional[str] = None, max_workers: Optional[int] = None):
        """
        Initialize the harvester.

        Args:
            fetcher: Object with fetch(url) -> parsed document
            origin: Site origin for resolving links (None = use config default)
            max_workers: Worker pool size (None = use config default)
        """
        self.fetcher = fetcher
        self.origin = origin or scraper_config.HOST
        self.max_workers = max_workers if max_workers is not None else scraper_config.MAX_WORKERS

        # Statistics
        self.stats = {
            'links_submitted': 0,
            'items_harvested': 0,
            'items_failed': 0
        }

    def _process_link(self, link: str, results: ResultSet) -> None:
        """Fetch and parse one item page and store its record."""
        logger.info(f"Processing {link}")

        document = self.fetcher.fetch(normalize_url(self.origin, link))
        results.add(parse_item(document, link, self.origin))

    def harvest(self, links: Iterable[str]) -> ResultSet:
        """
        Fetch and parse every link concurrently.

        Args:
            links: Item links from the listing page

        Returns:
            ResultSet with one record per link that was fetched and parsed
        """
        links = list(links)
        results = ResultSet()
        self.stats = dict.fromkeys(self.stats, 0)

        logger.info(f"Harvesting {len(links)} items with {self.max_workers} workers")

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {executor.submit(self._process_link, link, results): link for link in links}
            self.stats['links_submitted'] += len(futures)

            for future in as_completed(futures):
                link = futures[future]
                try:
                    future.result()
                    self.stats['items_harvested'] += 1
                except Exception as e:
                    self.stats['items_failed'] += 1
                    logger.error(f"Failed to parse {link}. Skipping. ({type(e).__name__}: {e})")
                    logger.debug("Failure details", exc_info=e)

        logger.info("=" * 60)
        logger.info("Harvest complete!")
        logger.info(f"Links submitted: {self.stats['links_submitted']}")
        logger.info(f"Items harvested: {self.stats['items_harvested']}")
        logger.info(f"Items failed: {self.stats['items_failed']}")
        logger.info("=" * 60)

        return results
