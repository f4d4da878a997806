"""
Bowling Ball Scraper

Collects every bowling ball listed on bowlingball.com:
- Loads the all-balls listing page and finds each product link
- Fetches and parses every product page concurrently
- Writes one CSV row per product

A product page that fails to load or parse is logged and skipped.
"""

import logging
import sys
from pathlib import Path

import scraper_config
from errors import FetchError, ListingLayoutError
from exporter import export_csv
from extractors.list_page import discover_item_links
from fetcher import PageFetcher
from harvester import Harvester, ResultSet

logger = logging.getLogger(__name__)


def load_item_links(fetcher) -> list:
    """
    Fetch the listing page and return the product links on it.

    Raises:
        FetchError: If the listing page cannot be fetched
        ListingLayoutError: If the page has no product entries
    """
    listing_url = scraper_config.HOST + scraper_config.SHOPPING_PAGE
    logger.info(f"Loading listing page: {listing_url}")

    document = fetcher.fetch(listing_url)
    links = discover_item_links(document, scraper_config.LISTING_CONTAINER_CSS)

    logger.info(f"Found {len(links)} balls")
    return links


def run(fetcher=None, output_path=None) -> ResultSet:
    """
    Run discovery, harvest and export once.

    Args:
        fetcher: Object with fetch(url) -> parsed document (None = PageFetcher)
        output_path: CSV destination (None = use config default)

    Returns:
        The harvested ResultSet
    """
    owns_fetcher = fetcher is None
    if owns_fetcher:
        fetcher = PageFetcher()

    try:
        links = load_item_links(fetcher)
        results = Harvester(fetcher).harvest(links)
    finally:
        if owns_fetcher:
            fetcher.close()

    destination = Path(output_path or scraper_config.OUTPUT_PATH)
    logger.info(f"Writing CSV to {destination}")
    export_csv(results, destination)

    return results


def main():
    """Main entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    try:
        run()
    except (FetchError, ListingLayoutError) as e:
        logger.error(f"Could not load the listing page: {e}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"Could not write CSV: {e}")
        sys.exit(1)

    logger.info("All done!")


if __name__ == "__main__":
    main()
