"""
Pure extraction functions for the listing page.

These functions are unit-testable and don't perform I/O.
They take an already parsed document and return item links.
"""

import logging
from typing import List
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from errors import ListingLayoutError

logger = logging.getLogger(__name__)


def normalize_url(base_url: str, href: str) -> str:
    """
    Convert a relative URL to an absolute URL.

    Args:
        base_url: The base URL to resolve against
        href: The href attribute (may be relative or absolute)

    Returns:
        Absolute URL string
    """
    return urljoin(base_url, href)


def discover_item_links(document: BeautifulSoup, container_css: str) -> List[str]:
    """
    Extract item links from the listing page.

    Each product entry container holds a direct child anchor pointing
    at the product's detail page. Links are returned in page order and
    are not deduplicated.

    Args:
        document: Parsed listing page
        container_css: CSS selector for one product entry (e.g., "div.product_info_block")

    Returns:
        List of raw href values

    Raises:
        ListingLayoutError: If no container (or no usable link) is found
    """
    containers = document.select(container_css)
    if not containers:
        raise ListingLayoutError(f"Selector '{container_css}' matched no elements on the listing page")

    links = []
    for idx, container in enumerate(containers):
        anchor = container.find('a', recursive=False)
        href = anchor.get('href') if anchor else None

        if not href:
            logger.warning(f"Listing entry {container_css}[{idx}] has no link, skipping")
            continue

        links.append(href)

    if not links:
        raise ListingLayoutError(f"None of the {len(containers)} listing entries had a link")

    return links
