"""
Extractors for the bowling ball scraper.

This package contains pure, unit-testable extraction functions
for the listing page, the product detail page and its spec table.
"""

from .list_page import discover_item_links, normalize_url
from .item_page import parse_item, extract_price
from .specs import flatten_spec_table, lookup

__all__ = [
    'discover_item_links',
    'normalize_url',
    'parse_item',
    'extract_price',
    'flatten_spec_table',
    'lookup'
]
