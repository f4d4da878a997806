"""
Pure extraction functions for a product detail page.
"""

from bs4 import BeautifulSoup

from errors import MissingProductNameError, MissingSpecTableError
from models import SPEC_LABELS, ProductRecord
from .list_page import normalize_url
from .specs import flatten_spec_table, lookup

SPEC_TABLE_CSS = "table.specs_table"
NAME_CSS = "h1.ProductNameText"
PRICE_CSS = "input[type=hidden][itemprop=price]"


def extract_price(document: BeautifulSoup) -> str:
    """Return the machine-readable price, or '' when the page has none."""
    marker = document.select_one(PRICE_CSS)
    if marker is None:
        return ''
    return marker.get('content') or ''


def parse_item(document: BeautifulSoup, relative_url: str, origin: str) -> ProductRecord:
    """
    Build a ProductRecord from a detail page.

    A page with a spec table but without some labels is fine; those
    fields are left empty. A page without the spec table or the name
    heading has a different layout and is rejected.

    Args:
        document: Parsed detail page
        relative_url: Link to the page as found on the listing page
        origin: Site origin used to build the absolute URL

    Returns:
        ProductRecord

    Raises:
        MissingSpecTableError: If the page has no spec table
        MissingProductNameError: If the page has no product name heading
    """
    spec_table = document.select_one(SPEC_TABLE_CSS)
    if spec_table is None:
        raise MissingSpecTableError(f"Failed to find spec table for {relative_url}")

    heading = document.select_one(NAME_CSS)
    if heading is None:
        raise MissingProductNameError(f"Failed to find product name for {relative_url}")

    specs = flatten_spec_table(spec_table)
    values = {attr: lookup(specs, label) for attr, label in SPEC_LABELS}

    return ProductRecord(
        name=heading.get_text(),
        price=extract_price(document),
        url=normalize_url(origin, relative_url),
        **values
    )
