"""
Spec table helpers.

The product spec table has no header row; its cells alternate
label, value, label, value... once flattened row by row.
"""

import logging
from typing import List, Sequence

from bs4 import Tag

logger = logging.getLogger(__name__)


def flatten_spec_table(table: Tag) -> List[str]:
    """
    Flatten a spec table into a single list of cell texts.

    Args:
        table: The spec table node

    Returns:
        Text of every td cell, row by row, left to right (unstripped)
    """
    cells = []
    # Own rows only; tables nested inside a cell are part of that cell's text
    for row in table.select(':scope > tr, :scope > thead > tr, :scope > tbody > tr, :scope > tfoot > tr'):
        cells.extend(cell.get_text() for cell in row.find_all('td', recursive=False))

    if len(cells) % 2:
        logger.debug(f"Spec table has an odd number of cells ({len(cells)}), last label ignored")

    return cells


def lookup(cells: Sequence[str], label: str) -> str:
    """
    Find the value for a label in a flattened spec table.

    Labels sit at even indexes, their values at the following odd index.
    Matching is exact; the first occurrence wins.

    Args:
        cells: Flattened label/value cell texts
        label: Label to look for

    Returns:
        The matching value, or '' if the label is absent
    """
    for i in range(0, len(cells) - 1, 2):
        if cells[i] == label:
            return cells[i + 1]
    return ''
