"""
CSV export of harvested products.
"""

import csv
import logging
from pathlib import Path
from typing import Iterable, Union

from models import FIELD_NAMES, ProductRecord

logger = logging.getLogger(__name__)


def export_csv(records: Iterable[ProductRecord], destination: Union[str, Path]) -> Path:
    """
    Write records to a CSV file, replacing any previous file.

    The header row uses FIELD_NAMES; every record is written in the
    same column order.

    Args:
        records: Records to write
        destination: Output file path

    Returns:
        Path of the written file

    Raises:
        OSError: If the destination cannot be created or written
    """
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with open(path, 'w', encoding='utf-8', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(FIELD_NAMES)
        for record in records:
            writer.writerow(record.as_row())
            count += 1
        f.flush()

    logger.info(f"Wrote {count} rows to {path}")
    return path
