"""
Product record and the column schema shared by the parser and the exporter.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple


# (attribute, CSV header, spec table label)
# A label of None means the value does not come from the spec table.
# Order defines the CSV column order.
PRODUCT_SCHEMA: Tuple[Tuple[str, str, Optional[str]], ...] = (
    ('name', 'Name', None),
    ('product_id', 'ProductID', 'Product ID'),
    ('price', 'Price', None),
    ('brand', 'Brand', 'Brand'),
    ('perfect_scale_hook_rating', 'PerfectScaleHookRating', 'Perfect Scale Hook Rating'),
    ('rg', 'RG', 'RG'),
    ('finish', 'Finish', 'Finish'),
    ('ball_color', 'BallColor', 'Ball Color'),
    ('lane_condition', 'LaneCondition', 'Lane Condition'),
    ('coverstock', 'Coverstock', 'Coverstock'),
    ('ball_quality', 'BallQuality', 'Ball Quality'),
    ('ball_warranty', 'BallWarranty', 'Ball Warranty'),
    ('factory_finish', 'FactoryFinish', 'Factory Finish'),
    ('breakpoint_shape', 'BreakpointShape', 'Breakpoint Shape'),
    ('coverstock_name', 'CoverstockName', 'Coverstock Name'),
    ('core_name', 'CoreName', 'Core Name'),
    ('differential', 'Differential', 'Differential'),
    ('durometer', 'Durometer', 'Durometer'),
    ('flare_potential', 'FlarePotential', 'Flare Potential'),
    ('core_type', 'CoreType', 'Core Type'),
    ('performance', 'Performance', 'Performance'),
    ('storm_product_line', 'StormProductLine', 'Storm Product Line'),
    ('release_date', 'ReleaseDate', 'Release Date'),
    ('hook_potential', 'HookPotential', 'Hook Potential:'),  # site uses the colon here only
    ('url', 'URL', None),
)

FIELD_NAMES: Tuple[str, ...] = tuple(header for _, header, _ in PRODUCT_SCHEMA)

SPEC_LABELS: Tuple[Tuple[str, str], ...] = tuple(
    (attr, label) for attr, _, label in PRODUCT_SCHEMA if label is not None
)


@dataclass(frozen=True)
class ProductRecord:
    """One bowling ball. Every field is a string; missing values are ''."""
    name: str = ''
    product_id: str = ''
    price: str = ''
    brand: str = ''
    perfect_scale_hook_rating: str = ''
    rg: str = ''
    finish: str = ''
    ball_color: str = ''
    lane_condition: str = ''
    coverstock: str = ''
    ball_quality: str = ''
    ball_warranty: str = ''
    factory_finish: str = ''
    breakpoint_shape: str = ''
    coverstock_name: str = ''
    core_name: str = ''
    differential: str = ''
    durometer: str = ''
    flare_potential: str = ''
    core_type: str = ''
    performance: str = ''
    storm_product_line: str = ''
    release_date: str = ''
    hook_potential: str = ''
    url: str = ''

    def as_row(self) -> List[str]:
        """Return field values in CSV column order."""
        return [getattr(self, attr) for attr, _, _ in PRODUCT_SCHEMA]

