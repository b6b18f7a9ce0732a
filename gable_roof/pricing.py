"""
PRICING: Price breakdown over a finished price table
====================================================

The price table itself (material id → unit, unit price, category) is
fetched and parsed elsewhere; this module only consumes the finished
mapping and turns metrics and roofing quantities into priced line items.

Material ids follow the price sheet:
    fureszaru   sawn timber              m³
    gyalulas    planing                  m³
    gyartas     workshop fabrication     m³
    szereles    on-site assembly         m³
    ellenlec    counter battens          m
    tetoleco    roof battens             m
    badog       flashing sheet metal     m²
    lamberia    cladding planks          m²
"""

import logging
from dataclasses import asdict, dataclass
from typing import Callable, List, Mapping, Optional, Tuple

import numpy as np
import pandas as pd

from .metrics import StructureMetrics
from .roofing import (
    RoofingModel,
    counter_batten_total_length,
    flashing_total_surface,
    roof_batten_total_length,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PriceEntry:
    """One row of the price sheet."""
    unit: str        # 'db', 'm', 'm2', 'm3', 'l'
    price: float     # HUF per unit
    category: str = ''  # 'anyag', 'muhely', 'helyszin' or ''


PriceTable = Mapping[str, PriceEntry]

QuantityFn = Callable[[StructureMetrics, Optional[RoofingModel]], float]


def _roofing_quantity(fn: Callable[[RoofingModel], float]) -> QuantityFn:
    def quantity(metrics: StructureMetrics, roofing: Optional[RoofingModel]) -> float:
        return fn(roofing) if roofing is not None else 0.0
    return quantity


def _lamberia_surface(roofing: RoofingModel) -> float:
    return roofing.lamberia.surface if roofing.lamberia is not None else 0.0


PRICE_ITEMS: List[Tuple[str, QuantityFn]] = [
    ('fureszaru', lambda m, r: m.timber_volume),
    ('gyalulas', lambda m, r: m.timber_volume),
    ('gyartas', lambda m, r: m.timber_volume),
    ('szereles', lambda m, r: m.timber_volume),
    ('ellenlec', _roofing_quantity(counter_batten_total_length)),
    ('tetoleco', _roofing_quantity(roof_batten_total_length)),
    ('badog', _roofing_quantity(flashing_total_surface)),
    ('lamberia', _roofing_quantity(_lamberia_surface)),
]


@dataclass(frozen=True)
class PriceLineItem:
    label: str
    unit_price: float
    unit: str
    quantity: float
    subtotal: float


@dataclass(frozen=True)
class PriceBreakdown:
    items: Tuple[PriceLineItem, ...]
    total: float

    def unit_price(self, footprint: float) -> float:
        """Total price per m² of covered area."""
        if footprint <= 0:
            raise ValueError(f"footprint must be > 0, got {footprint}")
        return self.total / footprint

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            [asdict(item) for item in self.items],
            columns=['label', 'unit_price', 'unit', 'quantity', 'subtotal'],
        )


def compute_price_breakdown(
    prices: PriceTable,
    metrics: StructureMetrics,
    roofing: Optional[RoofingModel] = None,
) -> PriceBreakdown:
    """
    Price every known item for one structure.

    Args:
        prices: Finished price table keyed by material id
        metrics: Output of compute_metrics()
        roofing: Output of build_roofing(), or None for the bare frame

    Returns:
        PriceBreakdown with one line per priced item, in PRICE_ITEMS order.
        Ids missing from the table and zero quantities (disabled layers)
        are left out.
    """
    items = []
    total = 0.0
    for item_id, qty in PRICE_ITEMS:
        entry = prices.get(item_id)
        if entry is None:
            logger.debug("No price for %r, skipping", item_id)
            continue
        quantity = float(qty(metrics, roofing))
        if quantity == 0:
            continue
        subtotal = entry.price * quantity
        items.append(PriceLineItem(
            label=item_id,
            unit_price=entry.price,
            unit=entry.unit,
            quantity=quantity,
            subtotal=subtotal,
        ))
        total += subtotal

    return PriceBreakdown(items=tuple(items), total=total)


def format_huf(amount: float) -> str:
    """Whole forints grouped by thousands, e.g. '1 234 567 Ft' (non-breaking spaces)."""
    # Halves round up
    return f"{int(np.floor(amount + 0.5)):,}".replace(',', '\u00a0') + ' Ft'
