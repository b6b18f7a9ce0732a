"""
SWEEP: Batch evaluation over footprint sizes
============================================

PURPOSE:
--------
Build every width × length combination of a size grid and collect counts,
metrics and (optionally) prices into one DataFrame. This is how a price
list for standard sizes is produced: one row per roof.

Invalid combinations do not abort the sweep; they are recorded with
ok=False and the validation message in 'reason'.
"""

import logging
from itertools import product
from typing import Dict, Iterable, Optional

import pandas as pd
from tqdm import tqdm

from .metrics import compute_metrics
from .model import InputParams
from .pricing import PriceTable, compute_price_breakdown
from .roofing import RoofingOptions, build_roofing
from .structure import build_structure
from .validation import InvalidParamsError

logger = logging.getLogger(__name__)


def evaluate_roof(
    params: InputParams,
    options: RoofingOptions,
    prices: Optional[PriceTable] = None,
) -> Dict[str, object]:
    """
    Build one roof and flatten its key figures into a result row.

    Returns a dict with the five parameters, 'ok' and 'reason', and on
    success the member counts, ridge height, rafter length, metrics and
    (when prices are given) 'price_total' and 'price_per_m2'.
    """
    row: Dict[str, object] = {
        'width': params.width,
        'length': params.length,
        'pitch': params.pitch,
        'eaves_overhang': params.eaves_overhang,
        'gable_overhang': params.gable_overhang,
    }

    try:
        model = build_structure(params)
    except InvalidParamsError as e:
        row.update(ok=False, reason=str(e))
        return row

    metrics = compute_metrics(model)
    roofing = build_roofing(model, options)

    row.update(
        ok=True,
        reason='',
        n_pillars=len(model.pillars),
        n_rafters=len(model.rafters),
        n_tie_beams=len(model.tie_beams),
        n_ridge_ties=len(model.ridge_ties),
        n_knee_braces=len(model.knee_braces),
        ridge_height=model.ridge_height,
        rafter_length=model.rafter_length,
        rafter_spacing=model.rafter_spacing,
        timber_volume=metrics.timber_volume,
        timber_surface=metrics.timber_surface,
        roof_surface=metrics.roof_surface,
        total_footprint=metrics.total_footprint,
    )

    if prices is not None:
        breakdown = compute_price_breakdown(prices, metrics, roofing)
        row.update(
            price_total=breakdown.total,
            price_per_m2=breakdown.unit_price(metrics.total_footprint),
        )

    return row


def run_size_sweep(
    widths: Iterable[float],
    lengths: Iterable[float],
    pitch: float = 25.0,
    eaves_overhang: float = 0.5,
    gable_overhang: float = 0.3,
    options: RoofingOptions = RoofingOptions(),
    prices: Optional[PriceTable] = None,
    show_progress: bool = True,
) -> pd.DataFrame:
    """
    Evaluate every width × length combination.

    Parameters:
    -----------
    widths, lengths : Iterable[float]
        Size grid (m)
    pitch, eaves_overhang, gable_overhang : float
        Held fixed across the sweep
    options : RoofingOptions
        Roofing layers included in each evaluation
    prices : PriceTable, optional
        When given, each row is priced
    show_progress : bool
        Whether to show a progress bar

    Returns:
    --------
    pd.DataFrame
        One row per combination, width-major order
    """
    grid = list(product(widths, lengths))
    iterator = tqdm(grid, desc="Sizes") if show_progress else grid

    results = []
    for width, length in iterator:
        params = InputParams(
            width=width,
            length=length,
            pitch=pitch,
            eaves_overhang=eaves_overhang,
            gable_overhang=gable_overhang,
        )
        results.append(evaluate_roof(params, options, prices))

    df = pd.DataFrame(results)
    if len(df):
        n_failed = int((~df['ok']).sum())
        if n_failed:
            logger.info("Size sweep: %d of %d combinations rejected", n_failed, len(df))
    return df
