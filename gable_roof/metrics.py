"""
METRICS: Volumes, surfaces and cut lists for costing
====================================================

PURPOSE:
--------
Aggregate quantities from a StructureModel for the pricing layer:
- timber_volume:  Σ (section area × length)       → sawn timber (m³)
- timber_surface: Σ (section perimeter × length)  → planing/treatment (m²)
- roof_surface:   both slopes, rafter length × purlin run (m²)
- total_footprint: plan area under the roof incl. overhangs (m²)

End-grain faces are ignored in surfaces. Pillars are counted one by one
because centre pillars are taller than the perimeter ones.

Everything is recomputed on every call; the model itself is rebuilt
wholesale on each parameter change, so there is nothing to cache.
"""

from dataclasses import dataclass
from typing import Dict, List

import pandas as pd

from .catalog import (
    KNEE_BRACE_SECTION,
    PILLAR_SECTION,
    PURLIN_SECTION,
    RAFTER_SECTION,
    RIDGE_SECTION,
    RIDGE_TIE_DEPTH,
    RIDGE_TIE_WIDTH,
    Section,
    TIE_BEAM_SECTION,
)
from .model import StructureModel

SCHEDULE_COLUMNS = ['member', 'section', 'length_m', 'volume_m3', 'surface_m2']
CUT_LIST_COLUMNS = ['member', 'section', 'count', 'length_m', 'total_length_m']

RIDGE_TIE_SECTION_NAME = f"{RIDGE_TIE_WIDTH * 100:g}x{RIDGE_TIE_DEPTH * 100:g}"


@dataclass(frozen=True)
class StructureMetrics:
    """
    Aggregated quantities of one structure.

    timber_volume : float
        Total timber volume (m³)
    timber_surface : float
        Total timber surface, end grain excluded (m²)
    roof_surface : float
        Roof surface, both slopes (m²)
    total_footprint : float
        Plan area covered by the roof, overhangs included (m²)
    """
    timber_volume: float
    timber_surface: float
    roof_surface: float
    total_footprint: float


def _prism_row(member: str, section: Section, length: float) -> Dict[str, object]:
    return {
        'member': member,
        'section': section.name,
        'length_m': length,
        'volume_m3': section.area * length,
        'surface_m2': section.perimeter * length,
    }


def _member_rows(model: StructureModel) -> List[Dict[str, object]]:
    """One row per timber member, in model order."""
    rows = []

    for pillar in model.pillars:
        rows.append(_prism_row('pillar', PILLAR_SECTION, pillar.height))

    for purlin in model.base_purlins:
        rows.append(_prism_row('base_purlin', PURLIN_SECTION, purlin.length))

    rows.append(_prism_row('ridge_purlin', RIDGE_SECTION, model.ridge_purlin.length))

    for tie_beam in model.tie_beams:
        rows.append(_prism_row('tie_beam', TIE_BEAM_SECTION, tie_beam.length))

    for rafter in model.rafters:
        rows.append(_prism_row('rafter', RAFTER_SECTION, rafter.length))

    for brace in model.knee_braces:
        rows.append(_prism_row('knee_brace', KNEE_BRACE_SECTION, brace.length))

    # Ridge ties are boards lying in the YZ plane: both broad faces plus the
    # top and bottom cuts; the sloped sides are end grain.
    for tie in model.ridge_ties:
        rows.append({
            'member': 'ridge_tie',
            'section': RIDGE_TIE_SECTION_NAME,
            'length_m': 2 * tie.z_half_bottom,
            'volume_m3': tie.area * RIDGE_TIE_WIDTH,
            'surface_m2': 2 * tie.area + 2 * (tie.z_half_top + tie.z_half_bottom) * RIDGE_TIE_WIDTH,
        })

    return rows


def compute_metrics(model: StructureModel) -> StructureMetrics:
    """
    Compute volume and surface totals for a structure.

    Parameters:
    -----------
    model : StructureModel
        Output of build_structure()

    Returns:
    --------
    StructureMetrics
    """
    rows = _member_rows(model)
    timber_volume = sum(row['volume_m3'] for row in rows)
    timber_surface = sum(row['surface_m2'] for row in rows)

    roof_surface = 2 * model.rafter_length * model.ridge_purlin.length
    total_footprint = model.params.total_length * model.params.total_width

    return StructureMetrics(
        timber_volume=float(timber_volume),
        timber_surface=float(timber_surface),
        roof_surface=float(roof_surface),
        total_footprint=float(total_footprint),
    )


def member_schedule(model: StructureModel) -> pd.DataFrame:
    """
    Member-by-member schedule of the structure.

    Returns:
    --------
    pd.DataFrame
        Columns: member, section, length_m, volume_m3, surface_m2
    """
    return pd.DataFrame(_member_rows(model), columns=SCHEDULE_COLUMNS)


def cut_list(model: StructureModel, tolerance: float = 0.005) -> pd.DataFrame:
    """
    Group members into length bins for the workshop.

    Members of the same type and section whose lengths are within
    `tolerance` (default 5 mm) of the first member of a bin share that bin
    and are all cut to the longest length in it. Fewer bins = fewer saw
    set-ups.

    Returns:
    --------
    pd.DataFrame
        Columns: member, section, count, length_m, total_length_m;
        sorted by member, section, length
    """
    schedule = member_schedule(model)
    rows = []

    for (member, section), group in schedule.groupby(['member', 'section'], sort=True):
        bins: List[List[float]] = []
        for length in sorted(group['length_m']):
            if bins and abs(length - bins[-1][0]) <= tolerance:
                bins[-1].append(length)
            else:
                bins.append([length])

        for lengths in bins:
            cut_length = max(lengths)
            rows.append({
                'member': member,
                'section': section,
                'count': len(lengths),
                'length_m': cut_length,
                'total_length_m': cut_length * len(lengths),
            })

    return pd.DataFrame(rows, columns=CUT_LIST_COLUMNS)
