# gable_roof - Hungarian gable garden roof timber frame solver
"""
GABLE_ROOF: Timber Frame Geometry for Hungarian Garden Roofs
============================================================

This package computes the complete timber frame of a gable garden roof
("nyeregtetős kerti tető") from five parameters: width, length, pitch,
eaves overhang and gable overhang.

ARCHITECTURE:
-------------
    catalog.py      Timber sections and carpentry constants
    model.py        Value objects (InputParams, members, StructureModel)
    geometry.py     Pure formulas: ridge height, rafter length, counts, birdmouths
    validation.py   Input validation (InvalidParamsError)
    structure.py    build_structure(): the structural assembler
    metrics.py      Volumes, surfaces, member schedule and cut list
    roofing.py      Counter battens, roof battens, flashings, lambéria
    pricing.py      Price breakdown over a finished price table
    config.py       Default parameters and slider ranges
    sweep.py        Batch evaluation over a size grid

USAGE:
------
    from gable_roof import InputParams, build_structure, compute_metrics

    params = InputParams(width=3, length=4, pitch=25,
                         eaves_overhang=0.5, gable_overhang=0.3)
    model = build_structure(params)
    metrics = compute_metrics(model)
"""

from .model import (
    InputParams,
    Point3D,
    Pillar,
    Purlin,
    TieBeam,
    BirdMouth,
    Rafter,
    RidgeTie,
    KneeBrace,
    StructureModel,
)
from .validation import InvalidParamsError, validate_params
from .structure import build_structure
from .metrics import StructureMetrics, compute_metrics, member_schedule, cut_list
from .roofing import (
    RoofingOptions,
    RoofingModel,
    build_roofing,
    counter_batten_total_length,
    roof_batten_total_length,
    flashing_total_surface,
    lamberia_total_length,
)
from .pricing import PriceEntry, PriceBreakdown, compute_price_breakdown, format_huf
from .config import AppConfig, CONFIG

__version__ = "0.1.0"

__all__ = [
    'InputParams',
    'Point3D',
    'Pillar',
    'Purlin',
    'TieBeam',
    'BirdMouth',
    'Rafter',
    'RidgeTie',
    'KneeBrace',
    'StructureModel',
    'InvalidParamsError',
    'validate_params',
    'build_structure',
    'StructureMetrics',
    'compute_metrics',
    'member_schedule',
    'cut_list',
    'RoofingOptions',
    'RoofingModel',
    'build_roofing',
    'counter_batten_total_length',
    'roof_batten_total_length',
    'flashing_total_surface',
    'lamberia_total_length',
    'PriceEntry',
    'PriceBreakdown',
    'compute_price_breakdown',
    'format_huf',
    'AppConfig',
    'CONFIG',
]
