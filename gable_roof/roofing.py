"""
ROOFING LAYERS: Battens, flashings and cladding over the frame
==============================================================

PURPOSE:
--------
Compute the secondary layers laid over the rafters, each of which the
customer can switch on or off independently:

- membrane  → ELLENLÉC (counter battens), one along every rafter
- roofing   → TETŐLÉC (roof battens) across the rafters, plus the four
              sheet-metal flashings (drip edge, eaves, ridge, gable)
- lamberia  → LAMBÉRIA cladding planks on the rafters

Toggling a layer never requires rebuilding the StructureModel: build_roofing()
only reads it.

FLASHINGS:
----------
Flashings come in FLASHING_LENGTH pieces laid with FLASHING_OVERLAP, so each
piece covers (FLASHING_LENGTH - FLASHING_OVERLAP) of run:

    count   = ceil(run / (FLASHING_LENGTH - FLASHING_OVERLAP))
    surface = count × FLASHING_LENGTH × developed_width

Runs: drip edge and eaves flashing along both eaves (2 × total length),
ridge flashing along the ridge (1 × total length), gable flashing along both
rafter edges of both gables (4 × rafter length).
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .model import StructureModel

logger = logging.getLogger(__name__)

ROOF_BATTEN_DISTANCE = 0.2  # m between roof batten rows

# Developed width: flat-laid width of each flashing profile (m)
FLASHING_DEVELOPED_WIDTH = {
    'drip_edge': 0.125,
    'eaves_flashing': 0.250,
    'ridge_flashing': 0.540,
    'gable_flashing': 0.312,
}
FLASHING_LENGTH = 2.0   # m per piece
FLASHING_OVERLAP = 0.1  # m between consecutive pieces

LAMBERIA_WIDTH = 0.12  # m, covering width of one plank


@dataclass(frozen=True)
class RoofingOptions:
    """Which optional layers are ordered."""
    membrane: bool = False
    roofing: bool = False
    lamberia: bool = False


@dataclass(frozen=True)
class CounterBatten:
    """ELLENLÉC along one rafter; length = rafter slope length (m)."""
    length: float


@dataclass(frozen=True)
class RoofBatten:
    """One TETŐLÉC row across the rafters; length = total roof length (m)."""
    length: float


@dataclass(frozen=True)
class FlashingGroup:
    count: int       # number of FLASHING_LENGTH pieces
    surface: float   # m², count × FLASHING_LENGTH × developed width


@dataclass(frozen=True)
class Flashings:
    drip_edge: FlashingGroup
    eaves_flashing: FlashingGroup
    ridge_flashing: FlashingGroup
    gable_flashing: FlashingGroup
    total_surface: float


@dataclass(frozen=True)
class Lamberia:
    """
    LAMBÉRIA cladding layout.

    planks_per_slope : int
        Plank rows needed to cover one rafter length
    plank_length : float
        Length of every plank row = total roof length (m)
    """
    planks_per_slope: int
    plank_length: float

    @property
    def plank_count(self) -> int:
        """Plank rows on both slopes."""
        return 2 * self.planks_per_slope

    @property
    def surface(self) -> float:
        """Plank area to purchase, both slopes (m²)."""
        return self.plank_count * self.plank_length * LAMBERIA_WIDTH


@dataclass(frozen=True)
class RoofingModel:
    counter_battens: Tuple[CounterBatten, ...]
    roof_battens: Tuple[RoofBatten, ...]
    flashings: Optional[Flashings]
    lamberia: Optional[Lamberia]


def build_roofing(structure: StructureModel, options: RoofingOptions) -> RoofingModel:
    """
    Derive the roofing layers for a structure.

    Parameters:
    -----------
    structure : StructureModel
        Output of build_structure()
    options : RoofingOptions
        Enabled layers; disabled layers come back empty (battens) or None
        (flashings, lamberia)

    Returns:
    --------
    RoofingModel

    Raises:
    -------
    ValueError
        If the structure has no rafters
    """
    if not structure.rafters:
        raise ValueError("Cannot build roofing for a structure without rafters")

    rafter_len = structure.rafter_length
    total_length = structure.total_length

    counter_battens: Tuple[CounterBatten, ...] = ()
    if options.membrane:
        counter_battens = tuple(CounterBatten(length=r.length) for r in structure.rafters)

    roof_battens: Tuple[RoofBatten, ...] = ()
    flashings = None
    if options.roofing:
        roof_battens = tuple(
            RoofBatten(length=total_length)
            for _ in range(2 * roof_batten_rows_per_slope(rafter_len))
        )
        flashings = _build_flashings(total_length, rafter_len)

    lamberia = None
    if options.lamberia:
        lamberia = Lamberia(
            planks_per_slope=int(np.ceil(rafter_len / LAMBERIA_WIDTH)),
            plank_length=total_length,
        )

    logger.debug(
        "Roofing: %d counter battens, %d roof battens, flashings=%s, lamberia=%s",
        len(counter_battens), len(roof_battens),
        flashings is not None, lamberia is not None,
    )

    return RoofingModel(
        counter_battens=counter_battens,
        roof_battens=roof_battens,
        flashings=flashings,
        lamberia=lamberia,
    )


def roof_batten_rows_per_slope(rafter_len: float) -> int:
    """Batten rows on one slope: one per spacing, plus the fascia row and the ridge row."""
    return int(np.ceil(rafter_len / ROOF_BATTEN_DISTANCE)) + 1 + 1


def flashing_piece_count(run: float) -> int:
    """Number of overlapping pieces needed to cover `run` metres."""
    effective = FLASHING_LENGTH - FLASHING_OVERLAP
    return int(np.ceil(run / effective))


def _flashing_group(run: float, developed_width: float) -> FlashingGroup:
    count = flashing_piece_count(run)
    return FlashingGroup(count=count, surface=count * FLASHING_LENGTH * developed_width)


def _build_flashings(total_length: float, rafter_len: float) -> Flashings:
    eaves_run = 2 * total_length
    ridge_run = total_length
    gable_run = 4 * rafter_len

    drip_edge = _flashing_group(eaves_run, FLASHING_DEVELOPED_WIDTH['drip_edge'])
    eaves_flashing = _flashing_group(eaves_run, FLASHING_DEVELOPED_WIDTH['eaves_flashing'])
    ridge_flashing = _flashing_group(ridge_run, FLASHING_DEVELOPED_WIDTH['ridge_flashing'])
    gable_flashing = _flashing_group(gable_run, FLASHING_DEVELOPED_WIDTH['gable_flashing'])

    return Flashings(
        drip_edge=drip_edge,
        eaves_flashing=eaves_flashing,
        ridge_flashing=ridge_flashing,
        gable_flashing=gable_flashing,
        total_surface=(
            drip_edge.surface
            + eaves_flashing.surface
            + ridge_flashing.surface
            + gable_flashing.surface
        ),
    )


# =============================================================================
# Summaries
# =============================================================================

def counter_batten_total_length(roofing: RoofingModel) -> float:
    return float(sum(cb.length for cb in roofing.counter_battens))


def roof_batten_total_length(roofing: RoofingModel) -> float:
    return float(sum(rb.length for rb in roofing.roof_battens))


def flashing_total_surface(roofing: RoofingModel) -> float:
    if roofing.flashings is None:
        return 0.0
    return roofing.flashings.total_surface


def lamberia_total_length(roofing: RoofingModel) -> float:
    """Running metres of cladding plank, both slopes."""
    if roofing.lamberia is None:
        return 0.0
    return roofing.lamberia.plank_count * roofing.lamberia.plank_length
