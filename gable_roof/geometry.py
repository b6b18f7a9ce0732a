"""
GEOMETRY PRIMITIVES: Pure formulas for gable roof layout
========================================================

Stateless trigonometric formulas and span-driven step functions. Every
function here returns a plain value and can be tested on its own; the
assembler in structure.py only combines them.

Angles are in degrees at the function boundary, radians inside.
Pitch must already be validated (0 < pitch < 90): at pitch 0 the base
birdmouth seat depth is unbounded.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .catalog import (
    BIRD_MOUTH_PLUMB_HEIGHT,
    KNEE_BRACE_ANGLE,
    KNEE_BRACE_LENGTH,
    MAX_RAFTER_SPACING,
    MAX_UNSUPPORTED_SPAN,
    PILLAR_SIZE,
    RAFTER_DEPTH,
    RIDGE_BIRD_MOUTH_SEAT,
)


@dataclass(frozen=True)
class BirdMouthGeometry:
    """Birdmouth cut independent of its position along the rafter."""
    seat_depth: float    # horizontal cut, sits on the purlin
    plumb_height: float  # vertical cut


def ridge_height(span: float, pitch_deg: float) -> float:
    """
    Rise of the roof slope over half a span.

    H = (span / 2) · tan(pitch)

    For bird-line alignment the assembler passes a span narrowed by the
    ridge purlin's own width.
    """
    return float((span / 2) * np.tan(np.radians(pitch_deg)))


def rafter_length(width: float, pitch_deg: float, eaves_overhang: float) -> float:
    """
    Rafter length along the slope from eave end to ridge.

    run = width / 2 + eaves_overhang
    length = run / cos(pitch)
    """
    run = width / 2 + eaves_overhang
    return float(run / np.cos(np.radians(pitch_deg)))


def pillar_row_count(span: float) -> int:
    """
    Number of pillar rows along a span so that no clear bay exceeds
    MAX_UNSUPPORTED_SPAN.

    inner_span = span - 2 · PILLAR_SIZE
    rows = ceil(inner_span / MAX_UNSUPPORTED_SPAN) + 1   (at least 2)

    Examples:
    ---------
    >>> pillar_row_count(3.0)   # 2.7 m inner span, one bay
    2
    >>> pillar_row_count(4.0)   # 3.7 m inner span, two bays
    3
    >>> pillar_row_count(20.0)  # 19.7 m inner span, six bays
    7
    """
    inner_span = span - 2 * PILLAR_SIZE
    bays = int(np.ceil(inner_span / MAX_UNSUPPORTED_SPAN))
    return max(bays, 1) + 1


def needs_center_pillars(width: float) -> bool:
    """True when the clear span across the width is too long for the ridge purlin ends."""
    return width - 2 * PILLAR_SIZE > MAX_UNSUPPORTED_SPAN


def pillar_count(length: float, width: Optional[float] = None) -> int:
    """
    Total number of pillars: two per row, plus one centre pillar on each of
    the two corner rows when the width calls for it.
    """
    count = 2 * pillar_row_count(length)
    if width is not None and needs_center_pillars(width):
        count += 2
    return count


def rafter_bay_count(run: float) -> int:
    """Minimum number of equal bays over `run` with spacing <= MAX_RAFTER_SPACING."""
    return max(int(np.ceil(run / MAX_RAFTER_SPACING)), 1)


def rafter_bay_spacing(run: float) -> float:
    """Uniform centre-to-centre rafter spacing over `run` (m)."""
    return run / rafter_bay_count(run)


def rafter_count(run: float) -> int:
    """Rafters per slope: bays + 1 (both gable rafters included)."""
    return rafter_bay_count(run) + 1


def bird_mouth_at_base_purlin(pitch_deg: float) -> BirdMouthGeometry:
    """
    Birdmouth over the base purlin (TALP SZELEMEN, 15x15 cm).

    The plumb cut is fixed at 3 cm whatever the pitch; the seat follows:
    seat_depth = plumb_height / tan(pitch), shorter on steeper roofs.
    """
    return BirdMouthGeometry(
        seat_depth=float(BIRD_MOUTH_PLUMB_HEIGHT / np.tan(np.radians(pitch_deg))),
        plumb_height=BIRD_MOUTH_PLUMB_HEIGHT,
    )


def bird_mouth_at_ridge_purlin(pitch_deg: float) -> BirdMouthGeometry:
    """
    Birdmouth over the ridge purlin (GERINC SZELEMEN, 10x10 cm).

    Both cuts are fixed: the seat covers half the purlin, the plumb cut is
    the same 3 cm as at the base. pitch_deg is accepted for symmetry with
    bird_mouth_at_base_purlin().
    """
    return BirdMouthGeometry(
        seat_depth=RIDGE_BIRD_MOUTH_SEAT,
        plumb_height=BIRD_MOUTH_PLUMB_HEIGHT,
    )


def rafter_y_offset(pitch_deg: float) -> float:
    """
    Vertical distance from a purlin's bearing surface up to the rafter
    centreline, measured at the plumb cut.

    offset = RAFTER_DEPTH / (2 · cos(pitch)) - BIRD_MOUTH_PLUMB_HEIGHT

    The vertical half-depth of a sloped rafter is RAFTER_DEPTH / (2·cos),
    and the plumb cut lets the soffit hang BIRD_MOUTH_PLUMB_HEIGHT below
    the purlin top. Note the division: RAFTER_DEPTH / 2 · cos(pitch) puts
    the bearing surface several centimetres off.
    """
    cos_pitch = np.cos(np.radians(pitch_deg))
    return float(RAFTER_DEPTH / (2 * cos_pitch) - BIRD_MOUTH_PLUMB_HEIGHT)


def knee_brace_legs(
    length: float = KNEE_BRACE_LENGTH,
    angle_deg: float = KNEE_BRACE_ANGLE,
) -> Tuple[float, float]:
    """(horizontal, vertical) legs of a knee brace; equal at 45°."""
    angle = np.radians(angle_deg)
    return float(length * np.cos(angle)), float(length * np.sin(angle))


def min_frame_size() -> float:
    """
    Smallest outer width or length (m) whose corner knee braces still fit.

    Each corner brace reaches one horizontal leg inward from a pillar
    centre, so the half size must cover that leg plus half a pillar:

        min_size = 2 · (horizontal_leg + PILLAR_SIZE / 2)   ≈ 1.56 m

    Above this size every derived level and spacing is also positive.
    """
    horizontal, _ = knee_brace_legs()
    return 2 * (horizontal + PILLAR_SIZE / 2)
