"""
STRUCTURE ASSEMBLER: From five parameters to a complete timber frame
====================================================================

PURPOSE:
--------
build_structure() turns an InputParams into a StructureModel: every pillar,
purlin, tie beam, rafter (with both birdmouths), ridge tie and knee brace,
with exact positions. This is the "generative geometry" of the garden roof.

The model is derived from scratch on every call. There is no cache and no
incremental update: moving a slider means calling build_structure() again.

VERTICAL LEVELS (bottom-up):
----------------------------
    pillar top          = PILLAR_HEIGHT
    base purlin centre  = PILLAR_HEIGHT + PURLIN_SIZE / 2
    base purlin top     = PILLAR_HEIGHT + PURLIN_SIZE
    ridge purlin top    = base purlin top + ridge_height(width - RIDGE_SIZE, pitch)
    ridge purlin centre = ridge purlin top - RIDGE_SIZE / 2

HUNGARIAN SEATING CONVENTION:
-----------------------------
The ridge purlin sits BELOW the rafter tops and the rafters are notched over
both purlins with birdmouths. The plumb cut of the base birdmouth is at the
outer face of the base purlin (|z| = width/2); the plumb cut of the ridge
birdmouth is at the face of the ridge purlin (|z| = RIDGE_SIZE/2). The
"bird line" joining these two seat corners must run parallel to the roof
slope, which is why the ridge purlin rise uses the span narrowed by
RIDGE_SIZE rather than the full width.

At both seat corners the rafter centreline sits rafter_y_offset(pitch)
above the purlin top (the bearing-surface invariant):

    centreline(|z| = width/2)        - offset == base purlin top
    centreline(|z| = RIDGE_SIZE/2)   - offset == ridge purlin top

LONGITUDINAL LAYOUT:
--------------------
- Purlins run from -(length/2 + gable_overhang) to +(length/2 + gable_overhang)
- Pillar rows: evenly spaced, end rows flush with ±length/2
- Rafters: gable rafters flush with the purlin ends, bays <= MAX_RAFTER_SPACING
"""

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .catalog import (
    PILLAR_HEIGHT,
    PILLAR_SIZE,
    PURLIN_SIZE,
    RAFTER_DEPTH,
    RAFTER_WIDTH,
    RIDGE_SIZE,
    RIDGE_TIE_DEPTH,
    RIDGE_TIE_NOTCH,
    RIDGE_TIE_WIDTH,
)
from .geometry import (
    bird_mouth_at_base_purlin,
    bird_mouth_at_ridge_purlin,
    knee_brace_legs,
    needs_center_pillars,
    pillar_row_count,
    rafter_bay_count,
    rafter_length,
    rafter_y_offset,
    ridge_height,
)
from .model import (
    BirdMouth,
    InputParams,
    KneeBrace,
    Pillar,
    Point3D,
    Purlin,
    Rafter,
    RidgeTie,
    StructureModel,
    TieBeam,
)
from .validation import validate_params

logger = logging.getLogger(__name__)


def build_structure(params: InputParams) -> StructureModel:
    """
    Build the complete structural model of a garden roof.

    Parameters:
    -----------
    params : InputParams
        width, length >= min_frame_size(); 0 < pitch < 90; overhangs >= 0

    Returns:
    --------
    StructureModel
        Immutable model; equal inputs give equal models

    Raises:
    -------
    InvalidParamsError
        If params are outside the valid domain. Raised before any
        geometry is computed, so no partial model ever escapes.

    Example:
    --------
    >>> params = InputParams(width=3, length=4, pitch=25,
    ...                      eaves_overhang=0.5, gable_overhang=0.3)
    >>> model = build_structure(params)
    >>> len(model.pillars), len(model.rafters)
    (6, 14)
    """
    validate_params(params)

    width = params.width
    length = params.length
    pitch = params.pitch
    eaves = params.eaves_overhang
    gable = params.gable_overhang

    # Step 1: trig constants
    cos_pitch = float(np.cos(np.radians(pitch)))
    tan_pitch = float(np.tan(np.radians(pitch)))
    h_ridge = ridge_height(width, pitch)

    # Step 2: vertical levels
    y_purlin_center = PILLAR_HEIGHT + PURLIN_SIZE / 2
    y_base_top = PILLAR_HEIGHT + PURLIN_SIZE
    y_ridge_top = y_base_top + ridge_height(width - RIDGE_SIZE, pitch)
    y_ridge_center = y_ridge_top - RIDGE_SIZE / 2

    # Step 3: rafter centreline above the bearing surface at the plumb cut
    offset = rafter_y_offset(pitch)
    y_rafter_at_base = y_base_top + offset
    y_rafter_at_ridge = y_rafter_at_base + h_ridge

    # Step 4: eave end, projected down the slope past the base purlin
    y_eave = y_rafter_at_base - eaves * tan_pitch

    # Step 5: longitudinal extents
    x_min = -(length / 2 + gable)
    x_max = +(length / 2 + gable)

    # Steps 6-7: purlins
    z_side = width / 2 - PURLIN_SIZE / 2
    base_purlins = (
        _make_purlin(x_min, x_max, y_purlin_center, -z_side, PURLIN_SIZE),
        _make_purlin(x_min, x_max, y_purlin_center, +z_side, PURLIN_SIZE),
    )
    ridge_purlin = _make_purlin(x_min, x_max, y_ridge_center, 0.0, RIDGE_SIZE)

    # Step 8: pillars
    row_xs = pillar_row_positions(length)
    with_center = needs_center_pillars(width)
    pillars = _build_pillars(
        row_xs,
        z_pillar=width / 2 - PILLAR_SIZE / 2,
        center_height=(y_ridge_top - RIDGE_SIZE) if with_center else None,
    )

    # Step 9: one tie beam per pillar row
    tie_beams = tuple(
        TieBeam(
            start=Point3D(x, y_purlin_center, -z_side),
            end=Point3D(x, y_purlin_center, +z_side),
        )
        for x in row_xs
    )

    # Steps 10-11: rafters
    rafter_xs, spacing = rafter_positions(x_min, params.total_length)
    rafters = _build_rafters(
        rafter_xs,
        y_eave=y_eave,
        y_ridge=y_rafter_at_ridge,
        z_eave=width / 2 + eaves,
        params=params,
        cos_pitch=cos_pitch,
    )

    # Step 12: ridge ties, sides flush with the rafter top surface
    y_top_surface_at_ridge = y_rafter_at_ridge + RAFTER_DEPTH / (2 * cos_pitch)
    ridge_ties = _build_ridge_ties(
        rafter_xs,
        y_top=y_ridge_top + RIDGE_TIE_NOTCH,
        y_top_surface_at_ridge=y_top_surface_at_ridge,
        tan_pitch=tan_pitch,
    )

    # Step 13: corner knee braces
    knee_braces = _build_knee_braces(
        row_xs,
        z_side=z_side,
        y_joint=y_purlin_center,
        y_ridge_joint=y_ridge_center if with_center else None,
    )

    logger.debug(
        "Built structure %.2fx%.2f m @ %.1f deg: %d pillars, %d tie beams, "
        "%d rafters (spacing %.3f m), %d ridge ties, %d knee braces",
        width, length, pitch, len(pillars), len(tie_beams),
        len(rafters), spacing, len(ridge_ties), len(knee_braces),
    )

    return StructureModel(
        params=params,
        ridge_height=h_ridge,
        pillar_height=PILLAR_HEIGHT,
        pillars=pillars,
        base_purlins=base_purlins,
        ridge_purlin=ridge_purlin,
        tie_beams=tie_beams,
        ridge_ties=ridge_ties,
        rafters=rafters,
        rafter_spacing=spacing,
        knee_braces=knee_braces,
    )


def pillar_row_positions(length: float) -> List[float]:
    """
    X positions of the pillar rows, evenly spaced between the end rows.

    End pillars are flush with ±length/2, so their centres are inset by
    half a pillar.
    """
    half = length / 2 - PILLAR_SIZE / 2
    rows = pillar_row_count(length)
    return [float(x) for x in np.linspace(-half, half, rows)]


def rafter_positions(x_min: float, total_length: float) -> Tuple[List[float], float]:
    """
    X positions of the rafter pairs and their spacing.

    The gable rafters are flush with the purlin ends, so the centre-to-centre
    run from first to last rafter is one rafter width shorter than the purlins.
    """
    run = total_length - RAFTER_WIDTH
    bays = rafter_bay_count(run)
    spacing = run / bays
    x_first = x_min + RAFTER_WIDTH / 2
    return [x_first + i * spacing for i in range(bays + 1)], spacing


# =============================================================================
# Helpers
# =============================================================================

def _toward_center(value: float) -> float:
    """Unit direction from `value` back toward 0 (+1 at or left of centre)."""
    return -1.0 if value > 0 else 1.0


def _make_purlin(x_min: float, x_max: float, y: float, z: float, size: float) -> Purlin:
    return Purlin(
        start=Point3D(x_min, y, z),
        end=Point3D(x_max, y, z),
        width=size,
        height=size,
    )


def _build_pillars(
    row_xs: Sequence[float],
    z_pillar: float,
    center_height: Optional[float],
) -> Tuple[Pillar, ...]:
    """Two pillars per row; centre pillars on the two end rows only."""
    pillars = []
    last = len(row_xs) - 1
    for i, x in enumerate(row_xs):
        for z in (-z_pillar, +z_pillar):
            pillars.append(Pillar(base=Point3D(x, 0.0, z), height=PILLAR_HEIGHT))
        if center_height is not None and i in (0, last):
            pillars.append(Pillar(base=Point3D(x, 0.0, 0.0), height=center_height))
    return tuple(pillars)


def _build_rafters(
    rafter_xs: Sequence[float],
    y_eave: float,
    y_ridge: float,
    z_eave: float,
    params: InputParams,
    cos_pitch: float,
) -> Tuple[Rafter, ...]:
    """Mirrored left/right pairs at every X position, left slope first."""
    bm_base = bird_mouth_at_base_purlin(params.pitch)
    bm_ridge = bird_mouth_at_ridge_purlin(params.pitch)

    # Distance along the rafter from the eave end to each plumb cut
    d_base = params.eaves_overhang / cos_pitch
    d_ridge = (params.eaves_overhang + params.width / 2) / cos_pitch

    birdmouth_base = BirdMouth(bm_base.seat_depth, bm_base.plumb_height, d_base)
    birdmouth_ridge = BirdMouth(bm_ridge.seat_depth, bm_ridge.plumb_height, d_ridge)
    r_length = rafter_length(params.width, params.pitch, params.eaves_overhang)

    rafters = []
    for x in rafter_xs:
        for side in (-1.0, 1.0):
            rafters.append(Rafter(
                eave_end=Point3D(x, y_eave, side * z_eave),
                ridge_end=Point3D(x, y_ridge, 0.0),
                bird_mouth_base=birdmouth_base,
                bird_mouth_ridge=birdmouth_ridge,
                length=r_length,
            ))
    return tuple(rafters)


def _build_ridge_ties(
    rafter_xs: Sequence[float],
    y_top: float,
    y_top_surface_at_ridge: float,
    tan_pitch: float,
) -> Tuple[RidgeTie, ...]:
    """
    KAKASÜLŐ boards beside the rafters at the ridge.

    Cross-section: horizontal top cut at y_top (just above the ridge purlin),
    horizontal bottom cut RIDGE_TIE_DEPTH lower, sloped sides on the rafter
    top surface plane. On that plane y = y_top_surface_at_ridge - |z|·tan,
    so at a given cut height |z| = (y_top_surface_at_ridge - y) / tan.

    Interior rafters get a pair (one each side); gable rafters get a single
    tie on the inward side.
    """
    y_bottom = y_top - RIDGE_TIE_DEPTH
    z_half_top = (y_top_surface_at_ridge - y_top) / tan_pitch
    z_half_bottom = (y_top_surface_at_ridge - y_bottom) / tan_pitch
    offset = RAFTER_WIDTH / 2 + RIDGE_TIE_WIDTH / 2

    last = len(rafter_xs) - 1
    tie_xs = []
    for i, x in enumerate(rafter_xs):
        if i == 0:
            tie_xs.append(x + offset)
        elif i == last:
            tie_xs.append(x - offset)
        else:
            tie_xs.extend([x - offset, x + offset])

    return tuple(
        RidgeTie(
            x=x,
            y_top=y_top,
            y_bottom=y_bottom,
            z_half_top=z_half_top,
            z_half_bottom=z_half_bottom,
        )
        for x in tie_xs
    )


def _build_knee_braces(
    row_xs: Sequence[float],
    z_side: float,
    y_joint: float,
    y_ridge_joint: Optional[float],
) -> Tuple[KneeBrace, ...]:
    """
    KÖNYÖKFA at the first and last pillar rows.

    At each corner the pillar, the base purlin and the tie beam meet at
    (x_row, y_joint, ±z_side). Three braces stiffen the joint, each with both
    ends on member centrelines at equal legs from the joint:
        pillar -> tie beam   (YZ plane)
        pillar -> purlin     (XY plane)
        purlin -> tie beam   (XZ plane, horizontal)
    With a centre pillar, it is braced to the ridge purlin (XY plane) and to
    the tie beam on both sides (YZ plane).
    """
    horizontal, vertical = knee_brace_legs()
    braces = []

    for x in (row_xs[0], row_xs[-1]):
        sx = _toward_center(x)
        for z in (-z_side, +z_side):
            sz = _toward_center(z)
            on_pillar = Point3D(x, y_joint - vertical, z)
            on_purlin = Point3D(x + sx * horizontal, y_joint, z)
            on_tie_beam = Point3D(x, y_joint, z + sz * horizontal)
            braces.append(KneeBrace(start=on_pillar, end=on_tie_beam))
            braces.append(KneeBrace(start=on_pillar, end=on_purlin))
            braces.append(KneeBrace(start=on_purlin, end=on_tie_beam))

        if y_ridge_joint is not None:
            braces.append(KneeBrace(
                start=Point3D(x, y_ridge_joint - vertical, 0.0),
                end=Point3D(x + sx * horizontal, y_ridge_joint, 0.0),
            ))
            for sz in (-1.0, 1.0):
                braces.append(KneeBrace(
                    start=Point3D(x, y_joint - vertical, 0.0),
                    end=Point3D(x, y_joint, sz * horizontal),
                ))

    return tuple(braces)
