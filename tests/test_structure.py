# File: tests/test_structure.py
"""
Tests for the structural assembler (gable_roof/structure.py).

Covers the reference scenario member by member, the centre pillar case,
count monotonicity over size sweeps, and rejection of invalid parameters.
"""

import dataclasses

import numpy as np
import pytest

from gable_roof import InputParams, InvalidParamsError, build_structure
from gable_roof.catalog import (
    MAX_RAFTER_SPACING,
    PILLAR_HEIGHT,
    PURLIN_SIZE,
    RIDGE_SIZE,
)
from gable_roof.geometry import min_frame_size, rafter_length, ridge_height
from gable_roof.structure import pillar_row_positions, rafter_positions

BASE = InputParams(width=3.0, length=4.0, pitch=25.0, eaves_overhang=0.5, gable_overhang=0.3)
WIDE = dataclasses.replace(BASE, width=5.0)


# =============================================================================
# Reference scenario: 3 x 4 m, 25°, eaves 0.5, gable 0.3
# =============================================================================

def test_reference_scenario_counts():
    model = build_structure(BASE)

    assert len(model.pillars) == 6
    assert len(model.tie_beams) == 3
    assert len(model.rafters) == 14
    assert len(model.left_rafters) == 7
    assert len(model.right_rafters) == 7
    assert len(model.ridge_ties) == 12
    assert len(model.knee_braces) == 12
    assert abs(model.rafter_length - 2.2068) < 1e-4

    print("✓ Reference scenario: 6 pillars, 14 rafters")


def test_ridge_height_reported_on_model():
    model = build_structure(BASE)
    np.testing.assert_allclose(model.ridge_height, 1.5 * np.tan(np.radians(25)), rtol=1e-12)
    assert model.pillar_height == PILLAR_HEIGHT


def test_purlins_levels_and_extent():
    model = build_structure(BASE)

    left, right = model.base_purlins
    for purlin in (left, right):
        assert purlin.start.x == pytest.approx(-2.3)
        assert purlin.end.x == pytest.approx(2.3)
        assert purlin.start.y == pytest.approx(PILLAR_HEIGHT + PURLIN_SIZE / 2)
        assert purlin.length == pytest.approx(4.6)
        assert purlin.width == PURLIN_SIZE
    assert left.start.z == pytest.approx(-1.425)
    assert right.start.z == pytest.approx(1.425)
    assert model.base_purlin_top == pytest.approx(2.55)

    ridge = model.ridge_purlin
    assert ridge.start.z == 0.0
    assert ridge.width == RIDGE_SIZE
    assert ridge.length == pytest.approx(4.6)
    np.testing.assert_allclose(
        model.ridge_purlin_top, 2.55 + ridge_height(3.0 - RIDGE_SIZE, 25), rtol=1e-12
    )


def test_pillars_positions():
    model = build_structure(BASE)

    xs = sorted({p.base.x for p in model.pillars})
    np.testing.assert_allclose(xs, [-1.925, 0.0, 1.925], atol=1e-12)
    for p in model.pillars:
        assert p.base.y == 0.0
        assert p.height == PILLAR_HEIGHT
        assert abs(p.base.z) == pytest.approx(1.425)
        assert p.top.y == pytest.approx(PILLAR_HEIGHT)

    # Left then right within each row
    for left, right in zip(model.pillars[0::2], model.pillars[1::2]):
        assert left.base.x == right.base.x
        assert left.base.z < 0 < right.base.z


def test_pillar_row_positions_end_rows_flush():
    xs = pillar_row_positions(10.0)
    assert len(xs) == 4
    assert xs[0] == pytest.approx(-4.925)
    assert xs[-1] == pytest.approx(4.925)
    np.testing.assert_allclose(np.diff(xs), (9.85 / 3), rtol=1e-12)


def test_tie_beams_one_per_row_between_purlins():
    model = build_structure(BASE)
    row_xs = pillar_row_positions(BASE.length)

    for tie, x in zip(model.tie_beams, row_xs):
        assert tie.start.x == pytest.approx(x)
        assert tie.end.x == pytest.approx(x)
        assert tie.start.y == pytest.approx(model.base_purlins[0].start.y)
        assert tie.start.z == pytest.approx(model.base_purlins[0].start.z)
        assert tie.end.z == pytest.approx(model.base_purlins[1].start.z)
        assert tie.length == pytest.approx(2.85)


# =============================================================================
# Rafters
# =============================================================================

def test_rafters_are_mirrored_pairs():
    model = build_structure(BASE)

    for left, right in zip(model.rafters[0::2], model.rafters[1::2]):
        assert left.side == -1
        assert right.side == 1
        assert left.eave_end.x == right.eave_end.x
        assert left.eave_end.z == pytest.approx(-2.0)
        assert right.eave_end.z == pytest.approx(2.0)
        assert left.ridge_end == right.ridge_end
        assert left.ridge_end.z == 0.0


def test_rafters_identical_length():
    model = build_structure(BASE)
    expected = rafter_length(3.0, 25, 0.5)
    for r in model.rafters:
        assert r.length == expected
        np.testing.assert_allclose(r.eave_end.distance_to(r.ridge_end), expected, rtol=1e-9)


def test_rafter_spacing_uniform_and_bounded():
    model = build_structure(BASE)
    xs = np.array([r.eave_end.x for r in model.left_rafters])

    assert xs[0] == pytest.approx(-2.2625)
    assert xs[-1] == pytest.approx(2.2625)
    np.testing.assert_allclose(np.diff(xs), model.rafter_spacing, rtol=1e-9)
    assert model.rafter_spacing <= MAX_RAFTER_SPACING
    assert model.rafter_spacing == pytest.approx(4.525 / 6)


def test_rafter_positions_returns_spacing():
    xs, spacing = rafter_positions(-2.3, 4.6)
    assert len(xs) == 7
    np.testing.assert_allclose(xs[-1] - xs[0], 6 * spacing, rtol=1e-12)


def test_rafter_bird_mouth_distances():
    model = build_structure(BASE)
    cos_p = np.cos(np.radians(25))
    r = model.rafters[0]

    np.testing.assert_allclose(r.bird_mouth_base.distance_from_eave, 0.5 / cos_p, rtol=1e-12)
    np.testing.assert_allclose(r.bird_mouth_ridge.distance_from_eave, 2.0 / cos_p, rtol=1e-12)
    assert r.bird_mouth_ridge.distance_from_eave > r.bird_mouth_base.distance_from_eave
    assert r.bird_mouth_ridge.seat_depth == pytest.approx(0.05)


def test_zero_eaves_puts_base_bird_mouth_at_eave_end():
    model = build_structure(dataclasses.replace(BASE, eaves_overhang=0.0))
    r = model.rafters[0]
    assert r.bird_mouth_base.distance_from_eave == 0.0
    assert abs(r.eave_end.z) == pytest.approx(1.5)


# =============================================================================
# Centre pillars
# =============================================================================

def test_center_pillars_only_on_end_rows():
    model = build_structure(WIDE)

    assert len(model.pillars) == 8
    center = [p for p in model.pillars if p.base.z == 0.0]
    assert len(center) == 2
    np.testing.assert_allclose(sorted(p.base.x for p in center), [-1.925, 1.925], atol=1e-12)


def test_center_pillars_reach_ridge_purlin_underside():
    model = build_structure(WIDE)
    underside = model.ridge_purlin.start.y - model.ridge_purlin.height / 2

    for p in model.pillars:
        if p.base.z == 0.0:
            assert p.height == pytest.approx(underside)
            assert p.height > PILLAR_HEIGHT


def test_no_center_pillars_for_narrow_roof():
    model = build_structure(BASE)
    assert all(p.base.z != 0.0 for p in model.pillars)


def test_long_roof_center_pillars_still_two():
    model = build_structure(dataclasses.replace(WIDE, length=12.0))
    center = [p for p in model.pillars if p.base.z == 0.0]
    assert len(model.tie_beams) == 5
    assert len(center) == 2


# =============================================================================
# Monotonicity over size sweeps
# =============================================================================

def test_counts_monotonic_in_length():
    counts = []
    for length in np.linspace(2.0, 20.0, 37):
        model = build_structure(dataclasses.replace(BASE, length=float(length)))
        counts.append((len(model.pillars), len(model.tie_beams), len(model.rafters)))

    for a, b in zip(counts, counts[1:]):
        assert all(nb >= na for na, nb in zip(a, b))


def test_counts_monotonic_in_width():
    counts = []
    for width in np.linspace(2.0, 8.0, 25):
        model = build_structure(dataclasses.replace(BASE, width=float(width)))
        counts.append((len(model.pillars), len(model.knee_braces)))

    for a, b in zip(counts, counts[1:]):
        assert all(nb >= na for na, nb in zip(a, b))


def test_smallest_frame_is_consistent():
    size = min_frame_size() + 0.01
    model = build_structure(InputParams(size, size, 10.0, 0.0, 0.0))

    assert len(model.pillars) == 4
    assert len(model.rafters) == 6
    assert model.rafter_spacing > 0
    assert model.base_purlins[0].start.z < 0 < model.base_purlins[1].start.z
    assert model.ridge_purlin_top > model.base_purlin_top


@pytest.mark.parametrize("width,length", [(0.05, 0.05), (3.0, 1.2), (1.2, 4.0)])
def test_frames_too_small_for_knee_braces_rejected(width, length):
    with pytest.raises(InvalidParamsError, match="must be >="):
        build_structure(InputParams(width, length, 25.0, 0.0, 0.0))


# =============================================================================
# Invalid parameters
# =============================================================================

@pytest.mark.parametrize("changes", [
    {'width': 0.0},
    {'width': -1.0},
    {'length': 0.0},
    {'pitch': 0.0},
    {'pitch': 90.0},
    {'pitch': -5.0},
    {'eaves_overhang': -0.1},
    {'gable_overhang': -0.1},
    {'width': float('nan')},
    {'length': float('inf')},
])
def test_invalid_params_rejected(changes):
    with pytest.raises(InvalidParamsError):
        build_structure(dataclasses.replace(BASE, **changes))


def test_invalid_params_is_a_value_error():
    with pytest.raises(ValueError):
        build_structure(dataclasses.replace(BASE, pitch=95.0))
