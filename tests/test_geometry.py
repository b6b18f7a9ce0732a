# File: tests/test_geometry.py
"""
Tests for the geometry primitives (gable_roof/geometry.py).

These are the small formulas everything else is built from, so each one is
checked on its own: closed-form values, monotonicity, and the span-sweep
properties of the step functions.
"""

import numpy as np
import pytest

from gable_roof.catalog import MAX_RAFTER_SPACING, MAX_UNSUPPORTED_SPAN, PILLAR_SIZE
from gable_roof.geometry import (
    bird_mouth_at_base_purlin,
    bird_mouth_at_ridge_purlin,
    knee_brace_legs,
    needs_center_pillars,
    pillar_count,
    pillar_row_count,
    rafter_bay_count,
    rafter_bay_spacing,
    rafter_count,
    rafter_length,
    rafter_y_offset,
    ridge_height,
)

SPAN_SWEEP = [2, 3, 4, 5, 7, 10, 15, 20]


# =============================================================================
# ridge_height / rafter_length
# =============================================================================

def test_ridge_height_is_half_span_times_tan():
    for width in [2.0, 3.0, 4.0, 6.5]:
        for pitch in [10, 25, 35, 45]:
            expected = (width / 2) * np.tan(np.radians(pitch))
            np.testing.assert_allclose(ridge_height(width, pitch), expected, rtol=1e-12)


def test_ridge_height_zero_for_zero_pitch():
    assert ridge_height(4.0, 0) == 0.0
    assert ridge_height(4.0, 5) > 0.0


def test_rafter_length_reference_scenario():
    """width=3, pitch=25°, eaves=0.5 → (1.5 + 0.5) / cos(25°)."""
    L = rafter_length(3.0, 25, 0.5)
    np.testing.assert_allclose(L, 2.0 / np.cos(np.radians(25)), rtol=1e-12)
    assert abs(L - 2.2068) < 1e-4


def test_rafter_length_strictly_increasing_in_eaves():
    lengths = [rafter_length(3.0, 25, e) for e in np.linspace(0.0, 1.0, 21)]
    assert all(b > a for a, b in zip(lengths, lengths[1:]))


# =============================================================================
# Pillar rows
# =============================================================================

def test_pillar_row_count_examples():
    assert pillar_row_count(2.0) == 2
    assert pillar_row_count(3.0) == 2
    assert pillar_row_count(4.0) == 3
    assert pillar_row_count(7.5) == 4
    assert pillar_row_count(20.0) == 7


def test_pillar_row_count_just_past_threshold():
    just_over = MAX_UNSUPPORTED_SPAN + 2 * PILLAR_SIZE + 0.01
    assert pillar_row_count(just_over) == 3
    assert pillar_row_count(2 * MAX_UNSUPPORTED_SPAN + 2 * PILLAR_SIZE + 0.01) == 4


@pytest.mark.parametrize("span", SPAN_SWEEP)
def test_pillar_bays_never_exceed_threshold(span):
    """Reconstruct the bay from the row count: it must fit the limit."""
    rows = pillar_row_count(span)
    inner_span = span - 2 * PILLAR_SIZE
    assert inner_span / (rows - 1) <= MAX_UNSUPPORTED_SPAN + 1e-9

    # ...and one row fewer would not do
    if rows > 2:
        assert inner_span / (rows - 2) > MAX_UNSUPPORTED_SPAN


def test_pillar_row_count_is_monotonic_step_function():
    counts = [pillar_row_count(s) for s in np.linspace(0.5, 25.0, 500)]
    assert all(b >= a for a, b in zip(counts, counts[1:]))
    assert min(counts) == 2


def test_pillar_count_with_and_without_center_pillars():
    assert pillar_count(4.0) == 6
    assert pillar_count(4.0, width=3.0) == 6
    assert pillar_count(4.0, width=5.0) == 8
    assert pillar_count(20.0) == 14


def test_needs_center_pillars_threshold():
    assert not needs_center_pillars(3.0)
    assert not needs_center_pillars(MAX_UNSUPPORTED_SPAN + 2 * PILLAR_SIZE - 0.01)
    assert needs_center_pillars(MAX_UNSUPPORTED_SPAN + 2 * PILLAR_SIZE + 0.01)


# =============================================================================
# Rafter bays
# =============================================================================

def test_rafter_bay_spacing_example():
    # 4 m: ceil(4 / 0.9) = 5 bays → 0.8 m
    assert rafter_bay_count(4.0) == 5
    np.testing.assert_allclose(rafter_bay_spacing(4.0), 0.8, rtol=1e-12)
    assert rafter_count(4.0) == 6


@pytest.mark.parametrize("run", [0.5, 1.0, 2.0, 3.0, 4.525, 5.0, 7.0, 10.0, 20.6])
def test_rafter_spacing_never_exceeds_max(run):
    spacing = rafter_bay_spacing(run)
    assert spacing <= MAX_RAFTER_SPACING + 1e-12
    np.testing.assert_allclose(spacing * rafter_bay_count(run), run, rtol=1e-12)


def test_rafter_count_includes_both_gables():
    assert rafter_count(0.5) == 2
    assert rafter_count(0.9) == 2
    assert rafter_count(0.91) == 3


# =============================================================================
# Birdmouths
# =============================================================================

@pytest.mark.parametrize("pitch", [15, 25, 35, 45])
def test_base_bird_mouth_plumb_height_fixed(pitch):
    bm = bird_mouth_at_base_purlin(pitch)
    assert bm.plumb_height == pytest.approx(0.03)
    np.testing.assert_allclose(bm.seat_depth, 0.03 / np.tan(np.radians(pitch)), rtol=1e-12)


def test_base_bird_mouth_seat_shrinks_with_pitch():
    seats = [bird_mouth_at_base_purlin(p).seat_depth for p in [10, 15, 25, 35, 45, 60]]
    assert all(b < a for a, b in zip(seats, seats[1:]))


@pytest.mark.parametrize("pitch", [15, 25, 35, 45])
def test_ridge_bird_mouth_seat_fixed(pitch):
    bm = bird_mouth_at_ridge_purlin(pitch)
    assert bm.seat_depth == pytest.approx(0.05)
    assert bm.plumb_height == pytest.approx(0.03)


# =============================================================================
# Bearing offset / knee brace legs
# =============================================================================

def test_rafter_y_offset_formula():
    for pitch in [10, 25, 45]:
        cos_p = np.cos(np.radians(pitch))
        np.testing.assert_allclose(rafter_y_offset(pitch), 0.15 / (2 * cos_p) - 0.03, rtol=1e-12)


def test_rafter_y_offset_is_not_the_multiplied_form():
    """depth/2·cos instead of depth/(2·cos) is centimetres off at 25°."""
    cos_p = np.cos(np.radians(25))
    wrong = 0.15 / 2 * cos_p - 0.03
    assert abs(rafter_y_offset(25) - wrong) > 0.01


def test_knee_brace_legs_at_45_degrees():
    horizontal, vertical = knee_brace_legs()
    np.testing.assert_allclose(horizontal, np.sqrt(0.5), rtol=1e-12)
    np.testing.assert_allclose(vertical, horizontal, rtol=1e-12)
    np.testing.assert_allclose(np.hypot(horizontal, vertical), 1.0, rtol=1e-12)
