"""
MODEL DEFINITIONS: Input parameters and timber members
======================================================

PURPOSE:
--------
This module defines the data structures of the garden roof model:
- InputParams: the five slider values a customer can change
- Point3D: a point in the roof coordinate system
- Pillar, Purlin, TieBeam, Rafter, RidgeTie, KneeBrace: the timber members
- StructureModel: the complete frame, built in one go by build_structure()

COORDINATE SYSTEM:
------------------
    X: longitudinal (along the ridge and the purlins)
    Y: vertical (up)
    Z: cross-sectional (across the span, eave to eave)
    Origin: centre of the footprint at ground level

All lengths are in metres. Angles are in degrees.

WHY FROZEN DATACLASSES?
-----------------------
A model is rebuilt from scratch on every parameter change and replaces the
previous one wholesale. frozen=True (and tuples instead of lists in the
aggregate) make that contract explicit: nobody can patch a member in place,
and two builds from the same parameters compare equal.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np


@dataclass(frozen=True)
class InputParams:
    """
    The five user-adjustable parameters of a garden roof.

    Parameters:
    -----------
    width : float
        KERESZTIRÁNYÚ MÉRET: outer pillar-to-pillar extent across the span (m)
    length : float
        HOSSZIRÁNYÚ MÉRET: outer pillar-to-pillar extent along the ridge (m)
    pitch : float
        Roof pitch (degrees), 0 < pitch < 90
    eaves_overhang : float
        Horizontal overhang of the rafters beyond the base purlins (m)
    gable_overhang : float
        Overhang of the purlins beyond the end pillars at each gable (m)
    """
    width: float
    length: float
    pitch: float
    eaves_overhang: float
    gable_overhang: float

    @property
    def total_length(self) -> float:
        """Longitudinal run of the roof including both gable overhangs."""
        return self.length + 2 * self.gable_overhang

    @property
    def total_width(self) -> float:
        """Plan width of the roof including both eaves overhangs."""
        return self.width + 2 * self.eaves_overhang


@dataclass(frozen=True)
class Point3D:
    """A point in the roof coordinate system (m)."""
    x: float
    y: float
    z: float

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    def distance_to(self, other: "Point3D") -> float:
        return float(np.linalg.norm(other.as_array() - self.as_array()))


@dataclass(frozen=True)
class Pillar:
    """
    OSZLOP: vertical post, 0.15 x 0.15 m.

    base is the bottom centre. Perimeter pillars are PILLAR_HEIGHT tall;
    centre pillars under the ridge reach up to the ridge purlin underside.
    """
    base: Point3D
    height: float

    @property
    def top(self) -> Point3D:
        return Point3D(self.base.x, self.base.y + self.height, self.base.z)


@dataclass(frozen=True)
class Purlin:
    """SZELEMEN: horizontal beam along X. start/end are centreline points."""
    start: Point3D
    end: Point3D
    width: float
    height: float

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def top(self) -> float:
        """Height of the top (bearing) surface."""
        return self.start.y + self.height / 2


@dataclass(frozen=True)
class TieBeam:
    """KÖTŐGERENDA: horizontal beam across the span joining the base purlins."""
    start: Point3D
    end: Point3D

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)


@dataclass(frozen=True)
class BirdMouth:
    """
    Seat-and-plumb notch cut into a rafter where it rests on a purlin.

    Parameters:
    -----------
    seat_depth : float
        Horizontal cut resting on the purlin top (m)
    plumb_height : float
        Vertical cut (m)
    distance_from_eave : float
        Position along the rafter measured from the eave end (m)
    """
    seat_depth: float
    plumb_height: float
    distance_from_eave: float


@dataclass(frozen=True)
class Rafter:
    """
    SZARUFA: sloped member from eave to ridge.

    eave_end and ridge_end are centreline points; ridge_end always has z = 0.
    length is the slope length of the centreline.
    """
    eave_end: Point3D
    ridge_end: Point3D
    bird_mouth_base: BirdMouth
    bird_mouth_ridge: BirdMouth
    length: float

    @property
    def side(self) -> int:
        """-1 for the left slope (eave at negative z), +1 for the right slope."""
        return -1 if self.eave_end.z < 0 else 1

    def centerline_height_at(self, z: float) -> float:
        """
        Height of the rafter centreline at horizontal distance |z| from the ridge.

        The centreline is straight, so this is a linear interpolation between
        the ridge end (|z| = 0) and the eave end.
        """
        run = abs(self.eave_end.z)
        drop = self.ridge_end.y - self.eave_end.y
        return self.ridge_end.y - drop * abs(z) / run


@dataclass(frozen=True)
class RidgeTie:
    """
    KAKASÜLŐ: trapezoidal board beside a rafter, straddling the ridge purlin.

    The cross-section lies in the YZ plane at position x. The top and bottom
    are horizontal cuts; the sloped sides are flush with the rafters' top
    surface, so the tie widens downward.
    """
    x: float
    y_top: float
    y_bottom: float
    z_half_top: float
    z_half_bottom: float

    @property
    def depth(self) -> float:
        return self.y_top - self.y_bottom

    @property
    def area(self) -> float:
        """Trapezoid area (m²): mean full width × depth."""
        return (self.z_half_top + self.z_half_bottom) * self.depth


@dataclass(frozen=True)
class KneeBrace:
    """KÖNYÖKFA: 1 m diagonal brace at 45° stiffening a corner junction."""
    start: Point3D
    end: Point3D

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)


@dataclass(frozen=True)
class StructureModel:
    """
    The complete timber frame of one garden roof.

    Built only by build_structure(); see gable_roof.structure for the
    derivation of every level and position.

    Attributes:
    -----------
    params : InputParams
        The parameters this model was built from
    ridge_height : float
        Rise of the rafter slope over half the width: (width/2)·tan(pitch)
    pillar_height : float
        Height of the perimeter pillars (m)
    pillars : Tuple[Pillar, ...]
        Row by row; within a row: left, right, then the centre pillar if any
    base_purlins : Tuple[Purlin, Purlin]
        Left (z < 0) and right (z > 0) base purlins
    ridge_purlin : Purlin
        Ridge purlin at z = 0
    tie_beams : Tuple[TieBeam, ...]
        One per pillar row
    ridge_ties : Tuple[RidgeTie, ...]
        Ordered along X
    rafters : Tuple[Rafter, ...]
        Mirrored pairs along X: left, right, left, right, ...
    rafter_spacing : float
        Centre-to-centre rafter spacing along X (m)
    knee_braces : Tuple[KneeBrace, ...]
        Corner braces at the first and last pillar rows
    """
    params: InputParams
    ridge_height: float
    pillar_height: float
    pillars: Tuple[Pillar, ...]
    base_purlins: Tuple[Purlin, Purlin]
    ridge_purlin: Purlin
    tie_beams: Tuple[TieBeam, ...]
    ridge_ties: Tuple[RidgeTie, ...]
    rafters: Tuple[Rafter, ...]
    rafter_spacing: float
    knee_braces: Tuple[KneeBrace, ...]

    @property
    def total_length(self) -> float:
        """Longitudinal run of purlins and roof, gable overhangs included."""
        return self.params.total_length

    @property
    def rafter_length(self) -> float:
        return self.rafters[0].length

    @property
    def left_rafters(self) -> Tuple[Rafter, ...]:
        return tuple(r for r in self.rafters if r.side < 0)

    @property
    def right_rafters(self) -> Tuple[Rafter, ...]:
        return tuple(r for r in self.rafters if r.side > 0)

    @property
    def base_purlin_top(self) -> float:
        return self.base_purlins[0].top

    @property
    def ridge_purlin_top(self) -> float:
        return self.ridge_purlin.top
