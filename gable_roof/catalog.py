"""
CATALOG: TIMBER SECTIONS AND CARPENTRY CONSTANTS
================================================

PURPOSE:
--------
Every member of the garden roof is cut from one of a handful of standard
sawn sections. Instead of repeating 0.15 and 0.075 all over the assembler,
the sections and the fixed carpentry rules live here and are referenced
by name.

ENGINEERING CONTEXT:
--------------------
A Hungarian garden roof ("kerti tető") is built from:
- OSZLOP (pillar): 15x15 cm posts, 2.4 m tall
- TALP SZELEMEN (base purlin): 15x15 cm, sits on the pillars
- GERINC SZELEMEN (ridge purlin): 10x10 cm, sits BELOW the rafter tops
- KÖTŐGERENDA (tie beam): 15x15 cm, across the span at each pillar row
- SZARUFA (rafter): 7.5x15 cm, on edge
- KAKASÜLŐ (ridge tie): 5 cm boards beside the rafters at the ridge
- KÖNYÖKFA (knee brace): 10x10 cm, 1 m long at 45°

For a rectangular section (width b, depth d):
- A = b × d            (volume = A × L)
- P = 2 × (b + d)      (planed surface = P × L, end grain ignored)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Section:
    """
    Rectangular sawn timber section.

    Parameters:
    -----------
    name : str
        Human-readable name (e.g., "15x15")
    width : float
        Horizontal dimension (m)
    depth : float
        Vertical dimension as installed (m)
    """
    name: str
    width: float
    depth: float

    @property
    def area(self) -> float:
        """Cross-sectional area (m²)."""
        return self.width * self.depth

    @property
    def perimeter(self) -> float:
        """Cross-section perimeter (m)."""
        return 2.0 * (self.width + self.depth)


# ============================================================================
# SECTION DEFINITIONS
# ============================================================================

PILLAR_SECTION = Section(name="15x15", width=0.15, depth=0.15)
PURLIN_SECTION = Section(name="15x15", width=0.15, depth=0.15)
RIDGE_SECTION = Section(name="10x10", width=0.10, depth=0.10)
TIE_BEAM_SECTION = Section(name="15x15", width=0.15, depth=0.15)
RAFTER_SECTION = Section(name="7.5x15", width=0.075, depth=0.15)
KNEE_BRACE_SECTION = Section(name="10x10", width=0.10, depth=0.10)

# Shorthands used throughout the assembler (m)
PILLAR_SIZE = PILLAR_SECTION.width
PURLIN_SIZE = PURLIN_SECTION.width
RIDGE_SIZE = RIDGE_SECTION.width
RAFTER_WIDTH = RAFTER_SECTION.width
RAFTER_DEPTH = RAFTER_SECTION.depth

PILLAR_HEIGHT = 2.4  # m, fixed for all perimeter pillars


# ============================================================================
# CARPENTRY RULES
# ============================================================================

# Plumb cut of every birdmouth: keeps 4/5 of the 15 cm rafter depth
BIRD_MOUTH_PLUMB_HEIGHT = 0.03

# Seat of the ridge birdmouth: half the 10 cm ridge purlin
RIDGE_BIRD_MOUTH_SEAT = RIDGE_SIZE / 2

# Layout limits
MAX_RAFTER_SPACING = 0.9     # m, centre-to-centre
MAX_UNSUPPORTED_SPAN = 3.5   # m, clear span between pillars

# Ridge tie (KAKASÜLŐ)
RIDGE_TIE_WIDTH = 0.05   # board thickness along X
RIDGE_TIE_NOTCH = 0.02   # top cut above the ridge purlin top
RIDGE_TIE_DEPTH = 0.12   # top cut to bottom cut

# Knee brace (KÖNYÖKFA)
KNEE_BRACE_LENGTH = 1.0
KNEE_BRACE_ANGLE = 45.0  # degrees from horizontal
