"""Input validation for garden roof parameters."""

from typing import List

import numpy as np

from .geometry import min_frame_size
from .model import InputParams


class InvalidParamsError(ValueError):
    """Raised when input parameters are outside the buildable domain."""
    pass


def validate_params(params: InputParams) -> None:
    """
    Reject parameters that cannot produce a valid structure.

    Checks, in order:
    - every field is a finite number
    - width and length at least min_frame_size(), so the corner knee braces
      fit inside the frame
    - 0 < pitch < 90 (pitch 0 has no defined base birdmouth seat)
    - eaves_overhang >= 0 and gable_overhang >= 0

    All violations are reported in one message.

    Raises:
        InvalidParamsError: If any check fails
    """
    fields = {
        'width': params.width,
        'length': params.length,
        'pitch': params.pitch,
        'eaves_overhang': params.eaves_overhang,
        'gable_overhang': params.gable_overhang,
    }

    problems: List[str] = []
    for name, value in fields.items():
        try:
            finite = bool(np.isfinite(value))
        except TypeError:
            finite = False
        if not finite:
            problems.append(f"{name} must be a finite number, got {value!r}")

    if problems:
        raise InvalidParamsError("; ".join(problems))

    min_size = min_frame_size()
    if params.width < min_size:
        problems.append(f"width must be >= {min_size:.3f} m, got {params.width}")
    if params.length < min_size:
        problems.append(f"length must be >= {min_size:.3f} m, got {params.length}")
    if not 0 < params.pitch < 90:
        problems.append(f"pitch must be in (0, 90) degrees, got {params.pitch}")
    if params.eaves_overhang < 0:
        problems.append(f"eaves_overhang must be >= 0, got {params.eaves_overhang}")
    if params.gable_overhang < 0:
        problems.append(f"gable_overhang must be >= 0, got {params.gable_overhang}")

    if problems:
        raise InvalidParamsError("; ".join(problems))
