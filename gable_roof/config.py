"""
Configuration defaults and slider ranges.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .model import InputParams


@dataclass
class AppConfig:
    """Default parameters and the ranges the slider layer allows."""

    # Metadata
    app_name: str = "Kerti tető"
    app_subtitle: str = "Nyeregtetős kerti tető tervező"

    # Slider ranges (min, max)
    width_range: Tuple[float, float] = (2.0, 8.0)
    length_range: Tuple[float, float] = (2.0, 20.0)
    pitch_range: Tuple[float, float] = (10.0, 45.0)
    eaves_overhang_range: Tuple[float, float] = (0.0, 1.0)
    gable_overhang_range: Tuple[float, float] = (0.0, 1.0)

    # Default values
    default_width: float = 3.0
    default_length: float = 4.0
    default_pitch: float = 25.0
    default_eaves_overhang: float = 0.5
    default_gable_overhang: float = 0.3

    def default_params(self) -> InputParams:
        return InputParams(
            width=self.default_width,
            length=self.default_length,
            pitch=self.default_pitch,
            eaves_overhang=self.default_eaves_overhang,
            gable_overhang=self.default_gable_overhang,
        )

    def clamp(self, params: InputParams) -> InputParams:
        """Clamp raw slider values into the configured ranges."""
        def _clip(value: float, bounds: Tuple[float, float]) -> float:
            return float(np.clip(value, bounds[0], bounds[1]))

        return InputParams(
            width=_clip(params.width, self.width_range),
            length=_clip(params.length, self.length_range),
            pitch=_clip(params.pitch, self.pitch_range),
            eaves_overhang=_clip(params.eaves_overhang, self.eaves_overhang_range),
            gable_overhang=_clip(params.gable_overhang, self.gable_overhang_range),
        )


# Global config instance
CONFIG = AppConfig()
