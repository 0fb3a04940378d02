"""
Interpolatable - Scalar Interpolation and Easing
================================================

Linear interpolation over floating-point values with sine easing curves.

Key Features
------------
- Works on float32 and float64 (numpy scalars, Python floats, float arrays)
- Two lerp forms: PRECISE (exact endpoints) and MONOTONIC (monotonic in t)
- Build-time selection of the lerp form through ``interpolatable.config``
- Sine easings: ease-in, ease-out, ease-in-out
- Custom easing callables

Quick Start
-----------
>>> import numpy as np
>>> from interpolatable import lerp, interpolate_ease_out_sine, interpolate
>>>
>>> lerp(0.0, 10.0, 0.5)
np.float64(5.0)
>>> # Precision follows the endpoints
>>> lerp(np.float32(1.0), np.float32(2.0), 0.25)
np.float32(1.25)
>>> # Eased interpolation, by function or by name
>>> value = interpolate_ease_out_sine(0.0, 100.0, 0.5)
>>> value = interpolate(0.0, 100.0, 0.5, "ease-in-out-sine")

Modules
-------
- easing: Easing functions and name lookup
- lerp: The two lerp forms
- interpolator: Interpolator bound to one lerp form
- config: Build-time lerp form selection
"""

from .config import LERP_MODE
from .types import LerpMode, Real, EasingFunction
from .easing import (
    ease_in_sine,
    ease_out_sine,
    ease_in_out_sine,
    EasingName,
    EASING_FUNCTIONS,
    get_easing,
)
from .lerp import lerp_precise, lerp_monotonic, lerp_for_mode
from .interpolator import Interpolator, make_interpolator

__version__ = "0.1.0"

default_interpolator = make_interpolator(LERP_MODE)

lerp = default_interpolator.lerp
interpolate_custom = default_interpolator.interpolate_custom
interpolate_ease_in_sine = default_interpolator.interpolate_ease_in_sine
interpolate_ease_out_sine = default_interpolator.interpolate_ease_out_sine
interpolate_ease_in_out_sine = default_interpolator.interpolate_ease_in_out_sine
interpolate = default_interpolator.interpolate

__all__ = [
    # Interpolation
    "lerp",
    "interpolate_custom",
    "interpolate_ease_in_sine",
    "interpolate_ease_out_sine",
    "interpolate_ease_in_out_sine",
    "interpolate",

    # Easing
    "ease_in_sine",
    "ease_out_sine",
    "ease_in_out_sine",
    "EasingName",
    "EASING_FUNCTIONS",
    "get_easing",

    # Lerp forms
    "lerp_precise",
    "lerp_monotonic",
    "lerp_for_mode",
    "LerpMode",
    "LERP_MODE",

    # Interpolator
    "Interpolator",
    "make_interpolator",
    "default_interpolator",

    # Types
    "Real",
    "EasingFunction",

    # Version
    "__version__",
]
