"""
Sine easing functions.

Each curve maps the interpolation parameter ``t`` to a remapped parameter with
``f(0) == 0`` and ``f(1) == 1``. Inputs outside ``[0, 1]`` are not clamped; the
formulas simply extrapolate. All curves are evaluated in float32.
"""

from enum import Enum
from typing import Dict, Union

import numpy as np

from .types.real_types import EasingFunction, Real

_PI = np.float32(np.pi)
_ONE = np.float32(1.0)
_TWO = np.float32(2.0)


def _as_f32(t: Real) -> np.ndarray:
    return np.asarray(t, dtype=np.float32)


def ease_in_sine(t: Real) -> Real:
    """Slow start, accelerating: ``1 - cos(t * pi / 2)``."""
    return (_ONE - np.cos(_as_f32(t) * _PI / _TWO))[()]


def ease_out_sine(t: Real) -> Real:
    """Fast start, decelerating: ``sin(t * pi / 2)``."""
    return np.sin(_as_f32(t) * _PI / _TWO)[()]


def ease_in_out_sine(t: Real) -> Real:
    """Slow at both ends: ``-(cos(pi * t) - 1) / 2``."""
    return (-(np.cos(_PI * _as_f32(t)) - _ONE) / _TWO)[()]


class EasingName(str, Enum):
    EASE_IN_SINE = "ease-in-sine"
    EASE_OUT_SINE = "ease-out-sine"
    EASE_IN_OUT_SINE = "ease-in-out-sine"


EASING_FUNCTIONS: Dict[EasingName, EasingFunction] = {
    EasingName.EASE_IN_SINE: ease_in_sine,
    EasingName.EASE_OUT_SINE: ease_out_sine,
    EasingName.EASE_IN_OUT_SINE: ease_in_out_sine,
}

_SHORT_NAMES = {
    "in": EasingName.EASE_IN_SINE,
    "out": EasingName.EASE_OUT_SINE,
    "in-out": EasingName.EASE_IN_OUT_SINE,
}


def _normalize_name(name: str) -> str:
    return "-".join(name.strip().lower().replace("_", " ").replace("-", " ").split())


def get_easing(name: Union[EasingName, str]) -> EasingFunction:
    """
    Look up an easing function by name.

    Args:
        name: An EasingName, or a string such as ``"ease-in-sine"``,
            ``"EASE_IN_SINE"``, ``"ease in sine"`` or the short form ``"in"``

    Returns:
        The easing function

    Raises:
        ValueError: If the name does not match any easing
    """
    if isinstance(name, EasingName):
        return EASING_FUNCTIONS[name]
    if isinstance(name, str):
        key = _normalize_name(name)
        if key in _SHORT_NAMES:
            return EASING_FUNCTIONS[_SHORT_NAMES[key]]
        for easing_name, func in EASING_FUNCTIONS.items():
            if key == easing_name.value:
                return func
    valid = ", ".join(repr(n.value) for n in EasingName)
    raise ValueError(f"Invalid easing: {name!r}. Expected one of {valid}")


__all__ = [
    "ease_in_sine",
    "ease_out_sine",
    "ease_in_out_sine",
    "EasingName",
    "EASING_FUNCTIONS",
    "get_easing",
]
