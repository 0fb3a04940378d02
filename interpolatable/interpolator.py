"""
Interpolator: lerp plus easing, bound to one lerp form.
"""

from typing import Optional, Union

from . import config
from .easing import EasingName, ease_in_out_sine, ease_in_sine, ease_out_sine, get_easing
from .lerp import LERP_KERNELS, prepare_operands
from .types.lerp_mode import LerpMode
from .types.real_types import EasingFunction, Real


class Interpolator:
    """
    Stateless set of interpolation operations sharing one lerp form.

    The form is picked when the interpolator is constructed; every eased
    operation remaps ``t`` and then delegates to that same lerp kernel.
    Each public method calls prepare_operands directly so that warnings are
    reported against the caller.
    """
    __slots__ = ("_mode", "_kernel")

    def __init__(self, mode: Optional[Union[LerpMode, str]] = None):
        self._mode = LerpMode.resolve(config.LERP_MODE if mode is None else mode)
        self._kernel = LERP_KERNELS[self._mode]

    @property
    def mode(self) -> LerpMode:
        return self._mode

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mode={self._mode.value!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Interpolator):
            return NotImplemented
        return self._mode is other._mode

    def __hash__(self) -> int:
        return hash((type(self), self._mode))

    def lerp(self, start: Real, end: Real, t: Real) -> Real:
        return self._kernel(*prepare_operands(start, end, t, stacklevel=3))

    def interpolate_custom(self, start: Real, end: Real, t: Real, easing_fn: EasingFunction) -> Real:
        """Remap ``t`` through ``easing_fn`` (not validated) and lerp."""
        return self._kernel(*prepare_operands(start, end, easing_fn(t), stacklevel=3))

    def interpolate_ease_in_sine(self, start: Real, end: Real, t: Real) -> Real:
        return self._kernel(*prepare_operands(start, end, ease_in_sine(t), stacklevel=3))

    def interpolate_ease_out_sine(self, start: Real, end: Real, t: Real) -> Real:
        return self._kernel(*prepare_operands(start, end, ease_out_sine(t), stacklevel=3))

    def interpolate_ease_in_out_sine(self, start: Real, end: Real, t: Real) -> Real:
        return self._kernel(*prepare_operands(start, end, ease_in_out_sine(t), stacklevel=3))

    def interpolate(
        self,
        start: Real,
        end: Real,
        t: Real,
        easing: Union[EasingName, str, EasingFunction],
    ) -> Real:
        """
        Interpolate with an easing given by name or as a callable.

        Args:
            start: Value at ``t == 0``
            end: Value at ``t == 1``
            t: Interpolation parameter
            easing: EasingName, easing name string, or easing function

        Returns:
            Interpolated value

        Raises:
            ValueError: If ``easing`` is a name that does not match any easing
        """
        func = easing if callable(easing) else get_easing(easing)
        return self._kernel(*prepare_operands(start, end, func(t), stacklevel=3))


def make_interpolator(mode: Optional[Union[LerpMode, str]] = None) -> Interpolator:
    """Create an interpolator for ``mode``, defaulting to the configured LERP_MODE."""
    return Interpolator(mode)


__all__ = [
    "Interpolator",
    "make_interpolator",
]
