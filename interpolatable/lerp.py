# ===================== lerp.py =====================
"""
Linear interpolation in two numerically distinct forms.

Neither form validates its inputs: ``t`` outside ``[0, 1]`` extrapolates and
NaN/Inf propagate through the arithmetic as usual.
"""

from typing import Callable, Dict, Tuple, Union

import numpy as np

from .types.lerp_mode import LerpMode
from .types.real_types import Real, resolve_dtype

LerpFunction = Callable[[Real, Real, Real], Real]
LerpKernel = Callable[[np.ndarray, np.ndarray, np.ndarray], Real]


# =============================================================================
# Operand Preparation
# =============================================================================
def prepare_operands(
    start: Real,
    end: Real,
    t: Real,
    stacklevel: int = 2,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Cast endpoints to their shared precision and ``t`` through float32 into it.

    ``stacklevel`` counts from prepare_operands as for warnings.warn; public
    entry points pass the depth that lands on their own caller.
    """
    dtype = resolve_dtype(start, end, stacklevel=stacklevel + 1)
    a = np.asarray(start, dtype=dtype)
    b = np.asarray(end, dtype=dtype)
    u = np.asarray(t, dtype=np.float32).astype(dtype)
    return a, b, u


# =============================================================================
# Kernels
# =============================================================================
def _precise_kernel(a: np.ndarray, b: np.ndarray, u: np.ndarray) -> Real:
    one = a.dtype.type(1.0)
    return ((one - u) * a + u * b)[()]


def _monotonic_kernel(a: np.ndarray, b: np.ndarray, u: np.ndarray) -> Real:
    return (a + (b - a) * u)[()]


LERP_KERNELS: Dict[LerpMode, LerpKernel] = {
    LerpMode.PRECISE: _precise_kernel,
    LerpMode.MONOTONIC: _monotonic_kernel,
}


# =============================================================================
# Lerp Forms
# =============================================================================
def lerp_precise(start: Real, end: Real, t: Real) -> Real:
    """
    Weighted-sum lerp: ``(1 - t) * start + t * end``.

    Guarantees ``start`` exactly at ``t == 0`` and ``end`` exactly at ``t == 1``.
    Monotonic in ``t`` only when ``start * end < 0``. Lerping between equal
    endpoints is not guaranteed to reproduce the same value for every ``t``.

    Args:
        start: Value at ``t == 0``
        end: Value at ``t == 1``
        t: Interpolation parameter, rounded to float32

    Returns:
        Interpolated value in the endpoints' precision
    """
    return _precise_kernel(*prepare_operands(start, end, t, stacklevel=3))


def lerp_monotonic(start: Real, end: Real, t: Real) -> Real:
    """
    Additive lerp: ``start + (end - start) * t``.

    Monotonic in ``t``, but ``t == 1`` may not land exactly on ``end`` because
    of rounding in the subtraction and addition. Preferred where a fused
    multiply-add is available.

    Args:
        start: Value at ``t == 0``
        end: Value at ``t == 1``
        t: Interpolation parameter, rounded to float32

    Returns:
        Interpolated value in the endpoints' precision
    """
    return _monotonic_kernel(*prepare_operands(start, end, t, stacklevel=3))


_LERP_FUNCTIONS: Dict[LerpMode, LerpFunction] = {
    LerpMode.PRECISE: lerp_precise,
    LerpMode.MONOTONIC: lerp_monotonic,
}


def lerp_for_mode(mode: Union[LerpMode, str]) -> LerpFunction:
    """Return the lerp form for a mode."""
    return _LERP_FUNCTIONS[LerpMode.resolve(mode)]


__all__ = [
    "LerpFunction",
    "LerpKernel",
    "LERP_KERNELS",
    "prepare_operands",
    "lerp_precise",
    "lerp_monotonic",
    "lerp_for_mode",
]
