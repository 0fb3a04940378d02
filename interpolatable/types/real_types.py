import warnings
from typing import Callable, TypeAlias, Union

import numpy as np
from numpy.typing import NDArray

Real: TypeAlias = Union[float, np.floating, NDArray[np.floating]]
EasingFunction = Callable[[Real], Real]

_NUMERIC_KINDS = "biuf"


def _is_weak(value) -> bool:
    # np.float64 subclasses float, so numpy scalars must be excluded explicitly
    return isinstance(value, (int, float)) and not isinstance(value, np.generic)


def resolve_dtype(start, end, stacklevel: int = 2) -> np.dtype:
    """
    Pick the floating-point representation shared by two interpolation endpoints.

    Plain Python numbers adopt the precision of the numpy operand. Two Python
    numbers, or integer data, resolve to float64. Differing float dtypes are
    promoted to the wider one with a RuntimeWarning.

    Args:
        start: Start value (Python number, numpy scalar or array)
        end: End value
        stacklevel: Passed to warnings.warn for the mixed-precision warning;
            2 reports it against the caller of resolve_dtype

    Returns:
        The numpy floating dtype the result is computed in

    Raises:
        TypeError: If either value is not numeric
    """
    dtypes = []
    for value in (start, end):
        if _is_weak(value):
            continue
        dtype = np.asarray(value).dtype
        if dtype.kind not in _NUMERIC_KINDS:
            raise TypeError(
                f"Expected a real floating-point value, got {type(value).__name__} ({dtype})"
            )
        dtypes.append(dtype)

    floats = [d for d in dtypes if d.kind == "f"]
    if not floats:
        return np.dtype(np.float64)

    dtype = np.result_type(*floats)
    if len(set(floats)) > 1:
        warnings.warn(
            f"Mixed precision endpoints ({floats[0]} and {floats[1]}), promoting to {dtype}",
            RuntimeWarning,
            stacklevel=stacklevel,
        )
    return dtype
