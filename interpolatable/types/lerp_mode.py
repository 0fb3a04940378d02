# No dependencies
from enum import Enum
from typing import Union


class LerpMode(str, Enum):
    """
    Formula used by ``lerp``.

    PRECISE:   ``(1 - t) * start + t * end``, exact at both endpoints,
               monotonic only when ``start * end < 0``.
    MONOTONIC: ``start + (end - start) * t``, monotonic in ``t``, may miss
               ``end`` by a rounding step at ``t == 1``.
    """
    PRECISE = "precise"
    MONOTONIC = "monotonic"

    @classmethod
    def resolve(cls, mode: Union["LerpMode", str]) -> "LerpMode":
        """Convert a mode name (any case) to a LerpMode."""
        if isinstance(mode, cls):
            return mode
        if isinstance(mode, str):
            key = mode.strip().lower()
            for member in cls:
                if key == member.value:
                    return member
        valid = ", ".join(repr(m.value) for m in cls)
        raise ValueError(f"Invalid lerp mode: {mode!r}. Expected one of {valid}")
