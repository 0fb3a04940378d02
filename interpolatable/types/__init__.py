from .lerp_mode import LerpMode
from .real_types import Real, EasingFunction, resolve_dtype

__all__ = [
    "LerpMode",
    "Real",
    "EasingFunction",
    "resolve_dtype",
]
