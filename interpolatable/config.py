"""
Build configuration.

``LERP_MODE`` selects the formula every package-level ``lerp`` call uses. It is
read once when ``interpolatable`` is imported and is meant to be set before the
package is built, not changed at runtime. Use ``make_interpolator`` to work with
the other formula alongside the configured one.
"""
from .types.lerp_mode import LerpMode

LERP_MODE: LerpMode = LerpMode.PRECISE
