"""
csvpack.utils

Lightweight helpers shared across csvpack.

This package aggregates:

    - temp:   temporary-directory utilities
    - paths:  deterministic file-name builders and sandbox resolution

All public symbols from these modules are re-exported for convenience.
"""

from . import temp
from . import paths

# Re-export all public symbols from the submodules
from .temp import *   # noqa: F401,F403
from .paths import *  # noqa: F401,F403

__all__ = (
    temp.__all__
    + paths.__all__
)
