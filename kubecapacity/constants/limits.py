"""Limit and threshold constants.

All validation ranges for settings.
"""

from typing import Final

# ============================================================================
# Validation limits
# ============================================================================

THRESHOLD_MIN: Final = 0.0
THRESHOLD_MAX: Final = 100.0

__all__ = [
    "THRESHOLD_MAX",
    "THRESHOLD_MIN",
]
