"""Default values for settings.

All default values used in AccountingSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# Threshold defaults
# ============================================================================

WARNING_THRESHOLD_DEFAULT: Final = 75.0
CRITICAL_THRESHOLD_DEFAULT: Final = 85.0

# ============================================================================
# Snapshot defaults
# ============================================================================

EXCLUDE_TERMINATED_PODS_DEFAULT: Final = False

__all__ = [
    "CRITICAL_THRESHOLD_DEFAULT",
    "EXCLUDE_TERMINATED_PODS_DEFAULT",
    "WARNING_THRESHOLD_DEFAULT",
]
