"""Settings and shared constants."""

from vali.config.settings import LOG_LEVEL
from vali.config.constants import (
    MIN_AGE_GRACE_MONTHS,
    RESERVED_SSNS,
    RESERVED_SSNS_DASHED,
    DATE_MIN_YEAR,
)

__all__ = [
    # Settings
    "LOG_LEVEL",
    # Constants
    "MIN_AGE_GRACE_MONTHS",
    "RESERVED_SSNS",
    "RESERVED_SSNS_DASHED",
    "DATE_MIN_YEAR",
]
