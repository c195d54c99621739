"""
Library settings loaded from environment variables.

All settings have sensible defaults so the library works out of the box.
"""

import os

# =============================================================================
# Logging
# =============================================================================
LOG_LEVEL = os.getenv("VALI_LOG_LEVEL", "WARNING").upper()
