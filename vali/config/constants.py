"""
Shared constants used across the validators.

Centralizes magic numbers and reserved values.
"""

# Minimum age check accepts people this many months short of the age
MIN_AGE_GRACE_MONTHS = 1

# SSNs published in sample/promotional material
RESERVED_SSNS = ("219099999", "078051120")
RESERVED_SSNS_DASHED = ("123-45-6789", "219-09-9999", "078-05-1120")

# Four-digit years below this are not accepted as dates
DATE_MIN_YEAR = 1600
