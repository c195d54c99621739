"""Coordinate Validator"""

import math
import re
from decimal import Decimal
from typing import Tuple, Optional
from vali.validators.base import BaseValidator, is_number


def _plain_text(value) -> Optional[str]:
    """Render a number positionally (no exponent). None for NaN/infinity."""
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        value = Decimal(repr(value))
    if not value.is_finite():
        return None
    return format(value, "f")


class CoordinateValidator(BaseValidator):
    """
    Validates a latitude/longitude point given as a number.

    Accepted magnitudes are 0-89, 100-189 and 190, with an optional sign and
    fraction. 90-99 and zero are rejected; callers depend on both.
    """

    COORDINATE_PATTERN = re.compile(
        r'-?([0-8]?[0-9]|1[0-8][0-9]|190)(\.[0-9]+)?'
    )

    def validate(self, value, *args, **kwargs) -> Tuple[bool, Optional[str]]:
        if not is_number(value):
            return False, "Please provide the coordinate as a number."

        text = _plain_text(value)
        if text is None or not self.COORDINATE_PATTERN.fullmatch(text):
            return False, "Coordinate is out of range."

        return True, None
