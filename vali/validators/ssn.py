"""Social Security Number Validator"""

import re
from typing import Tuple, Optional

from vali.config.constants import RESERVED_SSNS, RESERVED_SSNS_DASHED
from vali.validators.base import BaseValidator, is_number, is_string


def _excluding(values) -> str:
    return "|".join(re.escape(v) for v in values)


class SSNValidator(BaseValidator):
    """Validates U.S. Social Security numbers, dashed or as 9 digits."""

    SSN_PATTERN = re.compile(
        rf'(?!{_excluding(RESERVED_SSNS)})'
        r'(?!666|000|9\d{2})\d{3}(?!00)\d{2}(?!0{4})\d{4}',
        re.ASCII,
    )
    SSN_DASHED_PATTERN = re.compile(
        r'(?!\b(\d)\1+-(\d)\1+-(\d)\1+\b)'
        rf'(?!{_excluding(RESERVED_SSNS_DASHED)})'
        r'(?!666|000|9\d{2})\d{3}-(?!00)\d{2}-(?!0{4})\d{4}',
        re.ASCII,
    )

    def validate(self, value, *args, **kwargs) -> Tuple[bool, Optional[str]]:
        if isinstance(value, float) or not (is_number(value) or is_string(value)):
            return False, "Please provide a Social Security number."

        text = str(value)
        if not (self.SSN_PATTERN.fullmatch(text) or self.SSN_DASHED_PATTERN.fullmatch(text)):
            return False, "That doesn't look like a valid Social Security number."

        return True, None
