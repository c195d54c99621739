"""U.S. Postal Code Validator"""

import re
from typing import Tuple, Optional
from vali.validators.base import BaseValidator


class PostalCodeValidator(BaseValidator):
    """Validates U.S. zip codes, plain or ZIP+4."""

    ZIP_PATTERN = re.compile(r'\d{5}(-\d{4})?', re.ASCII)

    def validate(self, value, *args, **kwargs) -> Tuple[bool, Optional[str]]:
        if isinstance(value, bool) or not isinstance(value, (int, str)) or not value:
            return False, "Please provide a zip code."

        if not self.ZIP_PATTERN.fullmatch(str(value)):
            return False, "Zip codes are 5 digits, optionally followed by a dash and 4 digits."

        return True, None
