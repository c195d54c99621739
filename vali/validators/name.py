"""Name Validator"""

import re
from typing import Tuple, Optional
from vali.validators.base import BaseValidator, is_string


class NameValidator(BaseValidator):
    """Validates person names. Letters, dashes, apostrophes and spaces."""

    NAME_PATTERN = re.compile(r"[a-zA-Z\-' ]*")

    def validate(self, value, *args, **kwargs) -> Tuple[bool, Optional[str]]:
        if not is_string(value):
            return False, "Please provide your name."

        if not self.NAME_PATTERN.fullmatch(value):
            return False, "Name contains invalid characters. Please provide just your name."

        return True, None
