"""Email Validator"""

import re
from typing import Tuple, Optional
from vali.validators.base import BaseValidator, is_string


class EmailValidator(BaseValidator):
    """Validates email addresses."""

    EMAIL_PATTERN = re.compile(
        r'(([^<>()\[\]\\.,;:\s\ufeff@"]+(\.[^<>()\[\]\\.,;:\s\ufeff@"]+)*)|("[^\n\r\u2028\u2029]+"))'
        r'@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])'
        r'|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))'
    )

    def validate(self, value, *args, **kwargs) -> Tuple[bool, Optional[str]]:
        if not is_string(value):
            return False, "Please provide a valid email address."

        if not self.EMAIL_PATTERN.fullmatch(value):
            return False, "That doesn't look like a valid email address."

        return True, None
