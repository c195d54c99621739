"""Username Validator"""

import re
from typing import Tuple, Optional
from vali.validators.base import BaseValidator


class UsernameValidator(BaseValidator):
    """Validates usernames. Only letters, numbers and underscores."""

    USERNAME_PATTERN = re.compile(r'[a-zA-Z0-9_]+')

    def validate(self, value, *args, **kwargs) -> Tuple[bool, Optional[str]]:
        if not isinstance(value, str):
            return False, "Please provide a username."

        if not self.USERNAME_PATTERN.fullmatch(value):
            return False, "Usernames can only contain letters, numbers and underscores."

        return True, None
