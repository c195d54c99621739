"""Date String Validator"""

import calendar
import re
from typing import Tuple, Optional

from vali.config.constants import DATE_MIN_YEAR
from vali.validators.base import BaseValidator, is_string


def _is_leap(year_text: str) -> bool:
    year = int(year_text)
    if len(year_text) == 2:
        # "00" is never treated as a leap year without its century
        return year != 0 and year % 4 == 0
    return calendar.isleap(year)


class DateValidator(BaseValidator):
    """Validates DD/MM/YYYY, DD-MM-YYYY and DD.MM.YYYY date strings."""

    DATE_PATTERN = re.compile(
        r'(?P<day>0?[1-9]|[12][0-9]|3[01])(?P<sep>[/.-])'
        r'(?P<month>0?[1-9]|1[0-2])(?P=sep)'
        r'(?P<year>[0-9]{4}|[0-9]{2})'
    )

    def validate(self, value, *args, **kwargs) -> Tuple[bool, Optional[str]]:
        if not is_string(value):
            return False, "Please provide a date."

        match = self.DATE_PATTERN.fullmatch(value)
        if not match:
            return False, "Dates must look like DD/MM/YYYY."

        year_text = match.group("year")
        if len(year_text) == 4 and int(year_text) < DATE_MIN_YEAR:
            return False, f"Year must be {DATE_MIN_YEAR} or later."

        day = int(match.group("day"))
        month = int(match.group("month"))
        if month == 2:
            days_in_month = 29 if _is_leap(year_text) else 28
        else:
            # 2001 is any non-leap year; February is handled above
            days_in_month = calendar.monthrange(2001, month)[1]

        if day > days_in_month:
            return False, "That date doesn't exist."

        return True, None
