"""
Minimum Age Validator

Checks that a birth date is old enough. The cutoff is pulled forward by a
grace period: anyone at least min_age years minus MIN_AGE_GRACE_MONTHS old
passes.
"""

from datetime import date, datetime, time, timedelta
from typing import Tuple, Optional

from vali.config.constants import MIN_AGE_GRACE_MONTHS
from vali.validators.base import BaseValidator, is_number


def _rolled_date(year: int, month: int, day: int) -> date:
    """Build a date, rolling month and day overflow into the following units.

    _rolled_date(2014, 2, 31) is 3 March 2014 and _rolled_date(2014, 0, 5)
    is 5 December 2013.
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return date(year, month, 1) + timedelta(days=day - 1)


def reference_date(birth_date: date, min_age: int) -> date:
    """The date on which someone born on birth_date passes the age check."""
    anniversary = _rolled_date(birth_date.year + min_age, birth_date.month, birth_date.day)
    return _rolled_date(
        anniversary.year,
        birth_date.month - MIN_AGE_GRACE_MONTHS,
        anniversary.day,
    )


class MinAgeValidator(BaseValidator):
    """Validates that a birth date is at least a minimum age in the past."""

    def validate(
        self,
        value,
        min_age=None,
        *args,
        now: Optional[datetime] = None,
        **kwargs,
    ) -> Tuple[bool, Optional[str]]:
        """
        Args:
            value: Birth date (date or datetime; time of day is ignored)
            min_age: Minimum age in years; fractions are truncated
            now: Moment to evaluate against. Defaults to datetime.now()
        """
        if not (value and min_age):
            return False, "Please provide a birth date and a minimum age."

        if not isinstance(value, date):
            return False, "Birth date must be a date."

        if not is_number(min_age):
            return False, "Minimum age must be a number."

        if isinstance(value, datetime):
            value = value.date()

        cutoff = datetime.combine(reference_date(value, int(min_age)), time())
        if now is None:
            now = datetime.now()

        if cutoff > now:
            return False, f"You must be at least {int(min_age)} years old."

        return True, None
