"""
Base Validator

Abstract base class for all field validators, plus the type checks the
built-ins share.
"""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Tuple, Optional

logger = logging.getLogger(__name__)


def is_string(value) -> bool:
    """True for a non-empty str."""
    return isinstance(value, str) and bool(value)


def is_number(value) -> bool:
    """True for a non-zero int, float or Decimal. Booleans are not numbers."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float, Decimal)) and bool(value)


class BaseValidator(ABC):
    """
    Abstract base class for field validators.

    All validators must implement the validate() method which returns
    a (is_valid, error_message) tuple. Calling the validator instance
    returns only the boolean, which makes every built-in usable as a plain
    predicate.
    """

    @abstractmethod
    def validate(self, value, *args, **kwargs) -> Tuple[bool, Optional[str]]:
        """
        Validate a field value.

        Args:
            value: The value to validate
            *args, **kwargs: Extra arguments for validators that need them
                (e.g. the minimum age)

        Returns:
            Tuple of (is_valid: bool, error_message: Optional[str])
            If valid, error_message is None.
        """
        pass

    def __call__(self, value=None, *args, **kwargs) -> bool:
        try:
            valid, _ = self.validate(value, *args, **kwargs)
        except (TypeError, ValueError, OverflowError) as e:
            logger.debug(f"{type(self).__name__} rejected {value!r}: {e}")
            return False
        return valid

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
