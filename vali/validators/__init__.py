"""
Field Validators

Provides validation for common field types. Each built-in is installed
under its name and, for some, under an alias bound to the same instance.
"""

from typing import Dict

from vali.validators.base import BaseValidator, is_number, is_string
from vali.validators.email import EmailValidator
from vali.validators.age import MinAgeValidator
from vali.validators.username import UsernameValidator
from vali.validators.name import NameValidator
from vali.validators.postal import PostalCodeValidator
from vali.validators.coordinate import CoordinateValidator
from vali.validators.ssn import SSNValidator
from vali.validators.date import DateValidator

# Aliases share the instance of the name they point to
BUILTIN_ALIASES = {
    "postalCode": "zip",
    "coord": "coordinate",
}


def builtin_validators() -> Dict[str, BaseValidator]:
    """Fresh table of built-in validators, aliases included."""
    validators: Dict[str, BaseValidator] = {
        "email": EmailValidator(),
        "minAge": MinAgeValidator(),
        "username": UsernameValidator(),
        "name": NameValidator(),
        "zip": PostalCodeValidator(),
        "coordinate": CoordinateValidator(),
        "ssn": SSNValidator(),
        "date": DateValidator(),
    }
    for alias, target in BUILTIN_ALIASES.items():
        validators[alias] = validators[target]
    return validators


__all__ = [
    "BaseValidator",
    "is_number",
    "is_string",
    "EmailValidator",
    "MinAgeValidator",
    "UsernameValidator",
    "NameValidator",
    "PostalCodeValidator",
    "CoordinateValidator",
    "SSNValidator",
    "DateValidator",
    "BUILTIN_ALIASES",
    "builtin_validators",
]
