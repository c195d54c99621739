"""
vali - Field Validation Library

A registry of named predicates for common field formats (email, minimum
age, username, personal name, U.S. zip code, coordinate, SSN, date) that
callers can extend at runtime.

    import vali

    vali.email("foo.bar-5@qux.com")        # True
    vali.zip(12345)                        # True
    vali.validator("alpha", lambda v: isinstance(v, str) and v.isalpha())
    vali.alpha("abc")                      # True

Every registered name is also reachable as an attribute of the module, so
names added with validator() resolve the same way as the built-ins.
"""

import logging

from vali.config.settings import LOG_LEVEL
from vali.validator_registry import ValidatorRegistry, ValidatorInfo, Predicate
from vali.validators import BaseValidator, BUILTIN_ALIASES

_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())
_logger.setLevel(LOG_LEVEL)

# Process-wide registry, created once at import and shared by every caller
registry = ValidatorRegistry()

# Python spellings of the camelCase built-in names
_PYTHON_NAMES = {
    "min_age": "minAge",
    "postal_code": "postalCode",
}


def get_validator(name: str):
    """Get a validator by name. Returns None if not found."""
    return registry.get(name)


def register_validator(name: str, predicate: Predicate) -> bool:
    """Register a custom validator on the shared registry."""
    return registry.register(name, predicate)


validator = register_validator


def __getattr__(name: str):
    predicate = registry.get(_PYTHON_NAMES.get(name, name))
    if predicate is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return predicate


def __dir__():
    return sorted(set(globals()) | set(registry.names()) | set(_PYTHON_NAMES))


__all__ = [
    "registry",
    "ValidatorRegistry",
    "ValidatorInfo",
    "BaseValidator",
    "BUILTIN_ALIASES",
    "get_validator",
    "register_validator",
    "validator",
    # Built-ins, resolved through the registry
    "email",
    "minAge",
    "min_age",
    "username",
    "name",
    "zip",
    "postalCode",
    "postal_code",
    "coordinate",
    "coord",
    "ssn",
    "date",
]
