"""
Validator Registry - Holds named predicates.

Built-in validators are installed at construction. Callers can add or
replace entries at runtime; every entry is reachable by name through
get()/invoke() and as an attribute of the registry.
"""

import logging
import threading
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, Field

from vali.validators import builtin_validators

logger = logging.getLogger(__name__)

Predicate = Callable[..., bool]


class ValidatorInfo(BaseModel):
    """Summary info about a registered validator."""
    name: str
    aliases: List[str] = Field(default_factory=list, description="Other names bound to the same predicate")
    builtin: bool = False
    description: str = ""


def _describe(predicate: Predicate) -> str:
    lines = (getattr(predicate, "__doc__", None) or "").strip().splitlines()
    return lines[0].strip() if lines else ""


class ValidatorRegistry:
    """
    Maps validator names to predicates.

    Reads are plain dictionary lookups. Writes (register/unregister) are
    serialized with a lock so registrations from several threads don't
    interleave.
    """

    def __init__(self, builtins: Optional[Dict[str, Predicate]] = None):
        if builtins is None:
            builtins = builtin_validators()

        self._validators: Dict[str, Predicate] = dict(builtins)
        self._builtins = dict(self._validators)
        self._lock = threading.RLock()

        logger.debug(f"Validator registry initialized with {len(self._validators)} entries")

    def register(self, name: str, predicate: Predicate) -> bool:
        """
        Add or replace a named validator.

        Returns True if the validator was installed. Returns False, without
        touching the registry, if name is not a non-empty string or
        predicate is not callable.
        """
        if not name or not isinstance(name, str):
            logger.warning(f"Refusing to register validator with invalid name {name!r}")
            return False

        if not callable(predicate):
            logger.warning(f"Refusing to register validator '{name}': {type(predicate).__name__} is not callable")
            return False

        with self._lock:
            if name in self._validators:
                logger.info(f"Replacing validator '{name}'")
            self._validators[name] = predicate

        logger.debug(f"Registered validator '{name}'")
        return True

    # Public name of register() in the library API
    validator = register

    def unregister(self, name: str) -> bool:
        """Remove a validator. Returns False if the name was not registered."""
        with self._lock:
            if self._validators.pop(name, None) is None:
                return False
        logger.info(f"Removed validator '{name}'")
        return True

    def get(self, name: str) -> Optional[Predicate]:
        """Get a validator by name. Returns None if not found."""
        return self._validators.get(name)

    def invoke(self, name: str, *args, **kwargs) -> Any:
        """Run a validator by name. Raises KeyError for unknown names."""
        predicate = self._validators.get(name)
        if predicate is None:
            raise KeyError(f"Unknown validator: '{name}'")
        return predicate(*args, **kwargs)

    def names(self) -> List[str]:
        """All registered names, sorted."""
        return sorted(self._validators)

    def describe(self) -> List[ValidatorInfo]:
        """Describe every registered name, including which names are aliases."""
        entries = dict(self._validators)
        infos = []
        for name in sorted(entries):
            predicate = entries[name]
            aliases = [
                other for other in sorted(entries)
                if other != name and entries[other] is predicate
            ]
            infos.append(ValidatorInfo(
                name=name,
                aliases=aliases,
                builtin=self._builtins.get(name) is predicate,
                description=_describe(predicate),
            ))
        return infos

    def __contains__(self, name: object) -> bool:
        return name in self._validators

    def __len__(self) -> int:
        return len(self._validators)

    def __getattr__(self, name: str) -> Predicate:
        # Only reached when normal attribute lookup fails
        if name.startswith("_"):
            raise AttributeError(name)
        predicate = self._validators.get(name)
        if predicate is None:
            raise AttributeError(f"{type(self).__name__} has no validator '{name}'")
        return predicate

    def __repr__(self) -> str:
        return f"ValidatorRegistry({self.names()})"
