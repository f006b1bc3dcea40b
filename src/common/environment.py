"""
Read-only view over process environment variables.

Handlers never touch os.environ directly; they receive an Environment
so tests can substitute a fixed mapping.
"""

import os
from collections.abc import Mapping
from typing import Optional


class Environment:
    """Read-only key/value access to environment variables."""

    def __init__(self, values: Optional[Mapping] = None):
        # os.environ is read live; injected mappings are copied
        self._values = os.environ if values is None else dict(values)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the raw value, or default when the variable is unset."""
        value = self._values.get(name)
        return default if value is None else value

    def has_value(self, name: str) -> bool:
        """True iff the variable is set to a non-empty string."""
        value = self._values.get(name)
        return isinstance(value, str) and value != ""

    def get_or_missing(self, name: str) -> str:
        """Return the value, or the literal "missing" when unset or empty."""
        return self._values.get(name) or "missing"

    def set_or_missing(self, name: str) -> str:
        """Return "SET" or "MISSING" without exposing the value."""
        return "SET" if self.has_value(name) else "MISSING"

    def __contains__(self, name: str) -> bool:
        return name in self._values


def get_environment() -> Environment:
    """Environment backed by the live process environment."""
    return Environment()
