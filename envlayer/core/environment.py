"""Deployment stage names and environment-name resolution."""

from __future__ import annotations

import os
from enum import Enum
from typing import Mapping, Optional

ENVIRONMENT_VARIABLES = ("ENVLAYER_ENVIRONMENT", "APP_ENVIRONMENT")


class DeployEnvironment(Enum):
    """Known deployment stages.

    Input names are matched case-insensitively; anything else maps to
    ``None`` via :meth:`from_name`.
    """

    PRODUCTION = "Production"
    STAGING = "Staging"
    DEVELOPMENT = "Development"

    @classmethod
    def from_name(cls, name: Optional[str]) -> Optional["DeployEnvironment"]:
        """Look up a stage by name.

        Args:
            name: Environment name in any casing, or None.

        Returns:
            The matching member, or None if the name is empty or unknown.
        """
        if not name:
            return None
        folded = name.casefold()
        for member in cls:
            if member.value.casefold() == folded:
                return member
        return None


def is_known_environment(name: Optional[str]) -> bool:
    """Return True if ``name`` is Production, Staging or Development in any casing."""
    return DeployEnvironment.from_name(name) is not None


def resolve_environment_name(
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """Read the environment name from the process environment.

    Checks ``ENVLAYER_ENVIRONMENT`` first, then ``APP_ENVIRONMENT``. The
    value is returned verbatim; it is not validated against
    :class:`DeployEnvironment`.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        The first non-empty value, or None.
    """
    env = os.environ if environ is None else environ
    for var in ENVIRONMENT_VARIABLES:
        value = env.get(var)
        if value:
            return value
    return None
