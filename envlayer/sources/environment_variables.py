"""Process environment variables configuration source."""

from __future__ import annotations

import os
from typing import Any, Dict, Mapping, Optional

from ..core.filters import normalize_key
from ..core.source import Source, SourceKind


class EnvironmentVariablesSource(Source):
    """Configuration source for the process environment.

    ``__`` in a variable name is a hierarchy separator, so
    ``Logging__LogLevel__Default`` overrides the JSON key
    ``Logging.LogLevel.Default``.
    """

    kind = SourceKind.ENVIRONMENT_VARIABLES

    def __init__(
        self,
        prefix: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
        name: Optional[str] = None,
    ):
        """Initialize EnvironmentVariablesSource.

        Args:
            prefix: Only variables starting with this prefix (any casing)
                are included, with the prefix removed from the key.
            environ: Mapping to read instead of ``os.environ``.
            name: Optional custom name for this source.
        """
        self.prefix = prefix or ""
        self._environ = environ
        self.name = name or (f"env:{self.prefix}*" if self.prefix else "env")

    def load(self) -> Dict[str, Any]:
        environ = os.environ if self._environ is None else self._environ
        folded_prefix = self.prefix.casefold()
        values: Dict[str, Any] = {}
        for var, value in environ.items():
            if not var.casefold().startswith(folded_prefix):
                continue
            key = normalize_key(var[len(self.prefix):])
            if key:
                values[key] = value
        return values

    def describe(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "name": self.name, "prefix": self.prefix}

    def __repr__(self) -> str:
        return f"EnvironmentVariablesSource(prefix={self.prefix!r})"
