"""Source protocol and source kinds for configuration sources."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Protocol, runtime_checkable


class SourceKind(str, Enum):
    """Closed set of source kinds a builder can hold."""

    CHAINED = "chained"
    COMMAND_LINE = "command_line"
    JSON_FILE = "json_file"
    ENVIRONMENT_VARIABLES = "environment_variables"
    MEMORY = "memory"
    OTHER = "other"


@runtime_checkable
class Source(Protocol):
    """Protocol defining the interface for configuration sources.

    A source contributes a flat mapping of dot-separated keys to values.
    Sources are read-only; the builder merges them in registration order
    with later sources overriding earlier ones.
    """

    name: str
    kind: SourceKind

    def load(self) -> Dict[str, Any]:
        """Load configuration values from the source.

        Returns:
            Dictionary of configuration key-value pairs.
        """
        ...

    def describe(self) -> Dict[str, Any]:
        """Summarize the source for display.

        Returns:
            JSON-serializable dictionary with at least ``kind`` and ``name``.
        """
        ...
