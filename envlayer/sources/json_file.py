"""JSON file configuration source."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..core.filters import flatten
from ..core.source import Source, SourceKind
from ..log import get_logger

logger = get_logger(__name__)


class JsonFileSource(Source):
    """Configuration source for JSON files.

    The file is read on every :meth:`load`. Nested objects are flattened
    to dot-separated keys and arrays to index keys.
    """

    kind = SourceKind.JSON_FILE

    def __init__(
        self,
        path: Union[str, Path],
        optional: bool = True,
        reload_on_change: bool = False,
        name: Optional[str] = None,
    ):
        """Initialize JsonFileSource.

        Args:
            path: Path to the JSON file.
            optional: If True a missing file contributes nothing instead
                of raising.
            reload_on_change: Recorded for callers; files are not watched.
            name: Optional custom name for this source.
        """
        self.path = Path(path)
        self.optional = optional
        self.reload_on_change = reload_on_change
        self.name = name or f"json:{self.path.name}"
        self._cache: Dict[str, Any] = {}

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            if self.optional:
                logger.debug("optional_file_missing", path=str(self.path))
                return {}
            raise FileNotFoundError(
                f"The configuration file '{self.path}' was not found and is not optional"
            )
        text = self.path.read_text(encoding="utf-8-sig")
        if not text.strip():
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(
                f"Invalid JSON in {self.path}: top-level value must be an object"
            )
        return data

    def load(self) -> Dict[str, Any]:
        """Load configuration from the JSON file.

        Returns:
            Flattened dictionary of configuration values.

        Raises:
            FileNotFoundError: If the file is missing and not optional.
            ValueError: If the file is not a JSON object.
        """
        self._cache = flatten(self._read())
        return dict(self._cache)

    def describe(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "name": self.name,
            "path": str(self.path),
            "optional": self.optional,
            "reload_on_change": self.reload_on_change,
        }

    def __repr__(self) -> str:
        return (
            f"JsonFileSource(path={str(self.path)!r}, optional={self.optional}, "
            f"reload_on_change={self.reload_on_change})"
        )
