from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..core.filters import flatten
from ..core.source import Source, SourceKind


class MemorySource(Source):
    """In-memory defaults, flattened like a JSON document."""

    kind = SourceKind.MEMORY

    def __init__(self, data: Optional[Mapping[str, Any]] = None, name: Optional[str] = None):
        self.data: Dict[str, Any] = dict(data or {})
        self.name = name or "memory"

    def load(self) -> Dict[str, Any]:
        return flatten(self.data)

    def describe(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "name": self.name, "keys": sorted(self.data)}

    def __repr__(self) -> str:
        return f"MemorySource(name={self.name!r})"
