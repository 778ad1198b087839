from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .filters import KEY_DELIMITER
from .merge import merge_sources
from .source import Source
from .types import ProvenanceRecord


@dataclass
class Config:
    sources: List[Source]
    _effective: Dict[str, Any] = field(default_factory=dict)
    _provenance: Dict[str, ProvenanceRecord] = field(default_factory=dict)
    _index: Dict[str, str] = field(default_factory=dict)
    _materialized: bool = False

    def materialize(self) -> None:
        self._effective, self._provenance = merge_sources(self.sources)
        self._index = {key.casefold(): key for key in self._effective}
        self._materialized = True

    def _ensure(self) -> None:
        if not self._materialized:
            self.materialize()

    def values(self) -> Dict[str, Any]:
        self._ensure()
        return dict(self._effective)

    def keys(self) -> List[str]:
        self._ensure()
        return list(self._effective)

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        self._ensure()
        canonical = self._index.get(key.casefold())
        if canonical is None:
            return default
        return self._effective[canonical]

    def __getitem__(self, key: str) -> Any:
        self._ensure()
        canonical = self._index.get(key.casefold())
        if canonical is None:
            raise KeyError(key)
        return self._effective[canonical]

    def __contains__(self, key: object) -> bool:
        self._ensure()
        return isinstance(key, str) and key.casefold() in self._index

    def provenance(self, key: str) -> Optional[ProvenanceRecord]:
        self._ensure()
        canonical = self._index.get(key.casefold())
        if canonical is None:
            return None
        return self._provenance.get(canonical)

    def section(self, prefix: str) -> Dict[str, Any]:
        """Return values under ``prefix`` with the prefix stripped from keys."""
        self._ensure()
        folded = prefix.casefold().rstrip(KEY_DELIMITER) + KEY_DELIMITER
        return {
            key[len(folded):]: value
            for key, value in self._effective.items()
            if key.casefold().startswith(folded)
        }

    def reload(self) -> None:
        # sources read their backing data on every load
        self.materialize()
