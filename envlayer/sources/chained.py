"""Source forwarding an already-built configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

from ..core.source import Source, SourceKind

if TYPE_CHECKING:
    from ..core.config import Config


class ChainedSource(Source):
    """Expose the values of an existing :class:`Config` as a source.

    Used to carry upstream (host-level) configuration into an application
    builder. The wrapped config is read on every load.
    """

    kind = SourceKind.CHAINED

    def __init__(self, config: "Config", name: Optional[str] = None):
        self.config = config
        self.name = name or "chained"

    def load(self) -> Dict[str, Any]:
        return self.config.values()

    def describe(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "name": self.name,
            "sources": [s.name for s in self.config.sources],
        }

    def __repr__(self) -> str:
        return f"ChainedSource(name={self.name!r})"
