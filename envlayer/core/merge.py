"""Merging logic for multiple configuration sources."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Sequence, Tuple

from .source import Source
from .types import ProvenanceRecord


def merge_sources(
    sources: Sequence[Source],
) -> Tuple[Dict[str, Any], Dict[str, ProvenanceRecord]]:
    """Merge multiple sources into a single configuration.

    Sources are merged in order with later sources overriding
    earlier ones for the same keys. Keys are compared case-insensitively;
    the spelling of the first source to define a key is kept.

    Args:
        sources: Sources to merge, lowest precedence first.

    Returns:
        Tuple of (effective_config, provenance_map) where:
        - effective_config is the merged configuration dictionary
        - provenance_map tracks which source each key came from
    """
    effective: Dict[str, Any] = {}
    provenance: Dict[str, ProvenanceRecord] = {}
    spelling: Dict[str, str] = {}

    for source in sources:
        payload = source.load()
        loaded_at = datetime.now(timezone.utc)
        for key, value in payload.items():
            canonical = spelling.setdefault(key.casefold(), key)
            # last source wins
            effective[canonical] = value
            provenance[canonical] = ProvenanceRecord(
                key=canonical,
                source_name=source.name,
                source_kind=source.kind,
                source_key=key,
                timestamp_loaded=loaded_at,
            )

    return effective, provenance


def source_order(sources: Sequence[Source]) -> List[str]:
    """Return source names in merge order, for logging."""
    return [source.name for source in sources]
