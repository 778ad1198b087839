"""Type definitions for the envlayer configuration system."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .source import SourceKind


@dataclass(frozen=True)
class ProvenanceRecord:
    """Record tracking the source of a configuration value.

    Attributes:
        key: Effective configuration key.
        source_name: Name of the source this value came from.
        source_kind: Kind of the source this value came from.
        source_key: Original key in the source.
        timestamp_loaded: When this value was loaded.
    """

    key: str
    source_name: str
    source_kind: SourceKind
    source_key: str
    timestamp_loaded: datetime
