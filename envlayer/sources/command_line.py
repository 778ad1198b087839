"""Command-line arguments configuration source."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..core.filters import normalize_key
from ..core.source import Source, SourceKind


def _validate_switch_mappings(mappings: Mapping[str, str]) -> Dict[str, str]:
    validated: Dict[str, str] = {}
    for switch, key in mappings.items():
        if not switch.startswith("-"):
            raise ValueError(
                f"The switch mapping '{switch}' is invalid; switches must start with '-' or '--'"
            )
        folded = switch.casefold()
        if folded in validated:
            raise ValueError(f"Duplicate switch mapping '{switch}'")
        validated[folded] = key
    return validated


class CommandLineSource(Source):
    """Configuration source for command-line arguments.

    Accepted forms are ``--key=value``, ``--key value``, ``/key=value``,
    ``/key value`` and ``key=value``. Single-dash switches (``-k value``)
    are only honored when listed in ``switch_mappings``; other arguments
    are ignored.
    """

    kind = SourceKind.COMMAND_LINE

    def __init__(
        self,
        args: Sequence[str],
        switch_mappings: Optional[Mapping[str, str]] = None,
        name: Optional[str] = None,
    ):
        self.args: List[str] = list(args)
        self.switch_mappings = _validate_switch_mappings(switch_mappings or {})
        self.name = name or "command_line"

    def _mapped(self, switch: str) -> Optional[str]:
        return self.switch_mappings.get(switch.casefold())

    def load(self) -> Dict[str, Any]:
        values: Dict[str, Any] = {}
        remaining = iter(self.args)
        for arg in remaining:
            current = arg
            key_start = 0
            if current.startswith("--"):
                key_start = 2
            elif current.startswith("-"):
                key_start = 1
            elif current.startswith("/"):
                current = "--" + current[1:]
                key_start = 2

            separator = current.find("=")
            if separator < 0:
                # bare words are positional arguments, not configuration
                if key_start == 0:
                    continue
                key = self._mapped(current)
                if key is None:
                    if key_start == 1:
                        continue
                    key = current[key_start:]
                value = next(remaining, None)
                if value is None:
                    raise ValueError(f"No value was supplied for the switch '{arg}'")
            else:
                key = self._mapped(current[:separator])
                if key is None:
                    if key_start == 1:
                        continue
                    key = current[key_start:separator]
                value = current[separator + 1:]

            values[normalize_key(key)] = value
        return values

    def describe(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "name": self.name, "args": list(self.args)}

    def __repr__(self) -> str:
        return f"CommandLineSource(args={self.args!r})"
