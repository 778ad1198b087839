"""Key flattening and normalization shared by configuration sources."""

from __future__ import annotations

from typing import Any, Dict, Iterator, Optional, Tuple

KEY_DELIMITER = "."


def normalize_key(key: str) -> str:
    """Map alternative hierarchy separators onto the dot delimiter.

    ``__`` is accepted because dots are not valid in environment variable
    names; ``:`` is accepted for keys written in colon-delimited form.

    Args:
        key: Raw key as it appears in the source.

    Returns:
        Dot-delimited key.
    """
    return key.replace("__", KEY_DELIMITER).replace(":", KEY_DELIMITER)


def iter_hierarchical(
    data: Any,
    parent: str = "",
    depth: Optional[int] = None,
) -> Iterator[Tuple[str, Any]]:
    """Flatten nested dictionaries and lists using dot-notation.

    List items are keyed by their index (``hosts.0``). Empty containers
    produce no keys. Scalars are emitted directly.

    Args:
        data: Dictionary or list to flatten.
        parent: Parent key prefix for recursion.
        depth: Maximum depth to flatten (None for unlimited).

    Yields:
        Tuples of (flattened_key, value).
    """
    if depth is not None and depth < 0:
        return

    if isinstance(data, dict):
        items = data.items()
    else:
        items = ((str(i), v) for i, v in enumerate(data))

    for key, value in items:
        full_key = key if not parent else f"{parent}{KEY_DELIMITER}{key}"
        if isinstance(value, (dict, list)) and (depth is None or depth > 0):
            next_depth = None if depth is None else depth - 1
            yield from iter_hierarchical(value, full_key, next_depth)
        else:
            yield full_key, value


def flatten(data: Dict[str, Any]) -> Dict[str, Any]:
    """Flatten a nested mapping into a single-level dictionary."""
    return {k: v for k, v in iter_hierarchical(data)}
