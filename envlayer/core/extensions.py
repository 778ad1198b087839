"""Deterministic source ordering for a configuration builder.

:func:`initialize` strips every source a host added implicitly except
chained and command-line sources, then appends the environment's
``appsettings`` JSON file followed by environment variables so that
environment variables always win.
"""

from __future__ import annotations

from typing import List, Optional

from ..log import get_logger
from .builder import ConfigurationBuilder
from .environment import is_known_environment
from .merge import source_order
from .source import Source, SourceKind

logger = get_logger(__name__)

DEFAULT_OPTIONAL = True
DEFAULT_RELOAD_ON_CHANGE = False

APP_SETTINGS_BASE = "appsettings.json"
APP_SETTINGS_PREFIX = "appsettings."
OCELOT_BASE = "ocelot.json"
OCELOT_PREFIX = "ocelot."

RETAINED_KINDS = frozenset({SourceKind.CHAINED, SourceKind.COMMAND_LINE})


def strip_sources(sources: List[Source]) -> int:
    """Remove every source that is not chained or command-line, in place.

    Args:
        sources: The builder's source list. It is mutated, not replaced.

    Returns:
        Number of sources removed.
    """
    removed = 0
    for i in range(len(sources) - 1, -1, -1):
        if sources[i].kind in RETAINED_KINDS:
            continue
        del sources[i]
        removed += 1
    return removed


def build_env_json(prefix: str, environment: str) -> str:
    return f"{prefix}{environment}.json"


def select_file_name(prefix: str, base: str, environment: Optional[str]) -> str:
    """Pick the JSON file name for an environment.

    A known environment keeps the caller's casing, so ``"production"``
    selects ``appsettings.production.json``. Unknown or empty names fall
    back to ``base``.
    """
    if is_known_environment(environment):
        return build_env_json(prefix, environment)
    return base


def add_app_settings(
    builder: ConfigurationBuilder,
    environment: Optional[str],
    optional: bool = DEFAULT_OPTIONAL,
    reload_on_change: bool = DEFAULT_RELOAD_ON_CHANGE,
) -> ConfigurationBuilder:
    """Add the appsettings JSON file for ``environment``.

    Args:
        builder: Builder to register the file with.
        environment: Deployment environment name, or None.
        optional: Whether a missing file is tolerated.
        reload_on_change: Passed through to the JSON file source.

    Returns:
        The same builder.
    """
    file_name = select_file_name(APP_SETTINGS_PREFIX, APP_SETTINGS_BASE, environment)
    logger.debug("app_settings_selected", file=file_name, environment=environment)
    return builder.add_json_file(file_name, optional=optional, reload_on_change=reload_on_change)


def add_ocelot_config(
    builder: ConfigurationBuilder,
    environment: Optional[str],
    optional: bool = DEFAULT_OPTIONAL,
    reload_on_change: bool = DEFAULT_RELOAD_ON_CHANGE,
) -> ConfigurationBuilder:
    """Add the Ocelot gateway routing JSON file for ``environment``.

    Works like :func:`add_app_settings` with the ``ocelot`` file names.
    """
    file_name = select_file_name(OCELOT_PREFIX, OCELOT_BASE, environment)
    logger.debug("ocelot_config_selected", file=file_name, environment=environment)
    return builder.add_json_file(file_name, optional=optional, reload_on_change=reload_on_change)


def initialize(builder: ConfigurationBuilder, environment: Optional[str]) -> ConfigurationBuilder:
    """Reset ``builder.sources`` to a deterministic order.

    After the call the list holds the surviving chained and command-line
    sources in their original order, then the environment's appsettings
    file, then environment variables.

    Args:
        builder: Builder whose source list is mutated in place.
        environment: Deployment environment name, or None.

    Returns:
        The same builder.
    """
    removed = strip_sources(builder.sources)
    logger.debug("configuration_sources_stripped", removed=removed)

    add_app_settings(builder, environment)

    # last so environment variables win
    builder.add_environment_variables()

    logger.debug("configuration_initialized", sources=source_order(builder.sources))
    return builder
