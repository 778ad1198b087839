"""envlayer - Deterministic configuration source ordering.

Strip implicitly added configuration sources and load an
environment-specific JSON file followed by environment variables, so
environment variables always take precedence.
"""

from .core.environment import DeployEnvironment, is_known_environment, resolve_environment_name
from .core.source import Source, SourceKind
from .core.config import Config
from .core.builder import ConfigurationBuilder, create_default_builder
from .core.extensions import (
    add_app_settings,
    add_ocelot_config,
    initialize,
    select_file_name,
    strip_sources,
)

__all__ = [
    "DeployEnvironment",
    "is_known_environment",
    "resolve_environment_name",
    "Source",
    "SourceKind",
    "Config",
    "ConfigurationBuilder",
    "create_default_builder",
    "add_app_settings",
    "add_ocelot_config",
    "initialize",
    "select_file_name",
    "strip_sources",
]
