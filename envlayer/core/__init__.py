from .environment import DeployEnvironment, is_known_environment, resolve_environment_name
from .source import Source, SourceKind
from .config import Config
from .builder import ConfigurationBuilder, create_default_builder
from .extensions import (
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
