"""Configuration builder holding an ordered list of sources."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence, Union

from ..log import get_logger
from ..sources.chained import ChainedSource
from ..sources.command_line import CommandLineSource
from ..sources.environment_variables import EnvironmentVariablesSource
from ..sources.json_file import JsonFileSource
from ..sources.memory import MemorySource
from .config import Config
from .environment import resolve_environment_name
from .merge import source_order
from .source import Source

logger = get_logger(__name__)

HOST_VARIABLE_PREFIX = "ENVLAYER_"
DEFAULT_ENVIRONMENT = "Production"


class ConfigurationBuilder:
    """Collect configuration sources in precedence order.

    ``sources`` is a plain list that callers may inspect and mutate
    directly; sources later in the list override earlier ones when the
    configuration is built.
    """

    def __init__(self, base_path: Optional[Union[str, Path]] = None):
        """Initialize ConfigurationBuilder.

        Args:
            base_path: Directory relative file paths are resolved against.
                Defaults to the current working directory at build time.
        """
        self.sources: List[Source] = []
        self.base_path: Optional[Path] = Path(base_path) if base_path is not None else None

    def set_base_path(self, base_path: Union[str, Path]) -> "ConfigurationBuilder":
        self.base_path = Path(base_path)
        return self

    def add(self, source: Source) -> "ConfigurationBuilder":
        """Append a ready-made source instance.

        Args:
            source: Source instance to add.

        Raises:
            TypeError: If ``source`` does not implement the Source protocol.
        """
        if not isinstance(source, Source):
            raise TypeError(f"Expected a configuration source, got {type(source).__name__}")
        self.sources.append(source)
        return self

    def _resolve(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        if p.is_absolute() or self.base_path is None:
            return p
        return self.base_path / p

    def add_json_file(
        self,
        path: Union[str, Path],
        optional: bool = True,
        reload_on_change: bool = False,
    ) -> "ConfigurationBuilder":
        """Register a JSON file source.

        Args:
            path: File path, resolved against ``base_path`` when relative.
            optional: Whether a missing file is tolerated.
            reload_on_change: Recorded on the source; files are not watched.
        """
        return self.add(
            JsonFileSource(
                self._resolve(path),
                optional=optional,
                reload_on_change=reload_on_change,
            )
        )

    def add_environment_variables(self, prefix: Optional[str] = None) -> "ConfigurationBuilder":
        return self.add(EnvironmentVariablesSource(prefix=prefix))

    def add_command_line(
        self,
        args: Sequence[str],
        switch_mappings: Optional[Mapping[str, str]] = None,
    ) -> "ConfigurationBuilder":
        return self.add(CommandLineSource(args, switch_mappings=switch_mappings))

    def add_in_memory(self, data: Mapping[str, Any]) -> "ConfigurationBuilder":
        return self.add(MemorySource(data))

    def add_chained(self, config: Config) -> "ConfigurationBuilder":
        return self.add(ChainedSource(config))

    def build(self) -> Config:
        """Merge all sources into a Config.

        Returns:
            Config object with materialized values from all sources.

        Raises:
            FileNotFoundError: If a non-optional file is missing.
            ValueError: If a source cannot be parsed.
        """
        logger.debug("configuration_build", sources=source_order(self.sources))
        cfg = Config(list(self.sources))
        cfg.materialize()
        return cfg


def create_default_builder(
    environment: Optional[str] = None,
    args: Optional[Sequence[str]] = None,
    base_path: Optional[Union[str, Path]] = None,
) -> ConfigurationBuilder:
    """Create a builder populated the way an application host does by default.

    Host settings (defaults, ``ENVLAYER_``-prefixed variables and the
    command line) are built first and chained in. The application layer
    then gets ``appsettings.json``, ``appsettings.{environment}.json``,
    all environment variables and the command line again.

    Args:
        environment: Environment name. Defaults to
            :func:`resolve_environment_name`, then ``Production``.
        args: Command-line arguments, if any.
        base_path: Directory settings files are resolved against.

    Returns:
        A builder whose ``sources`` hold the implicit defaults.
    """
    environment = environment or resolve_environment_name() or DEFAULT_ENVIRONMENT

    host = ConfigurationBuilder(base_path)
    host.add_in_memory({"environment": environment})
    host.add_environment_variables(prefix=HOST_VARIABLE_PREFIX)
    if args:
        host.add_command_line(args)

    app = ConfigurationBuilder(base_path)
    app.add_chained(host.build())
    app.add_json_file("appsettings.json", optional=True, reload_on_change=True)
    app.add_json_file(f"appsettings.{environment}.json", optional=True, reload_on_change=True)
    app.add_environment_variables()
    if args:
        app.add_command_line(args)
    return app
