"""Configuration source implementations.

This package contains the sources a builder can hold: JSON files,
process environment variables, command-line arguments, chained
configurations and in-memory defaults.
"""

from .chained import ChainedSource
from .command_line import CommandLineSource
from .environment_variables import EnvironmentVariablesSource
from .json_file import JsonFileSource
from .memory import MemorySource

__all__ = [
    "ChainedSource",
    "CommandLineSource",
    "EnvironmentVariablesSource",
    "JsonFileSource",
    "MemorySource",
]
