"""
Configuration parameters for plugin_properties.
"""

import inspect
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Union

try:
    import tomllib
except ModuleNotFoundError:
    # Python < 3.11
    import tomli as tomllib


class BuildTarget(str, Enum):
    """
    Platforms a plugin archive is packaged for.
    """

    ANDROID = "android"
    ANDROID_IOS = "android_ios"

    def __str__(self) -> str:
        return self.value


def as_source_list(sources: Union[str, "os.PathLike", Iterable, None]) -> List[str]:
    """
    Normalize property sources to a list of paths. A single path counts as one source.
    """
    if sources is None:
        return []
    if isinstance(sources, (str, os.PathLike)):
        return [os.fspath(sources)]
    return [os.fspath(source) for source in sources]


PLUGIN_TOML_SCHEMA = """
# Plugin build properties configuration

[plugin]
# Build target: "android" or "android_ios"
target = "android"

# Property files, loaded in order. Later files overwrite earlier ones.
# Relative paths are resolved against the directory of this file.
sources = ["config/config.properties"]

# Raise on property lines without a key/value separator (optional)
# strict_parsing = false

# Text encoding of the property files (optional, platform default)
# encoding = "utf-8"

# Literal overrides merged over the target defaults (optional)
[plugin.literals]
# pluginVersion = "5.0"
"""


@dataclass
class PluginPropertiesConfig:
    """
    Configuration parameters
    """

    target: BuildTarget = BuildTarget.ANDROID
    sources: List[str] = field(default_factory=list)
    literals: Dict[str, str] = field(default_factory=dict)
    strict_parsing: bool = False
    encoding: Optional[str] = None

    def __post_init__(self):
        self.target = BuildTarget(self.target)
        self.sources = as_source_list(self.sources)
        self.literals = {str(k): str(v) for k, v in self.literals.items()}

    @classmethod
    def from_dict(cls, env: Dict[str, Any]) -> "PluginPropertiesConfig":
        """
        Create a PluginPropertiesConfig instance from a dictionary, ignoring unknown keys
        """
        return cls(**{
            k: v for k, v in env.items()
            if k in inspect.signature(cls).parameters
        })

    @classmethod
    def from_toml(cls, toml_path: str) -> "PluginPropertiesConfig":
        """
        Create a PluginPropertiesConfig from the [plugin] table of a plugin.toml file.

        Relative source paths are resolved against the directory containing the file.

        Args:
            toml_path: Path to plugin.toml

        Returns:
            The loaded configuration
        """
        with open(toml_path, "rb") as f:
            toml_dict = tomllib.load(f)

        plugin_section = dict(toml_dict.get("plugin", {}))
        base_dir = os.path.dirname(os.path.abspath(toml_path))
        plugin_section["sources"] = [
            source if os.path.isabs(source) else os.path.join(base_dir, source)
            for source in as_source_list(plugin_section.get("sources"))
        ]
        return cls.from_dict(plugin_section)
