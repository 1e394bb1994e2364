"""
This file exposes the public API of plugin_properties.
"""

from .plugin_properties_config import BuildTarget, PluginPropertiesConfig
from .plugin_properties_exceptions import (
    BuildTargetDefinitionError,
    MissingPropertyKeyError,
    PropertyParseError,
    PropertyResolutionException,
    PropertySourceNotFoundError,
    PropertySourceReadError,
)
from .plugin_properties_logger import PluginPropertiesLogger
from .property_models import BuildTargetDefinition, PluginProperties
from .property_resolver import PropertyResolver, PropertySet, resolve

__all__ = [
    "BuildTarget",
    "BuildTargetDefinition",
    "BuildTargetDefinitionError",
    "MissingPropertyKeyError",
    "PluginProperties",
    "PluginPropertiesConfig",
    "PluginPropertiesLogger",
    "PropertyParseError",
    "PropertyResolutionException",
    "PropertyResolver",
    "PropertySet",
    "PropertySourceNotFoundError",
    "PropertySourceReadError",
    "resolve",
]
