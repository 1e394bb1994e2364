"""
Property models for plugin build configuration.

This package provides Pydantic data models for the packaged build target
definitions and for the typed record handed to downstream build steps.
"""

from .build_target import (
    BuildTargetDefinition,
    TEMPLATE_PLACEHOLDER,
)
from .plugin_properties import PluginProperties

__all__ = [
    "BuildTargetDefinition",
    "TEMPLATE_PLACEHOLDER",
    "PluginProperties",
]
