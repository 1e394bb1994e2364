"""
Shared fixtures for plugin_properties tests.
"""

import pytest

from plugin_properties import (
    BuildTarget,
    PluginPropertiesConfig,
    PluginPropertiesLogger,
    PropertyResolver,
)


@pytest.fixture
def write_properties(tmp_path):
    """Write a property file into tmp_path and return its path."""

    def _write(name: str, text: str) -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def logger():
    return PluginPropertiesLogger()


@pytest.fixture
def android_resolver(logger):
    return PropertyResolver(PluginPropertiesConfig(target=BuildTarget.ANDROID), logger)


@pytest.fixture
def android_ios_resolver(logger):
    return PropertyResolver(PluginPropertiesConfig(target=BuildTarget.ANDROID_IOS), logger)


@pytest.fixture
def common_properties_text():
    return "\n".join(
        [
            "# Plugin details",
            "pluginNodeName=NotificationScheduler",
            "pluginPackageName=org.godotengine.plugin.android.notification",
            "pluginVersion=5.0",
            "",
            "# Godot",
            "godotVersion=4.5",
            "releaseType=beta3",
        ]
    )


@pytest.fixture
def ios_properties_text():
    return "\n".join(
        [
            "platform_version=14.3",
            "frameworks=Foundation.framework,UserNotifications.framework",
            "embedded_frameworks=",
            "flags=-ObjC",
        ]
    )
