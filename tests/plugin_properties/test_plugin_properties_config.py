"""
Tests for PluginPropertiesConfig and the plugin logger.
"""

import json
import logging
import os

import pytest

from plugin_properties import (
    BuildTarget,
    PluginPropertiesConfig,
    PluginPropertiesLogger,
    PropertyResolver,
)
from plugin_properties.plugin_properties_config import PLUGIN_TOML_SCHEMA


class TestPluginPropertiesConfig:
    """Tests for PluginPropertiesConfig."""

    def test_defaults(self):
        config = PluginPropertiesConfig()

        assert config.target is BuildTarget.ANDROID
        assert config.sources == []
        assert config.literals == {}
        assert config.strict_parsing is False
        assert config.encoding is None

    def test_from_dict_coerces_target(self):
        config = PluginPropertiesConfig.from_dict({"target": "android_ios"})
        assert config.target is BuildTarget.ANDROID_IOS

    def test_from_dict_ignores_unknown_keys(self):
        config = PluginPropertiesConfig.from_dict({"target": "android", "unused": 1})
        assert config.target is BuildTarget.ANDROID

    def test_invalid_target(self):
        with pytest.raises(ValueError):
            PluginPropertiesConfig(target="windows")

    def test_literals_are_strings(self):
        config = PluginPropertiesConfig(literals={"pluginVersion": 5.0})
        assert config.literals == {"pluginVersion": "5.0"}

    def test_from_toml(self, tmp_path):
        (tmp_path / "config").mkdir()
        toml_path = tmp_path / "plugin.toml"
        toml_path.write_text(
            "\n".join(
                [
                    "[plugin]",
                    'target = "android_ios"',
                    'sources = ["config/config.properties", "/abs/ios.properties"]',
                    "strict_parsing = true",
                    'encoding = "utf-8"',
                    "",
                    "[plugin.literals]",
                    'pluginVersion = "6.0"',
                ]
            )
        )

        config = PluginPropertiesConfig.from_toml(str(toml_path))

        assert config.target is BuildTarget.ANDROID_IOS
        assert config.sources == [
            os.path.join(str(tmp_path), "config/config.properties"),
            "/abs/ios.properties",
        ]
        assert config.strict_parsing is True
        assert config.encoding == "utf-8"
        assert config.literals == {"pluginVersion": "6.0"}

    def test_single_source_string(self):
        config = PluginPropertiesConfig(sources="config/config.properties")
        assert config.sources == ["config/config.properties"]

    def test_source_paths(self, tmp_path):
        config = PluginPropertiesConfig(sources=[tmp_path / "a.properties"])
        assert config.sources == [str(tmp_path / "a.properties")]

    def test_from_toml_single_source_string(self, tmp_path):
        toml_path = tmp_path / "plugin.toml"
        toml_path.write_text('[plugin]\nsources = "c.properties"\n')

        config = PluginPropertiesConfig.from_toml(str(toml_path))
        assert config.sources == [os.path.join(str(tmp_path), "c.properties")]

    def test_from_toml_without_plugin_table(self, tmp_path):
        toml_path = tmp_path / "plugin.toml"
        toml_path.write_text("[other]\nkey = 1\n")

        assert PluginPropertiesConfig.from_toml(str(toml_path)) == PluginPropertiesConfig()

    def test_schema_example_loads(self, tmp_path):
        toml_path = tmp_path / "plugin.toml"
        toml_path.write_text(PLUGIN_TOML_SCHEMA)

        config = PluginPropertiesConfig.from_toml(str(toml_path))
        assert config.target is BuildTarget.ANDROID
        assert len(config.sources) == 1

    def test_resolve_from_toml(self, tmp_path, logger):
        (tmp_path / "config.properties").write_text("pluginNodeName=Foo\n")
        toml_path = tmp_path / "plugin.toml"
        toml_path.write_text('[plugin]\nsources = ["config.properties"]\n')

        config = PluginPropertiesConfig.from_toml(str(toml_path))
        props = PropertyResolver(config, logger).resolve()

        assert props["pluginName"] == "FooPlugin"


class TestPluginPropertiesLogger:
    """Tests for PluginPropertiesLogger."""

    def test_json_log_line(self, caplog):
        logger = PluginPropertiesLogger()

        with caplog.at_level(logging.INFO, logger="plugin_properties"):
            logger.log("Loaded 'config'\nproperties", logging.INFO)

        line = json.loads(caplog.records[-1].getMessage())
        assert line["level"] == "INFO"
        assert line["message"] == 'Loaded "config" properties'
        assert line["caller_name"] == "test_json_log_line"
        assert line["caller_file"].endswith(".py")

    def test_sanitized_error_message(self, caplog):
        logger = PluginPropertiesLogger()

        with caplog.at_level(logging.ERROR, logger="plugin_properties"):
            logger.log("Resolution failed", logging.ERROR, "missing key")

        line = json.loads(caplog.records[-1].getMessage())
        assert line["message"] == "Resolution failed (missing key)"

    def test_below_level_not_emitted(self, caplog):
        logger = PluginPropertiesLogger()

        with caplog.at_level(logging.WARNING, logger="plugin_properties"):
            logger.log("derived key", logging.DEBUG)

        assert not caplog.records
