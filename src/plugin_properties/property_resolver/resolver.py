"""
Property resolver.

Loads the property files of a build, merges them with the literal defaults of the
build target and computes the derived and passthrough keys.
"""

import logging
import os
from typing import Dict, Iterable, List, Optional, Set, Union

from plugin_properties.plugin_properties_config import (
    BuildTarget,
    PluginPropertiesConfig,
    as_source_list,
)
from plugin_properties.plugin_properties_exceptions import (
    MissingPropertyKeyError,
    PropertyResolutionException,
)
from plugin_properties.plugin_properties_logger import PluginPropertiesLogger
from plugin_properties.property_models import BuildTargetDefinition, TEMPLATE_PLACEHOLDER
from plugin_properties.property_resolver.property_set import (
    EXTRA_PROPERTIES_KEY,
    PropertySet,
    parse_extra_properties,
)
from plugin_properties.property_sources import load_properties


def render_template(
    template: str, properties: Dict[str, str], derived_key: Optional[str] = None
) -> str:
    """
    Substitute every `{key}` placeholder of a template.

    Args:
        template: Template text, e.g. "{pluginName}-Android-v{pluginVersion}.zip"
        properties: Values available for substitution
        derived_key: The key being computed, for error messages

    Raises:
        MissingPropertyKeyError: If a placeholder names a key that is not set
    """

    def substitute(match) -> str:
        key = match.group(1)
        if key not in properties:
            raise MissingPropertyKeyError(key, derived_key)
        return properties[key]

    return TEMPLATE_PLACEHOLDER.sub(substitute, template)


class PropertyResolver:
    """
    Produces the flat property mapping of a build.

    A resolver holds no state between calls: resolving the same inputs twice
    yields equal property sets.
    """

    def __init__(
        self,
        config: PluginPropertiesConfig,
        logger: PluginPropertiesLogger,
        definition: Optional[BuildTargetDefinition] = None,
    ):
        """
        Initialize the property resolver.

        Args:
            config: Build target, property files and literal overrides
            logger: Logger for progress and error messages
            definition: Target definition to use instead of the packaged one for config.target
        """
        self.config = config
        self.logger = logger
        self.definition = definition or BuildTargetDefinition.for_target(config.target)

    def resolve(
        self,
        sources: Union[str, os.PathLike, Iterable[str], None] = None,
        literals: Optional[Dict[str, str]] = None,
    ) -> PropertySet:
        """
        Resolve the property set of a build.

        Args:
            sources: Property files in load order, config.sources when None.
                A single path is read as one source
            literals: Literal defaults merged over the target's own and config.literals

        Returns:
            The fully merged PropertySet

        Raises:
            PropertySourceNotFoundError: If a property file does not exist
            PropertySourceReadError: If a property file cannot be read or decoded
            PropertyParseError: If strict parsing is enabled and a line is malformed
            MissingPropertyKeyError: If a template or passthrough key is not set
        """
        sources = as_source_list(self.config.sources if sources is None else sources)
        definition = self.definition.with_literals(self.config.literals)
        if literals:
            definition = definition.with_literals(literals)

        try:
            properties, sourced = self._load_sources(sources)
            self._apply_literals(properties, sourced, definition.literals)
            self._check_template_references(properties, sourced, definition)
            self._apply_derived(properties, sourced, definition.derived)
            self._apply_passthrough(properties, definition.passthrough)
            self._apply_extra_properties(properties)
        except PropertyResolutionException as e:
            self.logger.log(f"Property resolution failed: {e}", logging.ERROR)
            raise

        self.logger.log(
            f"Resolved {len(properties)} properties for target {self.config.target}",
            logging.INFO,
        )
        return PropertySet(properties)

    def _load_sources(self, sources: List[str]):
        properties: Dict[str, str] = {}
        for source in sources:
            loaded = load_properties(
                source,
                encoding=self.config.encoding,
                strict=self.config.strict_parsing,
            )
            self.logger.log(f"Loaded {len(loaded)} properties from {source}", logging.INFO)
            properties.update(loaded)
        sourced: Set[str] = set(properties)
        return properties, sourced

    def _apply_literals(
        self, properties: Dict[str, str], sourced: Set[str], literals: Dict[str, str]
    ) -> None:
        for key, value in literals.items():
            if key in sourced:
                self.logger.log(f"Keeping sourced value of '{key}' over its default", logging.DEBUG)
                continue
            properties[key] = value

    def _check_template_references(
        self, properties: Dict[str, str], sourced: Set[str], definition: BuildTargetDefinition
    ) -> None:
        """
        Fail before rendering if a template refers to a key that neither the
        properties nor an earlier derived key provides.
        """
        available = set(properties)
        references = definition.find_template_references()
        for key in definition.derived:
            if key not in sourced:
                for derived_key, referenced_key in references:
                    if derived_key == key and referenced_key not in available:
                        raise MissingPropertyKeyError(referenced_key, key)
            available.add(key)

    def _apply_derived(
        self, properties: Dict[str, str], sourced: Set[str], derived: Dict[str, str]
    ) -> None:
        for key, template in derived.items():
            if key in sourced:
                self.logger.log(f"Keeping sourced value of derived key '{key}'", logging.DEBUG)
                continue
            properties[key] = render_template(template, properties, key)
            self.logger.log(f"Derived {key}={properties[key]}", logging.DEBUG)

    def _apply_passthrough(self, properties: Dict[str, str], passthrough: Dict[str, str]) -> None:
        for key, source_key in passthrough.items():
            if key in properties:
                continue
            if source_key not in properties:
                raise MissingPropertyKeyError(source_key, key)
            properties[key] = properties[source_key]

    def _apply_extra_properties(self, properties: Dict[str, str]) -> None:
        encoded = properties.get(EXTRA_PROPERTIES_KEY)
        if not encoded:
            return
        entries = parse_extra_properties(encoded, self.logger)
        for key, value in entries.items():
            if key in properties:
                self.logger.log(f"extraProperties overrides '{key}'", logging.DEBUG)
            properties[key] = value


def resolve(
    sources: Union[str, os.PathLike, Iterable[str]] = (),
    literals: Optional[Dict[str, str]] = None,
    target: BuildTarget = BuildTarget.ANDROID,
    logger: Optional[PluginPropertiesLogger] = None,
) -> PropertySet:
    """
    Resolve a property set with a default-configured PropertyResolver.
    """
    config = PluginPropertiesConfig(target=target)
    resolver = PropertyResolver(config, logger or PluginPropertiesLogger())
    return resolver.resolve(sources, literals)
