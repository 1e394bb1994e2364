"""
The resolved property mapping and the extraProperties encoding.
"""

import logging
from collections.abc import Mapping
from typing import Dict, Iterator, Optional

from plugin_properties.plugin_properties_logger import PluginPropertiesLogger
from plugin_properties.property_models import PluginProperties

EXTRA_PROPERTIES_KEY = "extraProperties"
EXTRA_ENTRY_SEPARATOR = ","
EXTRA_KEY_VALUE_SEPARATOR = ":"


def parse_extra_properties(
    value: str, logger: Optional[PluginPropertiesLogger] = None
) -> Dict[str, str]:
    """
    Parse an extraProperties value of the form `k1:v1,k2:v2`.

    There is no escaping: a token that does not split into exactly two parts on
    `:` is skipped, as are empty tokens and tokens with an empty key.

    Args:
        value: The encoded extraProperties value
        logger: Receives a warning for every skipped token

    Returns:
        Dictionary of the well-formed entries, in order
    """
    entries: Dict[str, str] = {}
    for token in value.split(EXTRA_ENTRY_SEPARATOR):
        token = token.strip()
        if not token:
            continue
        parts = token.split(EXTRA_KEY_VALUE_SEPARATOR)
        if len(parts) != 2 or not parts[0].strip():
            if logger is not None:
                logger.log(f"Skipping malformed extraProperties entry '{token}'", logging.WARNING)
            continue
        entries[parts[0].strip()] = parts[1].strip()
    return entries


class PropertySet(Mapping):
    """
    Read-only mapping from property name to string value.

    Two property sets are equal when they hold the same keys and values.
    """

    def __init__(self, properties: Optional[Dict[str, str]] = None):
        self._properties: Dict[str, str] = dict(properties or {})

    def __getitem__(self, key: str) -> str:
        return self._properties[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self) -> str:
        return f"PropertySet({self._properties!r})"

    def as_dict(self) -> Dict[str, str]:
        """Return a mutable copy of the mapping."""
        return dict(self._properties)

    def extra_properties(self) -> Dict[str, str]:
        """The entries encoded in extraProperties, or an empty dictionary."""
        encoded = self._properties.get(EXTRA_PROPERTIES_KEY)
        if not encoded:
            return {}
        return parse_extra_properties(encoded)

    def to_plugin_properties(self) -> PluginProperties:
        """
        Build the typed record for downstream build steps.

        Raises:
            pydantic.ValidationError: If a fixed key is missing
        """
        return PluginProperties(**self._properties)
