"""
Pydantic data models for the build target definitions shipped in build_targets/*.json.

A build target definition captures everything the resolver needs to know about one
packaging variant: the literal defaults, the templates of derived keys (evaluated in
declaration order) and the passthrough keys that may be supplied under an alternate name.
"""

import json
import os
import re
from pathlib import PurePath
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError

from plugin_properties.plugin_properties_config import BuildTarget
from plugin_properties.plugin_properties_exceptions import BuildTargetDefinitionError

TEMPLATE_PLACEHOLDER = re.compile(r"\{(\w+)\}")

BUILD_TARGETS_DIRECTORY = str(
    PurePath(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "build_targets")
)


class BuildTargetDefinition(BaseModel):
    """
    Complete definition of a build target.

    Structure:
    {
      "_description": "...",
      "literals": {"pluginNodeName": "NotificationScheduler", ...},
      "derived": {"pluginName": "{pluginNodeName}Plugin", ...},
      "passthrough": {"iosPlatformVersion": "platform_version", ...}
    }
    """

    description: Optional[str] = Field(None, alias="_description")
    literals: Dict[str, str] = Field(default_factory=dict, description="Literal defaults")
    derived: Dict[str, str] = Field(
        default_factory=dict, description="Derived key templates, evaluated in order"
    )
    passthrough: Dict[str, str] = Field(
        default_factory=dict, description="Output key to alternate source key"
    )

    class Config:
        extra = "forbid"
        populate_by_name = True

    @classmethod
    def from_dict(cls, data: Dict) -> "BuildTargetDefinition":
        """
        Build a definition from a plain dictionary.

        Raises:
            BuildTargetDefinitionError: If the dictionary does not describe a valid definition
        """
        try:
            return cls(**data)
        except ValidationError as e:
            raise BuildTargetDefinitionError(f"Invalid build target definition: {e}") from e

    @classmethod
    def from_file(cls, path: str) -> "BuildTargetDefinition":
        """
        Load a definition from a JSON file.

        Raises:
            BuildTargetDefinitionError: If the file is missing, is not JSON or fails validation
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise BuildTargetDefinitionError(
                f"Cannot read build target definition: {e}", path
            ) from e
        return cls.from_dict(data)

    @classmethod
    def for_target(cls, target: BuildTarget) -> "BuildTargetDefinition":
        """
        Load the packaged definition of a build target.
        """
        target = BuildTarget(target)
        return cls.from_file(str(PurePath(BUILD_TARGETS_DIRECTORY, f"{target.value}.json")))

    def with_literals(self, literals: Dict[str, str]) -> "BuildTargetDefinition":
        """
        Return a copy of this definition with the given literals merged over its own.
        """
        merged = dict(self.literals)
        merged.update({str(k): str(v) for k, v in literals.items()})
        return self.model_copy(update={"literals": merged})

    def find_template_references(self) -> List[Tuple[str, str]]:
        """
        Find every key referenced by a derived template.

        Returns:
            List of (derived_key, referenced_key) tuples in evaluation order
        """
        references = []
        for derived_key, template in self.derived.items():
            for referenced_key in TEMPLATE_PLACEHOLDER.findall(template):
                references.append((derived_key, referenced_key))
        return references
