"""
Property resolution.

This package handles:
1. Loading property files in order, later files overwriting earlier ones
2. Filling in the literal defaults of the build target
3. Computing derived keys from templates and iOS passthrough keys
4. Expanding the extraProperties escape hatch into top-level keys
"""

from .property_set import PropertySet, parse_extra_properties
from .resolver import PropertyResolver, render_template, resolve

__all__ = [
    "PropertySet",
    "PropertyResolver",
    "parse_extra_properties",
    "render_template",
    "resolve",
]
