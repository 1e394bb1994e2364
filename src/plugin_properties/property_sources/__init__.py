"""
Property source loading.

This package handles:
1. Reading property files from disk
2. Parsing the line-oriented key=value format (comments, continuations, escapes)
3. Reporting missing files and malformed lines
"""

from .properties_file import load_properties, parse_properties

__all__ = ["load_properties", "parse_properties"]
