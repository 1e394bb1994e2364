"""
This module contains the exceptions raised while resolving plugin build properties.
"""

from typing import Optional


class PropertyResolutionException(Exception):
    """
    Base class for every error raised while resolving plugin build properties.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class PropertySourceNotFoundError(PropertyResolutionException, FileNotFoundError):
    """
    Raised when a declared property file does not exist.
    """

    def __init__(self, path: str):
        super().__init__(f"Property source not found: {path}")
        self.path = path
        self.filename = path


class PropertySourceReadError(PropertyResolutionException):
    """
    Raised when a property file exists but cannot be read or decoded.
    """

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot read property source {path}: {reason}")
        self.path = path
        self.reason = reason


class PropertyParseError(PropertyResolutionException, ValueError):
    """
    Raised by strict parsing when a property line carries no key/value separator.
    """

    def __init__(self, path: str, line_number: int, line: str):
        super().__init__(
            f"Malformed property at {path}:{line_number}: {line!r}"
        )
        self.path = path
        self.line_number = line_number
        self.line = line


class MissingPropertyKeyError(PropertyResolutionException, KeyError):
    """
    Raised when a template or passthrough refers to a key that has not been set.
    """

    def __init__(self, key: str, derived_key: Optional[str] = None):
        if derived_key:
            message = f"Property '{derived_key}' requires '{key}', which is not set"
        else:
            message = f"Property '{key}' is not set"
        super().__init__(message)
        self.key = key
        self.derived_key = derived_key


class BuildTargetDefinitionError(PropertyResolutionException):
    """
    Raised when a build target definition cannot be loaded or fails validation.
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message if path is None else f"{message} ({path})")
        self.path = path
