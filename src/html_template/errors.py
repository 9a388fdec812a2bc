"""Error taxonomy for template injection."""

from __future__ import annotations

INVALID_ARGS_ERROR = "[html-template] You did not provide a template or target!"


class InjectionError(Exception):
    """Base class for failures raised while injecting a bundle into a template."""

    exit_code = 1


class ConfigurationError(InjectionError):
    """Raised when injection options or build output settings are invalid."""

    exit_code = 2


class TemplateReadError(InjectionError):
    """Raised when the HTML template cannot be read or decoded."""

    exit_code = 3


class AssetReadError(InjectionError):
    """Raised when a bundle asset required for inlining cannot be read."""

    exit_code = 4


class WriteError(InjectionError):
    """Raised when the generated document cannot be written."""

    exit_code = 5
