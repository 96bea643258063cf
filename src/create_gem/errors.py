"""Error types for create-gem.

Every error is a ``click.ClickException`` so the command line reports it as a
single ``Error: <message>`` line and exits non-zero.
"""

import click


class CreateGemError(click.ClickException):
    """Base error for all create-gem failures."""


class ConfigError(CreateGemError):
    """The config file is corrupt or unreadable."""


class ValidationError(CreateGemError):
    """A gem name or option value is invalid."""


class UnsupportedBundlerVersionError(CreateGemError):
    """The Bundler version is outside every known compatibility range."""

    def __init__(self, message, version=None, supported_ranges=()):
        super().__init__(message)
        self.version = version
        self.supported_ranges = list(supported_ranges)


class UnknownOptionError(CreateGemError):
    """An option key is not present in the catalog."""

    def __init__(self, key):
        super().__init__(f"Unknown option: {key}")
        self.key = key


class InconsistentCatalogError(CreateGemError):
    """The compatibility table and the catalog disagree about an option."""
