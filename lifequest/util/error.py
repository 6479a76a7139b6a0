"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Invalid or incomplete configuration."""

    pass


class DependencyInjectionError(UtilError):
    """A provider implementation could not be resolved."""

    pass
