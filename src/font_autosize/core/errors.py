"""
Startup errors for the font configuration.
"""


class ConfigurationError(Exception):
    """The font configuration is missing a value or holds a malformed one."""


class ResourceNotFoundError(ConfigurationError):
    """The font configuration resource does not exist."""

    def __init__(self, path):
        super().__init__(f"Font configuration not found: {path}")
        self.path = path
