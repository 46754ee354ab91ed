"""Exceptions raised by mandelview."""


class ConfigError(ValueError):
    """Invalid render or view configuration."""
