class DactylError(Exception):
    pass

class ConfigurationError(DactylError, ValueError):
    """A board parameter is missing, unknown or out of range."""

class UnsupportedSwitchType(ConfigurationError):
    """The switch family has no entry in the switch table."""
