class ConfigurationError(Exception):
    """Raised when the loading bar settings cannot be loaded or are invalid."""
