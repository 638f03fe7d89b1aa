class DiscoveryError(Exception):
    """Raised when the source tree cannot be listed."""
