from .discovery import DiscoveryError
from .io import PageIOError

__all__ = ["DiscoveryError", "PageIOError"]
