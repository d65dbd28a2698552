"""
Convenience imports for configuration.

Allows callers to simply do ``from config import Settings, load_settings``.
"""

from .settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
