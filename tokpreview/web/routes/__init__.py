"""Route modules for tokpreview web API."""

from . import metadata, videos

__all__ = ["metadata", "videos"]
