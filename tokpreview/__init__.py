"""TikTok preview metadata proxy for creator portfolio sites."""

try:
    from importlib.metadata import version

    __version__ = version("tokpreview")
except Exception:
    __version__ = "0.0.0-dev"
