"""Infrastructure modules for webbind."""

from . import config_store

__all__ = ["config_store"]
