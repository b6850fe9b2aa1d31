"""
Package core contenant la configuration, les noms partagés et le logger.
"""
from .config import Settings, get_settings
from .logger import logger
from . import names

__all__ = ["Settings", "get_settings", "logger", "names"]
