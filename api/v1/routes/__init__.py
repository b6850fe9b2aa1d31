"""
Package contenant les routes de l'API v1.
"""
from .capabilities import router as capabilities_router
from .health import router as health_router
from .manifests import router as manifests_router

__all__ = ["capabilities_router", "health_router", "manifests_router"]
