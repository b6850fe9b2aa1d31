"""
Package contenant les modèles Pydantic pour l'API v1.
"""
from .requests import RenderRequest, ResourceLookupRequest

__all__ = ["RenderRequest", "ResourceLookupRequest"]
