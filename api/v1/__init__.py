"""
Routes de l'API v1.
"""
from fastapi import APIRouter
from .routes.capabilities import router as capabilities_router
from .routes.manifests import router as manifests_router

router = APIRouter(prefix="/v1")
router.include_router(capabilities_router)
router.include_router(manifests_router)

__all__ = ["router"]
