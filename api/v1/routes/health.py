from fastapi import APIRouter, Depends
from core.config import get_settings
from services.kubernetes import KubernetesService

router = APIRouter(tags=["health"])

@router.get("/healthz")
async def health_check():
  return {"status": "healthy"}

@router.get("/readyz")
async def ready_check(
  k8s_service: KubernetesService = Depends()
):
  """Ready once the API server of the target cluster answers."""
  settings = get_settings()
  version = await k8s_service.get_api_version()
  return {
    "status": "ready",
    "version": settings.APP_VERSION,
    "kube API version": version.git_version,
    "hypershift": settings.HYPERSHIFT
  }
