from fastapi import APIRouter, Depends
from core.config import get_settings
from core.logger import logger
from services.kubernetes import KubernetesService
from services.multus_admission_controller import render_multus_admission_controller_config
from api.v1.models.requests import RenderRequest

router = APIRouter(prefix="/multus-admission-controller", tags=["manifests"])

@router.post("/render")
async def render_manifests(
  request: RenderRequest,
  k8s_service: KubernetesService = Depends()
):
  """Render the Multus admission controller manifests for the cluster."""
  settings = get_settings()
  logger.info(f"[ PROCESSING ] > Rendering multus admission controller from {settings.MANIFEST_DIR}")

  objs = await render_multus_admission_controller_config(
    settings.MANIFEST_DIR,
    request.external_control_plane,
    request.bootstrap,
    k8s_service,
    settings
  )
  return {
    "status": "success",
    "count": len(objs),
    "objects": objs
  }
