from fastapi import APIRouter, Depends
from core.logger import logger
from core.names import SECURITY_CONTEXT_CONSTRAINTS, SECURITY_V1_GROUP_VERSION
from services.discovery import ResourceRegistration, lookup_api_resource
from services.kubernetes import KubernetesService
from api.v1.models.requests import ResourceLookupRequest
from utils.exceptions import KubernetesError

router = APIRouter(prefix="/capabilities", tags=["capabilities"])

def _lookup(k8s_service: KubernetesService, group_version: str, resource: str) -> ResourceRegistration:
  try:
    return lookup_api_resource(k8s_service.discovery, group_version, resource)
  except Exception as e:
    logger.error(f"Failed to discover {resource} in {group_version}: {e}")
    raise KubernetesError(str(e)) from e

@router.get("")
async def get_capabilities(
  k8s_service: KubernetesService = Depends()
):
  """Report the optional APIs the admission controller manifests depend on."""
  registration = _lookup(k8s_service, SECURITY_V1_GROUP_VERSION, SECURITY_CONTEXT_CONSTRAINTS)
  return {
    "securityContextConstraints": registration is ResourceRegistration.PRESENT
  }

@router.get("/resources")
async def get_resource_registration(
  request: ResourceLookupRequest = Depends(),
  k8s_service: KubernetesService = Depends()
):
  logger.info(f"[ PROCESSING ] > Looking up {request.resource} in {request.group_version}")
  registration = _lookup(k8s_service, request.group_version, request.resource)
  return {
    "registration": registration.value,
    "registered": registration is ResourceRegistration.PRESENT
  }
