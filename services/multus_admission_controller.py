import base64
import os
from typing import Any, Dict, List
from core.config import Settings, get_settings
from core.logger import logger
from core import names
from services.bootstrap import (
  API_SERVER_DEFAULT_LOCAL,
  EXTERNAL_TOPOLOGY,
  SINGLE_REPLICA_TOPOLOGY,
  BootstrapResult,
)
from services.hypershift import new_hypershift_config
from services.kubernetes import KubernetesService
from services.render import make_render_data, render_dir
from utils.exceptions import KubernetesError

def get_multus_admission_controller_replicas(bootstrap_result: BootstrapResult) -> int:
  infra = bootstrap_result.infra
  replicas = 2
  if infra.control_plane_topology == EXTERNAL_TOPOLOGY:
    hcp = infra.hosted_control_plane
    if hcp is not None and hcp.controller_availability_policy == SINGLE_REPLICA_TOPOLOGY:
      replicas = 1
  elif infra.control_plane_topology == SINGLE_REPLICA_TOPOLOGY:
    replicas = 1
  return replicas

async def render_multus_admission_controller_config(
  manifest_dir: str,
  external_control_plane: bool,
  bootstrap_result: BootstrapResult,
  k8s_service: 'KubernetesService',
  settings: Settings | None = None
) -> List[Dict[str, Any]]:
  """Return the manifests of the Multus admission controller."""
  settings = settings or get_settings()

  replicas = get_multus_admission_controller_replicas(bootstrap_result)
  ignored_namespaces = await k8s_service.namespace_service.get_ignored_namespaces()

  data = make_render_data()
  data.data["ReleaseVersion"] = settings.RELEASE_VERSION
  data.data["MultusAdmissionControllerImage"] = settings.MULTUS_ADMISSION_CONTROLLER_IMAGE
  data.data["IgnoredNamespace"] = ignored_namespaces
  data.data["MultusValidatingWebhookName"] = names.MULTUS_VALIDATING_WEBHOOK
  data.data["KubeRBACProxyImage"] = settings.KUBE_RBAC_PROXY_IMAGE
  data.data["ExternalControlPlane"] = external_control_plane
  data.data["Replicas"] = replicas
  # HyperShift
  hsc = new_hypershift_config(settings)
  data.data["HyperShiftEnabled"] = hsc.enabled
  data.data["ManagementClusterName"] = names.MANAGEMENT_CLUSTER_NAME
  data.data["AdmissionControllerNamespace"] = names.MULTUS_NAMESPACE
  data.data["RHOBSMonitoring"] = settings.RHOBS_MONITORING
  if hsc.enabled:
    api_server = bootstrap_result.infra.api_servers.get(API_SERVER_DEFAULT_LOCAL)
    if api_server is None:
      raise KubernetesError(f"bootstrap result has no '{API_SERVER_DEFAULT_LOCAL}' API server")
    data.data["AdmissionControllerNamespace"] = hsc.namespace
    data.data["KubernetesServiceHost"] = api_server.host
    data.data["KubernetesServicePort"] = api_server.port
    data.data["CLIImage"] = settings.CLI_IMAGE
    data.data["TokenMinterImage"] = settings.TOKEN_MINTER_IMAGE
    data.data["TokenAudience"] = settings.TOKEN_AUDIENCE

    # The service lives on the management cluster, so is its serving CA
    management = k8s_service.management
    ca = await management.get_service_ca(hsc.namespace)
    data.data["ManagementServiceCABundle"] = base64.urlsafe_b64encode(ca.encode()).decode()

    hcp = await management.get_hosted_control_plane(hsc.namespace, hsc.name)
    data.data["ClusterIDLabel"] = names.CLUSTER_ID_LABEL
    data.data["ClusterID"] = (hcp.get("spec") or {}).get("clusterID", "")

  logger.info(
    f"[ RENDERING ] > Multus admission controller in {data.data['AdmissionControllerNamespace']} "
    f"with {replicas} replica(s)"
  )
  return render_dir(
    os.path.join(manifest_dir, names.MULTUS_ADMISSION_CONTROLLER_MANIFESTS), data
  )
