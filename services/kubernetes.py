import asyncio
import threading
from kubernetes import client
from core.logger import logger
from core.config import get_settings
from core import names
from services.discovery import DiscoveryClient
from utils.exceptions import KubernetesError, ResourceNotFoundError
from utils.api_status import is_not_found
from utils.kube_config_loader import load_config, new_api_client
from utils.singleton import Singleton
from typing import Any, Dict

settings = get_settings()

class KubernetesService(Singleton):
  api_client: client.ApiClient
  core_v1: client.CoreV1Api
  custom_objects: client.CustomObjectsApi
  version_api: client.VersionApi
  discovery: DiscoveryClient
  namespace_service: 'NamespaceService'

  def __init__(self):
    if self._Singleton__initialized:
      return
    self._Singleton__initialized = True
    self.lock = threading.Lock()
    self._management = None
    self._init_client()
    self.namespace_service = self.NamespaceService(self)

  def _init_client(self):
    try:
      load_config(config_file=settings.KUBE_CONFIG_PATH)
      self.api_client = client.ApiClient()
      self.core_v1 = client.CoreV1Api(self.api_client)
      self.custom_objects = client.CustomObjectsApi(self.api_client)
      self.version_api = client.VersionApi(self.api_client)
      self.discovery = DiscoveryClient(self.api_client)
    except Exception as e:
      logger.error(f"Failed to initialize Kubernetes client: {e}")
      raise KubernetesError(str(e)) from e

  @property
  def management(self) -> 'ManagementClusterService':
    """Client of the HyperShift management cluster, created on first use."""
    with self.lock:
      if self._management is None:
        try:
          api_client = new_api_client(settings.MANAGEMENT_KUBE_CONFIG_PATH)
        except Exception as e:
          logger.error(f"Failed to initialize {names.MANAGEMENT_CLUSTER_NAME} cluster client: {e}")
          raise KubernetesError(str(e)) from e
        self._management = self.ManagementClusterService(api_client)
      return self._management

  async def get_api_version(self) -> client.VersionInfo:
    try:
      version = self.version_api.get_code()
      return version
    except Exception as e:
      logger.error(f"Cannot get API version")
      raise KubernetesError(str(e)) from e

  class NamespaceService(Singleton):
    def __init__(self, kubernetes_service: 'KubernetesService'):
      if self._Singleton__initialized:
        return
      self._Singleton__initialized = True
      self.lock = asyncio.Lock()
      self.k8s_service = kubernetes_service
      self._ignored_namespaces = ""

    async def get_openshift_namespaces(self) -> str:
      """Collect openshift related namespaces, as a comma separated list."""
      try:
        ns_list = self.k8s_service.core_v1.list_namespace(
          label_selector=names.OPENSHIFT_NAMESPACE_SELECTOR
        )
      except Exception as e:
        raise KubernetesError(
          f"failed to get namespaces to render multus admission controller manifests: {e}"
        ) from e
      return ",".join(ns.metadata.name for ns in ns_list.items)

    async def get_ignored_namespaces(self) -> str:
      """
      Namespaces the admission controller should not watch. The list is
      fetched until a non empty value has been cached.
      """
      async with self.lock:
        if self._ignored_namespaces == "":
          try:
            self._ignored_namespaces = await self.get_openshift_namespaces()
          except KubernetesError as e:
            logger.warning(f"failed to get openshift namespaces: {e.detail}")
        return self._ignored_namespaces

  class ManagementClusterService:
    def __init__(self, api_client: client.ApiClient):
      self.api_client = api_client
      self.core_v1 = client.CoreV1Api(api_client)
      self.custom_objects = client.CustomObjectsApi(api_client)

    async def get_service_ca(self, namespace: str) -> str:
      """Serving CA of the management cluster services in ``namespace``."""
      try:
        config_map = self.core_v1.read_namespaced_config_map(
          names.SERVICE_CA_CONFIGMAP, namespace
        )
      except Exception as e:
        raise KubernetesError(f"failed to get managments clusters service CA: {e}") from e

      data = config_map.data or {}
      if names.SERVICE_CA_KEY not in data:
        raise KubernetesError(
          f"(v1, Kind=ConfigMap) {namespace}/{names.SERVICE_CA_CONFIGMAP} "
          f"missing '{names.SERVICE_CA_KEY}' key"
        )
      return data[names.SERVICE_CA_KEY]

    async def get_hosted_control_plane(self, namespace: str, name: str) -> Dict[str, Any]:
      try:
        return self.custom_objects.get_namespaced_custom_object(
          group=names.HOSTED_CONTROL_PLANE_GROUP,
          version=names.HOSTED_CONTROL_PLANE_VERSION,
          namespace=namespace,
          plural=names.HOSTED_CONTROL_PLANE_PLURAL,
          name=name,
        )
      except Exception as e:
        if is_not_found(e):
          raise ResourceNotFoundError("HostedControlPlane", f"{namespace}/{name}") from e
        raise KubernetesError(f"failed to get hosted controlplane: {e}") from e
