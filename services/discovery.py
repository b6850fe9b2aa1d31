"""
API resource discovery.

Answers "is this API resource served by the cluster?" from the discovery
endpoints of the API server. A group/version the server does not know about
is an expected answer, not a failure.
"""
from enum import Enum
from typing import Protocol
from kubernetes import client
from core.logger import logger
from core.names import SECURITY_CONTEXT_CONSTRAINTS, SECURITY_V1_GROUP_VERSION
from utils.api_status import is_not_found

class ServerResourcesInterface(Protocol):
  def server_resources_for_group_version(self, group_version: str) -> client.V1APIResourceList:
    ...

class ResourceRegistration(str, Enum):
  PRESENT = "Present"
  ABSENT = "Absent"
  GROUP_VERSION_ABSENT = "GroupVersionAbsent"

class DiscoveryClient:
  """Discovery over the REST endpoints of an ApiClient."""

  def __init__(self, api_client: client.ApiClient):
    self.api_client = api_client

  def server_resources_for_group_version(self, group_version: str) -> client.V1APIResourceList:
    if "/" in group_version:
      path = f"/apis/{group_version}"
    else:
      path = f"/api/{group_version}"
    return self.api_client.call_api(
      path,
      "GET",
      header_params={"Accept": "application/json"},
      response_type="V1APIResourceList",
      auth_settings=["BearerToken"],
      _return_http_data_only=True,
    )

def lookup_api_resource(
  discovery: ServerResourcesInterface,
  group_version: str,
  resource_name: str
) -> ResourceRegistration:
  try:
    apis = discovery.server_resources_for_group_version(group_version)
  except Exception as e:
    if not is_not_found(e):
      raise
    logger.debug(f"[ DISCOVERY ] > Group version {group_version} is not served")
    return ResourceRegistration.GROUP_VERSION_ABSENT

  if apis is not None:
    for api in apis.resources or []:
      if api.name == resource_name or api.singular_name == resource_name:
        return ResourceRegistration.PRESENT
  return ResourceRegistration.ABSENT

def is_api_resource_registered(
  discovery: ServerResourcesInterface,
  group_version: str,
  resource_name: str
) -> bool:
  """
  Determine if a specified API resource is registered on the cluster.
  Errors other than a not found group/version are raised unchanged.
  """
  registration = lookup_api_resource(discovery, group_version, resource_name)
  return registration is ResourceRegistration.PRESENT

def is_scc_supported(discovery: ServerResourcesInterface) -> bool:
  return is_api_resource_registered(
    discovery, SECURITY_V1_GROUP_VERSION, SECURITY_CONTEXT_CONSTRAINTS
  )
