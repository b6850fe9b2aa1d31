"""Unit tests for API resource discovery."""

import pytest
from unittest.mock import MagicMock
from kubernetes.client import V1APIResource, V1APIResourceList
from kubernetes.client.exceptions import ApiException

from services.discovery import (
  DiscoveryClient,
  ResourceRegistration,
  is_api_resource_registered,
  is_scc_supported,
  lookup_api_resource,
)
from utils.exceptions import KubernetesError

SECURITY_V1 = "security.openshift.io/v1"


def resource(name, singular_name):
  return V1APIResource(
    kind=singular_name.capitalize(),
    name=name,
    singular_name=singular_name,
    namespaced=False,
    verbs=["get", "list", "watch"],
  )


def discovery_with(*resources):
  discovery = MagicMock()
  discovery.server_resources_for_group_version.return_value = V1APIResourceList(
    group_version=SECURITY_V1,
    resources=list(resources),
  )
  return discovery


class TestLookupAPIResource:

  @pytest.mark.unit
  def test_plural_name_match(self):
    discovery = discovery_with(
      resource("rangeallocations", "rangeallocation"),
      resource("securitycontextconstraints", "securitycontextconstraint"),
    )
    assert lookup_api_resource(discovery, SECURITY_V1, "securitycontextconstraints") is ResourceRegistration.PRESENT
    discovery.server_resources_for_group_version.assert_called_once_with(SECURITY_V1)

  @pytest.mark.unit
  def test_singular_name_match(self):
    discovery = discovery_with(resource("securitycontextconstraints", "securitycontextconstraint"))
    assert is_api_resource_registered(discovery, SECURITY_V1, "securitycontextconstraint") is True

  @pytest.mark.unit
  def test_match_is_case_sensitive(self):
    discovery = discovery_with(resource("securitycontextconstraints", "securitycontextconstraint"))
    assert lookup_api_resource(discovery, SECURITY_V1, "SecurityContextConstraints") is ResourceRegistration.ABSENT

  @pytest.mark.unit
  def test_resource_absent_from_served_group_version(self):
    discovery = discovery_with(resource("rangeallocations", "rangeallocation"))
    assert lookup_api_resource(discovery, SECURITY_V1, "securitycontextconstraints") is ResourceRegistration.ABSENT
    assert is_api_resource_registered(discovery, SECURITY_V1, "securitycontextconstraints") is False

  @pytest.mark.unit
  def test_empty_response(self):
    discovery = MagicMock()
    discovery.server_resources_for_group_version.return_value = None
    assert lookup_api_resource(discovery, SECURITY_V1, "securitycontextconstraints") is ResourceRegistration.ABSENT

  @pytest.mark.unit
  def test_group_version_not_found(self):
    discovery = MagicMock()
    discovery.server_resources_for_group_version.side_effect = ApiException(status=404, reason="Not Found")
    assert lookup_api_resource(discovery, SECURITY_V1, "securitycontextconstraints") is ResourceRegistration.GROUP_VERSION_ABSENT
    assert is_api_resource_registered(discovery, SECURITY_V1, "securitycontextconstraints") is False

  @pytest.mark.unit
  def test_wrapped_not_found(self):
    discovery = MagicMock()
    error = KubernetesError("discovery failed")
    error.__cause__ = ApiException(status=404)
    discovery.server_resources_for_group_version.side_effect = error
    assert lookup_api_resource(discovery, SECURITY_V1, "securitycontextconstraints") is ResourceRegistration.GROUP_VERSION_ABSENT

  @pytest.mark.unit
  def test_other_errors_propagate_unchanged(self):
    error = ApiException(status=503, reason="Service Unavailable")
    discovery = MagicMock()
    discovery.server_resources_for_group_version.side_effect = error
    with pytest.raises(ApiException) as excinfo:
      is_api_resource_registered(discovery, SECURITY_V1, "securitycontextconstraints")
    assert excinfo.value is error

  @pytest.mark.unit
  def test_error_raised_while_handling_not_found_propagates(self):
    discovery = MagicMock()

    def failing_retry(group_version):
      try:
        raise ApiException(status=404)
      except ApiException:
        raise ConnectionError("connection reset")

    discovery.server_resources_for_group_version.side_effect = failing_retry
    with pytest.raises(ConnectionError):
      lookup_api_resource(discovery, SECURITY_V1, "securitycontextconstraints")

  @pytest.mark.unit
  def test_unstructured_errors_propagate(self):
    discovery = MagicMock()
    discovery.server_resources_for_group_version.side_effect = ConnectionError("refused")
    with pytest.raises(ConnectionError):
      lookup_api_resource(discovery, SECURITY_V1, "securitycontextconstraints")


class TestSccSupported:

  @pytest.mark.unit
  def test_supported(self):
    discovery = discovery_with(resource("securitycontextconstraints", "securitycontextconstraint"))
    assert is_scc_supported(discovery) is True
    discovery.server_resources_for_group_version.assert_called_once_with("security.openshift.io/v1")

  @pytest.mark.unit
  def test_not_openshift(self):
    discovery = MagicMock()
    discovery.server_resources_for_group_version.side_effect = ApiException(status=404)
    assert is_scc_supported(discovery) is False


class TestDiscoveryClient:

  @pytest.mark.unit
  def test_named_group_path(self):
    api_client = MagicMock()
    DiscoveryClient(api_client).server_resources_for_group_version(SECURITY_V1)
    args, kwargs = api_client.call_api.call_args
    assert args == ("/apis/security.openshift.io/v1", "GET")
    assert kwargs["response_type"] == "V1APIResourceList"
    assert kwargs["_return_http_data_only"] is True

  @pytest.mark.unit
  def test_core_group_path(self):
    api_client = MagicMock()
    DiscoveryClient(api_client).server_resources_for_group_version("v1")
    args, _ = api_client.call_api.call_args
    assert args == ("/api/v1", "GET")
