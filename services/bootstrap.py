from pydantic import BaseModel, Field
from typing import Dict, Optional

API_SERVER_DEFAULT = "default"
API_SERVER_DEFAULT_LOCAL = "default-local"

HIGHLY_AVAILABLE_TOPOLOGY = "HighlyAvailable"
SINGLE_REPLICA_TOPOLOGY = "SingleReplica"
EXTERNAL_TOPOLOGY = "External"

class APIServer(BaseModel):
  host: str = Field(..., description="Host of the API server")
  port: str = Field(..., description="Port of the API server")

class HostedControlPlaneStatus(BaseModel):
  controller_availability_policy: str = Field(
    default=HIGHLY_AVAILABLE_TOPOLOGY,
    description="Availability policy of the hosted control plane controllers"
  )

class InfraStatus(BaseModel):
  control_plane_topology: str = Field(default=HIGHLY_AVAILABLE_TOPOLOGY)
  hosted_control_plane: Optional[HostedControlPlaneStatus] = None
  api_servers: Dict[str, APIServer] = Field(default_factory=dict)

class BootstrapResult(BaseModel):
  """Cluster facts probed before rendering."""
  infra: InfraStatus = Field(default_factory=InfraStatus)
