from pydantic import BaseModel, Field
from services.bootstrap import BootstrapResult

class RenderRequest(BaseModel):
  external_control_plane: bool = Field(
    default=False,
    description="Whether the control plane runs outside of the cluster"
  )
  bootstrap: BootstrapResult = Field(
    default_factory=BootstrapResult,
    description="Cluster facts used to resolve the manifests"
  )

class ResourceLookupRequest(BaseModel):
  group_version: str = Field(..., description="API group/version, e.g. security.openshift.io/v1")
  resource: str = Field(..., description="Plural or singular resource name")
