from fastapi import HTTPException
from kubernetes.client import V1Status
from typing import Any

class KubernetesError(HTTPException):
  def __init__(self, detail: Any = None, status_code: int = 500):
    super().__init__(status_code=status_code, detail=f"Kubernetes operation failed: {detail}")

class ResourceNotFoundError(HTTPException):
  def __init__(self, resource: str, name: str):
    super().__init__(
      status_code=404,
      detail=f"{resource} '{name}' not found"
    )
    self.resource = resource
    self.name = name

  def api_status(self) -> V1Status:
    return V1Status(
      kind="Status",
      status="Failure",
      reason="NotFound",
      code=404,
      message=self.detail,
    )

class ManifestRenderError(HTTPException):
  def __init__(self, path: str, detail: Any = None):
    super().__init__(
      status_code=500,
      detail=f"failed to render manifest {path}: {detail}"
    )
    self.path = path
