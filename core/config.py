from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
  APP_NAME: str = "multus-admission-renderer"
  APP_VERSION: str = "1.0.0"
  APP_PORT: int = 8081
  LOG_LEVEL: str = "INFO"

  # K8s settings
  KUBE_CONFIG_DEFAULT_LOCATION: str = "~/.kube/config"
  KUBE_CONFIG_PATH: str | None = None
  MANAGEMENT_KUBE_CONFIG_PATH: str | None = None

  # Rendering
  MANIFEST_DIR: str = "manifests"
  RELEASE_VERSION: str = ""
  MULTUS_ADMISSION_CONTROLLER_IMAGE: str = ""
  KUBE_RBAC_PROXY_IMAGE: str = ""
  RHOBS_MONITORING: str = ""

  # HyperShift
  HYPERSHIFT: bool = False
  HOSTED_CLUSTER_NAME: str = ""
  HOSTED_CLUSTER_NAMESPACE: str = ""
  CLI_IMAGE: str = ""
  TOKEN_MINTER_IMAGE: str = ""
  TOKEN_AUDIENCE: str = ""

  class Config:
    env_file = ".env"

@lru_cache()
def get_settings() -> Settings:
  return Settings()
