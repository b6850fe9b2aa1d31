from dataclasses import dataclass
from core.config import Settings, get_settings

@dataclass(frozen=True)
class HyperShiftConfig:
  enabled: bool
  name: str
  namespace: str

def new_hypershift_config(settings: Settings | None = None) -> HyperShiftConfig:
  settings = settings or get_settings()
  return HyperShiftConfig(
    enabled=settings.HYPERSHIFT,
    name=settings.HOSTED_CLUSTER_NAME,
    namespace=settings.HOSTED_CLUSTER_NAMESPACE,
  )
