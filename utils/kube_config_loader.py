from core.config import get_settings
from kubernetes.client import ApiClient
from kubernetes.config import load_kube_config, load_incluster_config, new_client_from_config
from os.path import exists, expanduser
from core.logger import logger

settings = get_settings()

def load_config(**kwargs):
  """
  Wrapper function to load the kube_config of the cluster the admission
  controller is rendered for.
  It will initially try to load_kube_config from provided path,
  then check if the KUBE_CONFIG_DEFAULT_LOCATION exists
  If neither exists, it will fall back to load_incluster_config
  and inform the user accordingly.

  :param kwargs: A combination of all possible kwargs that
  can be passed to either load_kube_config or
  load_incluster_config functions.
  """
  if kwargs.get("config_file"):
    logger.info(f"[ INITIALIZATION ] > Loading kubeconfig from config_file file {kwargs.get('config_file')}")
    load_kube_config(**kwargs)
    return
  kwargs.pop("config_file", None)
  if exists(expanduser(settings.KUBE_CONFIG_DEFAULT_LOCATION)):
    logger.info(f"[ INITIALIZATION ] > Loading kubeconfig from file {settings.KUBE_CONFIG_DEFAULT_LOCATION}")
    load_kube_config(**kwargs)
  else:
    logger.warning(
      "[ INITIALIZATION ] > kube_config_path not provided and "
      f"default location ({settings.KUBE_CONFIG_DEFAULT_LOCATION}) does not exist. "
      "Using inCluster Config. This might not work."
    )
    load_incluster_config()

def new_api_client(config_file: str | None = None) -> ApiClient:
  """
  Build a standalone ApiClient for another cluster (the HyperShift
  management cluster) without touching the default configuration.
  Without a config file the default client configuration is reused.
  """
  if not config_file:
    return ApiClient()
  logger.info(f"[ INITIALIZATION ] > Loading management kubeconfig from file {config_file}")
  return new_client_from_config(config_file=config_file)
