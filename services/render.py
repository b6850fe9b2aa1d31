"""
Manifest rendering.

Every manifest file of a directory is a Jinja2 template producing one or more
YAML documents. Rendering returns the decoded objects, in file order.
"""
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List
import yaml
from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError
from core.logger import logger
from utils.exceptions import ManifestRenderError

MANIFEST_EXTENSIONS = (".yaml", ".yml", ".json")

def _is_set(value: Any) -> bool:
  return value not in (None, "", False)

def _get_or(value: Any, default: Any) -> Any:
  return value if _is_set(value) else default

@dataclass
class RenderData:
  data: Dict[str, Any] = field(default_factory=dict)
  funcs: Dict[str, Callable] = field(default_factory=dict)

def make_render_data() -> RenderData:
  return RenderData(funcs={"getOr": _get_or, "isSet": _is_set})

def list_manifests(manifest_dir: str) -> List[str]:
  return sorted(
    name for name in os.listdir(manifest_dir)
    if name.endswith(MANIFEST_EXTENSIONS)
    and os.path.isfile(os.path.join(manifest_dir, name))
  )

def render_template(env: Environment, name: str, data: RenderData) -> List[Dict[str, Any]]:
  try:
    text = env.get_template(name).render(**data.data)
  except TemplateError as e:
    raise ManifestRenderError(name, e) from e
  try:
    docs = list(yaml.safe_load_all(text))
  except yaml.YAMLError as e:
    raise ManifestRenderError(name, e) from e

  objs = []
  for doc in docs:
    if doc is None:
      continue
    if not isinstance(doc, dict) or "apiVersion" not in doc or "kind" not in doc:
      raise ManifestRenderError(name, "document is not a Kubernetes object")
    objs.append(doc)
  return objs

def render_dir(manifest_dir: str, data: RenderData) -> List[Dict[str, Any]]:
  if not os.path.isdir(manifest_dir):
    raise ManifestRenderError(manifest_dir, "not a directory")
  env = Environment(
    loader=FileSystemLoader(manifest_dir),
    undefined=StrictUndefined,
    keep_trailing_newline=True,
  )
  env.globals.update(data.funcs)

  objs = []
  for name in list_manifests(manifest_dir):
    rendered = render_template(env, name, data)
    logger.debug(f"[ RENDERING ] > {name}: {len(rendered)} object(s)")
    objs.extend(rendered)
  return objs
