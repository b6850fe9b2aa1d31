"""
Classification of Kubernetes API errors.

Errors raised while talking to the API server are often wrapped by the
services of this package (``raise KubernetesError(...) from e``). The helpers
below look through the whole cause chain of an exception for one that carries
a structured Kubernetes ``Status`` (a reason and a numeric code), so callers
can tell "the object is not there" apart from a genuine failure.
"""
import json
from enum import Enum
from typing import Iterator, Optional, Protocol, Tuple, runtime_checkable
from kubernetes.client import V1Status
from kubernetes.client.exceptions import ApiException

class StatusReason(str, Enum):
  UNKNOWN = ""
  UNAUTHORIZED = "Unauthorized"
  FORBIDDEN = "Forbidden"
  NOT_FOUND = "NotFound"
  ALREADY_EXISTS = "AlreadyExists"
  CONFLICT = "Conflict"
  GONE = "Gone"
  INVALID = "Invalid"
  SERVER_TIMEOUT = "ServerTimeout"
  TIMEOUT = "Timeout"
  TOO_MANY_REQUESTS = "TooManyRequests"
  BAD_REQUEST = "BadRequest"
  METHOD_NOT_ALLOWED = "MethodNotAllowed"
  INTERNAL_ERROR = "InternalError"
  SERVICE_UNAVAILABLE = "ServiceUnavailable"

HTTP_NOT_FOUND = 404

@runtime_checkable
class APIStatus(Protocol):
  """Exposed by errors that can be converted to a Status object."""

  def api_status(self) -> V1Status:
    ...

def _status_from_api_exception(err: ApiException) -> V1Status:
  # The API server answers failures with a JSON Status body
  body = err.body
  if isinstance(body, bytes):
    body = body.decode("utf-8", errors="replace")
  try:
    payload = json.loads(body) if body else None
  except ValueError:
    payload = None
  if isinstance(payload, dict) and payload.get("kind") == "Status":
    return V1Status(
      kind="Status",
      status=payload.get("status"),
      reason=payload.get("reason"),
      code=payload.get("code", err.status),
      message=payload.get("message"),
    )
  return V1Status(code=err.status, message=err.reason)

def _status_for(err: BaseException) -> Optional[V1Status]:
  if isinstance(err, APIStatus):
    return err.api_status()
  if isinstance(err, ApiException):
    return _status_from_api_exception(err)
  return None

def _unwrap(err: BaseException) -> Iterator[BaseException]:
  """
  Yield the explicit causes of ``err`` (``raise ... from``), outermost first.
  An implicit ``__context__`` only records what was being handled and is
  not followed.
  """
  seen = {id(err)}
  current = err
  while current.__cause__ is not None:
    current = current.__cause__
    if id(current) in seen:
      return
    seen.add(id(current))
    yield current

def reason_and_code_for_error(err: Optional[BaseException]) -> Tuple[str, int]:
  """
  Return the reason and code of the first error in the chain of ``err``
  exposing a Status, or ``("", 0)`` when there is none.
  """
  if err is None:
    return StatusReason.UNKNOWN.value, 0
  status = _status_for(err)
  if status is None:
    status = next(
      (found for found in map(_status_for, _unwrap(err)) if found is not None),
      None
    )
  if status is None:
    return StatusReason.UNKNOWN.value, 0
  return status.reason or StatusReason.UNKNOWN.value, status.code or 0

def is_not_found(err: Optional[BaseException]) -> bool:
  """
  Return True if ``err``, or any error in its cause chain, reports a
  ``NotFound`` reason or a 404 code. Returns False when ``err`` is None.
  """
  if err is None:
    return False
  reason, code = reason_and_code_for_error(err)
  return reason == StatusReason.NOT_FOUND.value or code == HTTP_NOT_FOUND
