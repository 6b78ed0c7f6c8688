"""
HTTP plumbing for the planner backend.

Every call opens a short-lived ``httpx.Client`` and translates transport,
timeout and status failures into :class:`UpstreamServiceError`, so callers
deal with one exception type whatever went wrong on the wire.
"""
from __future__ import annotations

import logging
import os
import typing as t

import httpx

from study_planner.errors import UpstreamServiceError

logger = logging.getLogger(__name__)

# Service URL - configurable via environment variable
API_URL = os.getenv("STUDY_PLANNER_API_URL", "http://localhost:4000")

# Timeout settings (in seconds)
STANDARD_TIMEOUT = float(os.getenv("STUDY_PLANNER_TIMEOUT", "30"))  # CRUD operations
OPTIMIZER_TIMEOUT = float(os.getenv("STUDY_PLANNER_OPTIMIZER_TIMEOUT", "300"))  # plan optimization

# Tests swap in an httpx.MockTransport here
_transport: t.Optional[httpx.BaseTransport] = None


def request_json(
    method: str,
    path: str,
    *,
    params: t.Optional[dict[str, t.Any]] = None,
    json: t.Optional[t.Any] = None,
    timeout: float = STANDARD_TIMEOUT,
) -> t.Any:
    """
    Send a request to the planner backend and decode the JSON reply.

    Returns None for empty bodies (e.g. after a DELETE).
    """
    logger.debug("%s %s params=%s", method, path, params)
    try:
        with httpx.Client(base_url=API_URL, timeout=timeout, transport=_transport) as client:
            response = client.request(method, path, params=params, json=json)
            response.raise_for_status()
    except httpx.TimeoutException as e:
        raise UpstreamServiceError(f"{method} {path} timed out after {timeout} seconds") from e
    except httpx.HTTPStatusError as e:
        raise UpstreamServiceError(
            f"HTTP error from planner API: {e.response.status_code} {e.response.text}",
            status_code=e.response.status_code,
        ) from e
    except httpx.HTTPError as e:
        raise UpstreamServiceError(f"Error calling planner API: {e}") from e

    if not response.content:
        return None
    return response.json()
