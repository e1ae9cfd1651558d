# backend/tripgenius/services/http_client.py

import time
from typing import Any, Dict, Optional

import requests

from tripgenius.core.config_loader import settings
from tripgenius.core.errors import UpstreamError
from tripgenius.core.logger import get_logger

log = get_logger("http")


def fetch_json_with_retry(
    url: str,
    params: Optional[Dict[str, Any]] = None,
    retries: Optional[int] = None,
    timeout: Optional[float] = None,
    backoff: Optional[float] = None,
    headers: Optional[Dict[str, str]] = None,
) -> Any:
    """
    GET a JSON document from a third-party API.

    Makes up to ``retries + 1`` attempts, each bounded by ``timeout`` seconds.
    A non-2xx status counts as a failed attempt. Between attempts it sleeps
    ``backoff * (attempt + 1)`` seconds (linear backoff).

    Raises:
        UpstreamError: every attempt failed, or the body was not JSON.
    """
    retries = settings.http_retries if retries is None else retries
    timeout = settings.http_timeout_seconds if timeout is None else timeout
    backoff = settings.http_backoff_seconds if backoff is None else backoff

    merged_headers = {"User-Agent": settings.http_user_agent}
    merged_headers.update(headers or {})

    last_err: Optional[Exception] = None
    for attempt in range(retries + 1):
        try:
            resp = requests.get(url, params=params, headers=merged_headers, timeout=timeout)
            if resp.ok:
                try:
                    return resp.json()
                except ValueError as e:
                    raise UpstreamError("Invalid JSON response", url=url, cause=e) from e
            last_err = requests.HTTPError(f"HTTP {resp.status_code}", response=resp)
        except requests.RequestException as e:
            last_err = e

        log.warning(f"GET {url} failed (attempt {attempt + 1}/{retries + 1}): {last_err}")
        if attempt < retries:
            time.sleep(backoff * (attempt + 1))

    raise UpstreamError(f"Request to {url} failed: {last_err}", url=url, cause=last_err)
