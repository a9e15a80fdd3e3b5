# qverse/utils/http_retry.py
"""
GET with retry for the Quran API.

Retries live here and only here: 429 and 5xx responses and dropped
connections are retried with backoff, everything else goes straight back
to the caller. Failures that outlast the retry budget surface as
RuntimeError so the client can turn them into an UpstreamError.

Usage:
    from qverse.utils.http_retry import get_with_retry

    response = get_with_retry(
        "https://api.quran.com/api/v4/chapters/2",
        params={"language": "en"},
    )
"""

import logging
import time
from typing import Optional

import requests

logger = logging.getLogger(__name__)

RATE_LIMIT_CAP = 30


def _rate_limit_wait(response: requests.Response, attempt: int) -> int:
    """Seconds to wait after a 429: Retry-After if numeric, else capped backoff."""
    header = response.headers.get("retry-after")
    if header:
        try:
            return int(header)
        except ValueError:
            pass
    return min(2 ** attempt * 2, RATE_LIMIT_CAP)


def _retry_wait(response: requests.Response, attempt: int) -> Optional[int]:
    """Wait before retrying this response, or None if it should be returned."""
    if response.status_code == 429:
        return _rate_limit_wait(response, attempt)
    if response.status_code >= 500:
        return 2 ** attempt
    return None


def get_with_retry(
    url: str,
    params: Optional[dict] = None,
    headers: Optional[dict] = None,
    timeout: int = 15,
    max_retries: int = 3,
    session: Optional[requests.Session] = None,
) -> requests.Response:
    """
    Issue a GET, retrying rate limits, server errors and connection drops.

    Args:
        url: Endpoint URL
        params: Query string parameters
        headers: HTTP headers
        timeout: Per-request timeout in seconds
        max_retries: Total attempts
        session: requests.Session to reuse (module-level requests if None)

    Returns:
        The first response that is neither 429 nor 5xx

    Raises:
        RuntimeError: On timeout (never retried), repeated connection
            failure, or when every attempt was rate limited or failed
    """
    http = session or requests
    last_status = None

    for attempt in range(1, max_retries + 1):
        is_last = attempt == max_retries
        try:
            response = http.get(url, params=params, headers=headers, timeout=timeout)
        except requests.Timeout:
            raise RuntimeError(f"GET {url} timed out after {timeout}s")
        except requests.ConnectionError as e:
            if is_last:
                raise RuntimeError(f"GET {url}: connection failed {max_retries} times: {e}")
            wait = 2 ** (attempt - 1)
            logger.warning(f"Connection to {url} dropped ({e}), retry {attempt} in {wait}s")
            time.sleep(wait)
            continue

        wait = _retry_wait(response, attempt - 1)
        if wait is None:
            return response

        last_status = response.status_code
        logger.warning(f"GET {url} returned {last_status} (attempt {attempt}/{max_retries})")
        if not is_last:
            time.sleep(wait)

    raise RuntimeError(f"GET {url} gave up after {max_retries} attempts (last status: {last_status})")
