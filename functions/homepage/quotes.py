"""
Proxy for the hitokoto quote API so browsers avoid cross-origin calls.
"""

from __future__ import annotations

from typing import Any

import requests

REQUEST_TIMEOUT = 10  # seconds


def fetch_hitokoto(url: str, timeout: float = REQUEST_TIMEOUT) -> Any:
    """
    Fetches one quote from the hitokoto API.

    Args:
        url (str): The quote API endpoint.
        timeout (float): Seconds to wait for the upstream response.

    Returns:
        The decoded JSON body, unchanged.

    Raises:
        requests.RequestException: If the request fails.
        ValueError: If the body is not valid JSON.
    """
    # Upstream status codes are not checked; any JSON body is passed through.
    response = requests.get(url, timeout=timeout)
    return response.json()
