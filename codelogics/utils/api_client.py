"""Simple HTTP client utilities using httpx.

Used by the Hugging Face adapter for its outbound inference call and by
the chat client to reach this application's own API.
"""

from __future__ import annotations

import httpx
from typing import Any, Dict, Optional


def post(
    url: str,
    json: Dict[str, Any],
    *,
    headers: Optional[Dict[str, str]] = None,
    timeout: float = 30.0,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Response:
    """Perform a synchronous HTTP POST request and fail on non-2xx status."""
    with httpx.Client(timeout=timeout, transport=transport) as client:
        response = client.post(url, json=json, headers=headers)
    response.raise_for_status()
    return response


def bearer_headers(api_key: str) -> Dict[str, str]:
    """Return JSON request headers carrying a bearer token."""
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }
