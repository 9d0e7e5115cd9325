"""Response error extraction for load test observability.

Storefront API errors all share one shape, ``{"message": "..."}``. Anything
else (proxy pages, empty bodies) is returned as truncated text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a human-readable error message from an API error response.

    Returns a compact string suitable for Locust failure messages and log lines.
    """
    try:
        body = response.json()
    except ValueError:
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if isinstance(body, dict) and "message" in body:
        return str(body["message"])

    return str(body)[:300]
