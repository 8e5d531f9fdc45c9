"""Response error extraction for load test observability.

Every Backoffice error response is an envelope:
``{"status": "Error", "message": [...], "data": null, "errors": {...}?}``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a human-readable error message from an API error response.

    Returns a compact string suitable for Locust failure messages and log lines.
    Gracefully handles unparseable bodies and missing fields.
    """
    try:
        body = response.json()
    except Exception:
        # Not JSON, return raw text truncated
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if isinstance(body, dict) and isinstance(body.get("errors"), dict):
        return " | ".join(f"{field}: {', '.join(msgs)}" for field, msgs in body["errors"].items())

    if isinstance(body, dict) and isinstance(body.get("message"), list):
        return " | ".join(str(m) for m in body["message"])

    # Unknown shape, stringify and truncate
    return str(body)[:300]
