"""The JSON envelopes every endpoint answers with."""

from __future__ import annotations

from typing import Any


def success_response(data: Any) -> dict[str, Any]:
    """Wrap a successful result."""
    return {"success": True, "data": data}


def error_response(message: str) -> dict[str, Any]:
    """Wrap an error message."""
    return {"success": False, "error": message}