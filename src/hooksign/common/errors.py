"""Shared error helpers and codes."""

from __future__ import annotations

from typing import Any

from starlette.responses import JSONResponse


class ErrorCode:
    INVALID_JSON = "invalid_json"
    MISSING_SIGNATURE = "missing_signature"
    INVALID_SIGNATURE = "invalid_signature"
    SERVER_MISCONFIGURED = "server_misconfigured"


class SignatureConfigError(ValueError):
    """Validator was configured with an unusable secret or tolerance."""

    pass


def error_response(code: str, message: str, status_code: int, **details: Any) -> JSONResponse:
    """Build the `{"error": {code, message, details?}}` envelope used for rejections."""
    error: dict[str, Any] = {"code": code, "message": message}
    if details:
        error["details"] = details
    return JSONResponse({"error": error}, status_code=status_code)
