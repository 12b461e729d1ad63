"""Starlette middleware enforcing webhook signatures."""

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from hooksign.common.errors import ErrorCode, error_response
from hooksign.common.logging import get_logger
from hooksign.common.metrics import record_verification
from hooksign.common.settings import Settings
from hooksign.signing.hmac import load_payload
from hooksign.signing.validator import Clock, SignatureValidator, VerificationReason, now_millis

logger = get_logger(__name__)

_OUTCOMES = {
    VerificationReason.MISSING_SIGNATURE: "missing_signature",
    VerificationReason.INVALID_SIGNATURE_HEADER: "invalid_header",
    VerificationReason.INVALID_TIMESTAMP: "invalid_timestamp",
    VerificationReason.INVALID_SIGNATURE: "invalid_signature",
}


class WebhookSignatureMiddleware(BaseHTTPMiddleware):
    """Reject webhook requests whose signature header does not verify."""

    def __init__(
        self,
        app: ASGIApp,
        settings: Settings,
        clock: Clock = now_millis,
    ) -> None:
        super().__init__(app)
        self._settings = settings
        self._header_name = settings.signature_header
        self._protected_paths = tuple(settings.protected_paths)
        secret = settings.secret_value
        self._validator = (
            SignatureValidator(secret, settings.valid_for_seconds, clock=clock)
            if secret
            else None
        )

    def _is_protected(self, path: str) -> bool:
        return any(
            path == prefix or path.startswith(prefix.rstrip("/") + "/")
            for prefix in self._protected_paths
        )

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        path = request.url.path
        if not self._is_protected(path):
            return await call_next(request)

        if self._validator is None:
            logger.error("Webhook secret not configured", path=path)
            record_verification("misconfigured")
            return error_response(
                ErrorCode.SERVER_MISCONFIGURED,
                "Webhook secret not configured",
                status_code=500,
            )

        header = request.headers.get(self._header_name)
        if not header:
            logger.info("Webhook signature missing", path=path, header=self._header_name)
            record_verification(_OUTCOMES[VerificationReason.MISSING_SIGNATURE])
            return error_response(
                ErrorCode.MISSING_SIGNATURE,
                f"Missing {self._header_name} header",
                status_code=401,
            )

        body = await request.body()
        try:
            payload = load_payload(body)
        except ValueError:
            logger.info("Webhook body is not valid JSON", path=path)
            record_verification("invalid_json")
            return error_response(
                ErrorCode.INVALID_JSON,
                "Request body must be valid JSON",
                status_code=400,
            )

        result = self._validator.verify(header, payload)
        if not result.is_valid:
            assert result.reason is not None
            logger.warning(
                "Webhook signature rejected",
                path=path,
                reason=result.reason.value,
            )
            record_verification(_OUTCOMES[result.reason])
            return error_response(
                ErrorCode.INVALID_SIGNATURE,
                "Invalid signature",
                status_code=401,
                reason=result.reason.value,
            )

        record_verification("valid")
        request.state.webhook_payload = payload
        return await call_next(request)
