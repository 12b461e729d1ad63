"""Webhook signature validation pipeline."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from hooksign.common.errors import SignatureConfigError
from hooksign.signing.compare import compare_signatures
from hooksign.signing.header import parse_signature_header, serialize_signature_header
from hooksign.signing.hmac import create_signature

DEFAULT_VALID_FOR_SECONDS = 30

Clock = Callable[[], int]


class VerificationReason(str, Enum):
    """Why a signature was rejected."""

    MISSING_SIGNATURE = "Missing signature"
    INVALID_SIGNATURE_HEADER = "Invalid signature header"
    INVALID_TIMESTAMP = "Invalid timestamp"
    INVALID_SIGNATURE = "Invalid signature"


@dataclass(frozen=True)
class VerificationResult:
    """Verdict of a single verification."""

    is_valid: bool
    reason: VerificationReason | None = None

    @classmethod
    def valid(cls) -> VerificationResult:
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, reason: VerificationReason) -> VerificationResult:
        return cls(is_valid=False, reason=reason)


def now_millis() -> int:
    """Current Unix time in milliseconds."""
    return time.time_ns() // 1_000_000


def _check_config(secret: Any, valid_for_seconds: Any) -> None:
    if not isinstance(secret, str):
        raise TypeError(f"secret must be str, not {type(secret).__name__}")
    if not secret:
        raise SignatureConfigError("secret must not be empty")
    if isinstance(valid_for_seconds, bool) or not isinstance(valid_for_seconds, int):
        raise TypeError("valid_for_seconds must be an int")
    if valid_for_seconds < 0:
        raise SignatureConfigError("valid_for_seconds must be non-negative")


def validate_signature(
    incoming_signature_header: str | None,
    payload: Any,
    secret: str,
    valid_for_seconds: int = DEFAULT_VALID_FOR_SECONDS,
    clock: Clock = now_millis,
) -> VerificationResult:
    """
    Verify a webhook signature header against a payload.

    Checks run in a fixed order and the first failure decides the
    reason: missing header, unparseable header, timestamp outside the
    tolerance window (in either direction), digest mismatch.

    Args:
        incoming_signature_header: Raw ``t=<ts>,v1=<hex>`` header value
        payload: Parsed JSON payload, serialized exactly as the signer did
        secret: Shared secret for the webhook source
        valid_for_seconds: Allowed clock distance between signer and verifier
        clock: Returns the current time in epoch milliseconds; read once

    Returns:
        VerificationResult; authentication failures are never raised

    Raises:
        TypeError: If secret or valid_for_seconds has the wrong type
        SignatureConfigError: If secret is empty or tolerance is negative
    """
    _check_config(secret, valid_for_seconds)

    if not incoming_signature_header:
        return VerificationResult.invalid(VerificationReason.MISSING_SIGNATURE)

    parsed = parse_signature_header(incoming_signature_header)
    if not parsed.success or parsed.header is None:
        return VerificationResult.invalid(VerificationReason.INVALID_SIGNATURE_HEADER)
    header = parsed.header

    now = clock()
    age_ms = now - header.timestamp
    if abs(age_ms) > valid_for_seconds * 1000:
        return VerificationResult.invalid(VerificationReason.INVALID_TIMESTAMP)

    expected = create_signature(header.timestamp, payload, secret)
    if not compare_signatures(expected, header.signature):
        return VerificationResult.invalid(VerificationReason.INVALID_SIGNATURE)

    return VerificationResult.valid()


class SignatureValidator:
    """Signature verification bound to one webhook source."""

    def __init__(
        self,
        secret: str,
        valid_for_seconds: int = DEFAULT_VALID_FOR_SECONDS,
        clock: Clock = now_millis,
    ) -> None:
        _check_config(secret, valid_for_seconds)
        self._secret = secret
        self._valid_for_seconds = valid_for_seconds
        self._clock = clock

    def __repr__(self) -> str:
        return f"SignatureValidator(valid_for_seconds={self._valid_for_seconds})"

    @property
    def valid_for_seconds(self) -> int:
        return self._valid_for_seconds

    def verify(self, header: str | None, payload: Any) -> VerificationResult:
        """Verify a signature header for this source."""
        return validate_signature(
            header,
            payload,
            self._secret,
            valid_for_seconds=self._valid_for_seconds,
            clock=self._clock,
        )

    def sign(self, payload: Any, timestamp_ms: int | None = None) -> str:
        """
        Build a signature header for an outbound request or test fixture.

        Args:
            payload: JSON-serializable payload
            timestamp_ms: Signing time; defaults to the validator's clock

        Returns:
            Header value in ``t=<ts>,v1=<hex>`` form
        """
        if timestamp_ms is None:
            timestamp_ms = self._clock()
        signature = create_signature(timestamp_ms, payload, self._secret)
        return serialize_signature_header(timestamp_ms, signature)
