"""HMAC signing utilities for inbound and outbound webhooks."""

from __future__ import annotations

import hashlib
import hmac
import json
import math
from typing import Any


def serialize_payload(payload: Any) -> str:
    """
    Serialize a payload the way ``JSON.stringify`` does.

    Keys keep their insertion order and no whitespace is emitted, so the
    signer and verifier must hold structurally identical payloads.
    """
    return json.dumps(
        payload,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _parse_finite_float(value: str) -> float:
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"{value} is out of range for a JSON number")
    return number


def load_payload(raw: str | bytes) -> Any:
    """
    Parse a JSON body with the strictness of ``JSON.parse``.

    ``NaN``, ``Infinity`` and numbers that overflow to infinity raise
    ``ValueError``, so every accepted payload can be serialized again.
    """
    return json.loads(
        raw,
        parse_constant=_reject_constant,
        parse_float=_parse_finite_float,
    )


def build_message(timestamp_ms: int, payload: Any) -> str:
    """Build the canonical ``<timestamp>.<json>`` message to sign."""
    return f"{timestamp_ms}.{serialize_payload(payload)}"


def sign(secret: str, message: str) -> str:
    """Create a lowercase hex-encoded HMAC-SHA256 signature."""
    if not isinstance(secret, str):
        raise TypeError(f"secret must be str, not {type(secret).__name__}")
    return hmac.new(
        secret.encode("utf-8"),
        message.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def create_signature(timestamp_ms: int, payload: Any, secret: str) -> str:
    """
    Sign a payload for the given timestamp.

    Args:
        timestamp_ms: Unix epoch milliseconds embedded in the header
        payload: JSON-serializable webhook payload
        secret: Shared secret for the webhook source

    Returns:
        64-character lowercase hex digest
    """
    return sign(secret, build_message(timestamp_ms, payload))
