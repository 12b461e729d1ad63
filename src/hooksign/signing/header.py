"""Codec for the ``t=<ts>,v1=<hex>`` signature header."""

from __future__ import annotations

import re
from dataclasses import dataclass

TIMESTAMP_KEY = "t"
SIGNATURE_KEY = "v1"

# Epoch milliseconds fit in a signed 64-bit integer.
_INTEGER_RE = re.compile(r"[+-]?[0-9]{1,19}")


@dataclass(frozen=True)
class SignatureHeader:
    """Parsed signature header."""

    timestamp: int
    signature: str


@dataclass(frozen=True)
class HeaderParseResult:
    """Outcome of parsing a signature header."""

    success: bool
    header: SignatureHeader | None = None

    @property
    def timestamp(self) -> int | None:
        return self.header.timestamp if self.header else None

    @property
    def signature(self) -> str | None:
        return self.header.signature if self.header else None


_FAILED = HeaderParseResult(success=False)


def _split_pairs(value: str) -> dict[str, str]:
    fields: dict[str, str] = {}
    for part in value.split(","):
        key, sep, item = part.strip().partition("=")
        if not sep:
            continue
        fields[key] = item
    return fields


def parse_signature_header(value: str | None) -> HeaderParseResult:
    """
    Parse a signature header into its timestamp and v1 digest.

    Pairs may appear in any order and unknown keys are ignored. Parsing
    fails when the header is empty, when ``t`` or ``v1`` is absent, or
    when ``t`` is not a decimal integer.

    Args:
        value: Raw header value, possibly None

    Returns:
        HeaderParseResult with ``success`` set accordingly
    """
    if not value:
        return _FAILED

    fields = _split_pairs(value)
    raw_timestamp = fields.get(TIMESTAMP_KEY)
    signature = fields.get(SIGNATURE_KEY)
    if raw_timestamp is None or signature is None:
        return _FAILED

    if not _INTEGER_RE.fullmatch(raw_timestamp):
        return _FAILED

    return HeaderParseResult(
        success=True,
        header=SignatureHeader(timestamp=int(raw_timestamp), signature=signature),
    )


def serialize_signature_header(timestamp: int, signature: str) -> str:
    """Build a ``t=<timestamp>,v1=<signature>`` header value."""
    return f"{TIMESTAMP_KEY}={timestamp},{SIGNATURE_KEY}={signature}"
