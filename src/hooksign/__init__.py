"""
hooksign: HMAC-SHA256 verification for inbound webhooks.

Signs and verifies ``t=<ts>,v1=<hex>`` signature headers with a
timestamp freshness window and constant-time digest comparison.
"""

from hooksign.signing import (
    SignatureHeader,
    SignatureValidator,
    VerificationReason,
    VerificationResult,
    build_message,
    compare_signatures,
    create_signature,
    parse_signature_header,
    serialize_signature_header,
    sign,
    validate_signature,
)

__version__ = "1.0.0"

__all__ = [
    "SignatureHeader",
    "SignatureValidator",
    "VerificationReason",
    "VerificationResult",
    "build_message",
    "compare_signatures",
    "create_signature",
    "parse_signature_header",
    "serialize_signature_header",
    "sign",
    "validate_signature",
]
