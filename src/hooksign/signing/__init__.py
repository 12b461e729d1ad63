"""Webhook signing and verification primitives."""

from hooksign.signing.compare import compare_signatures
from hooksign.signing.header import (
    HeaderParseResult,
    SignatureHeader,
    parse_signature_header,
    serialize_signature_header,
)
from hooksign.signing.hmac import build_message, create_signature, serialize_payload, sign
from hooksign.signing.validator import (
    SignatureValidator,
    VerificationReason,
    VerificationResult,
    now_millis,
    validate_signature,
)

__all__ = [
    "HeaderParseResult",
    "SignatureHeader",
    "SignatureValidator",
    "VerificationReason",
    "VerificationResult",
    "build_message",
    "compare_signatures",
    "create_signature",
    "now_millis",
    "parse_signature_header",
    "serialize_payload",
    "serialize_signature_header",
    "sign",
    "validate_signature",
]
