"""Constant-time signature comparison."""

from __future__ import annotations

import hmac

from hooksign.common.logging import get_logger

logger = get_logger(__name__)


def compare_signatures(expected: str, received: str) -> bool:
    """
    Compare two digest strings without leaking where they differ.

    Lengths are checked up front since digest length is public. Equal
    length inputs are compared byte-wise in fixed time. Never raises:
    any error while comparing counts as a mismatch.
    """
    try:
        if len(expected) != len(received):
            return False
        return hmac.compare_digest(
            expected.encode("utf-8"),
            received.encode("utf-8"),
        )
    except (AttributeError, TypeError, UnicodeError) as exc:
        logger.debug("Signature comparison failed", error=type(exc).__name__)
        return False
