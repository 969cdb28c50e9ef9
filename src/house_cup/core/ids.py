"""Deterministic content hashes.

Scoreboards are fingerprinted from their canonical JSON form so hosts can
detect whether a recomputation actually changed anything.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any


def payload_hash(payload: dict[str, Any], *, length: int = 16) -> str:
    """Hex digest of *payload* in canonical JSON, truncated to *length*.

    Keys are sorted and separators compacted, so two dicts with the same
    content hash the same regardless of insertion order.  Non-JSON values
    fall back to ``str()``.
    """
    canonical = json.dumps(
        payload, sort_keys=True, separators=(",", ":"), default=str
    )
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()[:length]
