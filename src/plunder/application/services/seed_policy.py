from __future__ import annotations

import hashlib
import json
from typing import Any, Mapping


def _normalize(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(key): _normalize(val) for key, val in sorted(value.items(), key=lambda item: str(item[0]))}
    if isinstance(value, (list, tuple)):
        return [_normalize(item) for item in value]
    return value


def derive_seed(namespace: str, context: Mapping[str, Any]) -> int:
    """Hash a namespace and context into a stable 32-bit seed."""
    payload = {"namespace": namespace, "context": _normalize(context)}
    serialized = json.dumps(payload, sort_keys=True, separators=(",", ":"), default=str)
    digest = hashlib.sha256(serialized.encode("utf-8")).hexdigest()
    return int(digest, 16) % (2**32)


def session_seed(base_seed: int | None, session_number: int) -> int | None:
    if base_seed is None:
        return None
    return derive_seed("session.outcomes", {"base_seed": int(base_seed), "session": int(session_number)})
