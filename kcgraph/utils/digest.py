"""
Content digest for graph nodes.

The serialized form is canonical JSON (sorted keys, compact separators) so
that two structurally equal payloads always produce the same digest no
matter how their dicts were built. Payloads may contain reference cycles
and may be nested arbitrarily deep: the writer walks an explicit stack and
never recurses.
"""

import hashlib
import json
from typing import Any

from kcgraph.utils.exceptions import ConfigurationError
from kcgraph.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_ALGORITHM = "md5"

# Stack entry tags
_VALUE = 0
_TEXT = 1
_LEAVE = 2


def _scalar(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, default=str)


def _write(payload: Any, detached: bool) -> str | None:
    """
    Write a payload as canonical JSON.

    In the normal mode every dict or list met a second time in this call is
    written as a detached copy of its value. In detached mode only the
    containers on the current ancestor path are tracked, and None is
    returned as soon as one of them is met again (the value is cyclic).
    """
    parts: list[str] = []
    seen: set[int] = set()
    stack: list[tuple[int, Any]] = [(_VALUE, payload)]

    while stack:
        tag, entry = stack.pop()
        if tag == _TEXT:
            parts.append(entry)
            continue
        if tag == _LEAVE:
            seen.discard(entry)
            continue

        if not isinstance(entry, (dict, list, tuple)):
            parts.append(_scalar(entry))
            continue

        token = id(entry)
        if token in seen:
            if detached:
                return None
            detached_copy = _write(entry, detached=True)
            if detached_copy is None:
                logger.debug(
                    f"Serialization fallback to null for cyclic {type(entry).__name__}"
                )
                detached_copy = "null"
            parts.append(detached_copy)
            continue
        seen.add(token)

        # Entries are pushed in reverse so they pop in document order.
        if detached:
            stack.append((_LEAVE, token))
        if isinstance(entry, dict):
            # Sorted traversal: which occurrence of a shared container is
            # expanded must not depend on key insertion order.
            keys = sorted(entry, key=str)
            stack.append((_TEXT, "}"))
            for position in range(len(keys) - 1, -1, -1):
                key = keys[position]
                stack.append((_VALUE, entry[key]))
                prefix = "," if position else ""
                stack.append((_TEXT, f"{prefix}{_scalar(str(key))}:"))
            stack.append((_TEXT, "{"))
        else:
            stack.append((_TEXT, "]"))
            for position in range(len(entry) - 1, -1, -1):
                stack.append((_VALUE, entry[position]))
                if position:
                    stack.append((_TEXT, ","))
            stack.append((_TEXT, "["))

    return "".join(parts)


def serialize(payload: Any) -> str:
    """
    Serialize a payload to its canonical string form.

    Any dict or list already visited during this serialization (a shared
    or cyclic reference) is replaced by a deep copy of its value; if that
    copy cannot be made, null is written at that position instead.

    Args:
        payload: JSON-like payload, possibly cyclic

    Returns:
        Canonical JSON string
    """
    # Visited tokens are scoped to this call.
    return _write(payload, detached=False)


def compute_digest(content: str, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """
    Hash serialized content.

    Args:
        content: Serialized payload
        algorithm: Any algorithm name accepted by hashlib.new

    Returns:
        Hex-encoded digest

    Raises:
        ConfigurationError: If the algorithm is not available
    """
    try:
        hasher = hashlib.new(algorithm)
    except (ValueError, TypeError) as e:
        raise ConfigurationError(
            f"Unsupported digest algorithm: {algorithm}",
            context={"algorithm": algorithm},
        ) from e

    hasher.update(content.encode("utf-8"))
    return hasher.hexdigest()


def digest(payload: Any, algorithm: str = DEFAULT_ALGORITHM) -> tuple[str, str]:
    """
    Serialize a payload and hash the result.

    Returns:
        Tuple of (serialized content, hex digest)
    """
    content = serialize(payload)
    return content, compute_digest(content, algorithm)
