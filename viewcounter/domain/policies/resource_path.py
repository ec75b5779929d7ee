"""Resource path policy — normalization and validation of counter paths."""

from __future__ import annotations

from typing import Any

from viewcounter.domain.errors import InvalidPathError, MalformedBatchError

ROOT_PATH = "/"
BATCH_PATH = "/batch"
RESERVED_PATHS = frozenset({ROOT_PATH, BATCH_PATH})


def normalize_path(path: str) -> str:
    """Prefix a leading slash when missing; otherwise return the path as-is."""
    return path if path.startswith("/") else f"/{path}"


def validate_single_path(path: str | None) -> str:
    """Return the normalized path for a single-counter request.

    Raises:
        InvalidPathError: if the path is empty, the root, or the batch endpoint.
    """
    normalized = normalize_path(path or "")
    if normalized in RESERVED_PATHS:
        raise InvalidPathError(normalized)
    return normalized


def validate_batch_paths(body: Any) -> list[str]:
    """Validate a decoded batch body and return its normalized paths in order.

    The whole body is rejected if it is not a list or if any entry is not a
    non-blank string. An empty list is valid.

    Raises:
        MalformedBatchError: on any invalid body or entry.
    """
    if not isinstance(body, list):
        raise MalformedBatchError(
            "Expected an array of path strings, e.g., ['/path1', '/path2']."
        )
    for index, entry in enumerate(body):
        if not isinstance(entry, str):
            raise MalformedBatchError(
                f"Entry {index} is {type(entry).__name__}, expected a path string."
            )
        if not entry.strip():
            raise MalformedBatchError(f"Entry {index} is an empty path.")
    return [normalize_path(entry) for entry in body]
