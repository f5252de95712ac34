"""Parsing utilities for GitHub API responses."""

import json
from typing import Any
from urllib.parse import urlparse

from gitshell.github.types import Collaborator, CollaboratorDecodeError, CollaboratorPermissions


def parse_collaborators(json_str: str) -> list[Collaborator]:
    """Parse the JSON array returned by GET /repos/{owner}/{repo}/collaborators.

    Array order is preserved. Fields not listed on Collaborator are ignored.

    Raises:
        CollaboratorDecodeError: If the text is not JSON, is not an array, or an
            element is missing a required field or has a field of the wrong type
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise CollaboratorDecodeError(f"Invalid JSON in collaborator response: {e}") from e

    if not isinstance(data, list):
        raise CollaboratorDecodeError(
            f"Expected a JSON array of collaborators, got {type(data).__name__}"
        )

    return [_parse_collaborator(item, index) for index, item in enumerate(data)]


def _parse_collaborator(item: Any, index: int) -> Collaborator:
    if not isinstance(item, dict):
        raise CollaboratorDecodeError(f"Collaborator [{index}] is not a JSON object")

    permissions = _require(item, "permissions", dict, index)
    return Collaborator(
        login=_require(item, "login", str, index),
        id=_require(item, "id", int, index),
        avatar_url=_require_url(item, "avatar_url", index),
        url=_require_url(item, "url", index),
        permissions=CollaboratorPermissions(
            pull=_require(permissions, "pull", bool, index),
            push=_require(permissions, "push", bool, index),
            admin=_require(permissions, "admin", bool, index),
        ),
    )


def _require(data: dict[str, Any], key: str, expected: type, index: int) -> Any:
    if key not in data:
        raise CollaboratorDecodeError(f"Collaborator [{index}] is missing field '{key}'")
    value = data[key]
    # bool is a subclass of int; an id of `true` is still the wrong shape
    if isinstance(value, bool) and expected is not bool:
        raise CollaboratorDecodeError(
            f"Collaborator [{index}] field '{key}' must be {expected.__name__}, got bool"
        )
    if not isinstance(value, expected):
        raise CollaboratorDecodeError(
            f"Collaborator [{index}] field '{key}' must be {expected.__name__}, "
            f"got {type(value).__name__}"
        )
    return value


def _require_url(data: dict[str, Any], key: str, index: int) -> str:
    value = _require(data, key, str, index)
    parsed = urlparse(value)
    if not parsed.scheme or not parsed.netloc:
        raise CollaboratorDecodeError(
            f"Collaborator [{index}] field '{key}' is not an absolute URL: {value!r}"
        )
    return value
