"""
Operation Outcomes

Tagged success/failure values returned by tool handlers, plus the shared
helpers handlers use to validate arguments and interpret responses.
"""

import json
from dataclasses import dataclass
from typing import Any, Optional, Union

from nexmemory.exceptions import ResponseFormatError
from nexmemory.utils.http_client import HttpResponse


@dataclass(frozen=True)
class Success:
    """Operation completed; text is shown to the caller."""

    text: str


@dataclass(frozen=True)
class Failure:
    """Operation failed; message is shown to the caller with isError set."""

    message: str


Outcome = Union[Success, Failure]


def pretty_json(value: Any) -> str:
    """Two-space indented JSON, non-ASCII left as is."""
    return json.dumps(value, indent=2, ensure_ascii=False)


def decode_body(response: HttpResponse) -> Any:
    """
    Parse a JSON response body.

    Raises:
        ResponseFormatError: Body is not valid JSON
    """
    try:
        return json.loads(response.body)
    except ValueError as e:
        raise ResponseFormatError(f"Invalid JSON response from knowledge base: {e}") from e


def require(arguments: dict, *fields: str) -> Optional[Failure]:
    """
    Check that required arguments are present.

    A value counts as missing when the key is absent, null or an empty string.

    Returns:
        Failure naming the first missing field, or None
    """
    for name in fields:
        value = arguments.get(name)
        if value is None or value == "":
            return Failure(f"{name} is required")
    return None


def require_id(arguments: dict, name: str = "id") -> Union[str, Failure]:
    """Return a required identifier argument, or a Failure."""
    missing = require(arguments, name)
    if missing:
        return missing
    value = arguments[name]
    if not isinstance(value, str):
        return Failure(f"{name} must be a string")
    return value


def http_failure(response: HttpResponse) -> Failure:
    """Generic failure carrying the status code and raw body."""
    return Failure(f"HTTP {response.status}: {response.body}")


def not_found(kind: str, identifier: str) -> Failure:
    return Failure(f"{kind} not found: {identifier}")
