"""
Line Transport

Newline-delimited JSON framing for stdin/stdout. One envelope per line in
each direction; blank input lines are ignored.
"""

import json
import threading
from typing import IO, Iterator

from pydantic import ValidationError

from nexmemory.configs.constants import PARSE_ERROR
from nexmemory.exceptions import EnvelopeDecodeError
from nexmemory.models import JsonRpcRequest, JsonRpcResponse


def iter_lines(stream: IO[str]) -> Iterator[str]:
    """Yield stripped, non-blank lines until end of stream."""
    for line in stream:
        line = line.strip()
        if line:
            yield line


def decode_line(line: str) -> JsonRpcRequest:
    """
    Decode one input line into a request envelope.

    Raises:
        EnvelopeDecodeError: Invalid or too deeply nested JSON, not an object, or an unusable id
    """
    try:
        payload = json.loads(line)
    except (json.JSONDecodeError, RecursionError) as e:
        raise EnvelopeDecodeError(str(e)) from e

    if not isinstance(payload, dict):
        raise EnvelopeDecodeError(f"Expected a JSON object, got {type(payload).__name__}")

    try:
        return JsonRpcRequest.model_validate(payload)
    except ValidationError as e:
        fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in e.errors())
        raise EnvelopeDecodeError(f"Invalid request envelope: {fields}") from e


def encode_response(response: JsonRpcResponse) -> str:
    """Compact JSON text for one response envelope (no trailing newline)."""
    return json.dumps(response.to_wire(), separators=(",", ":"))


def parse_error_response(error: EnvelopeDecodeError) -> JsonRpcResponse:
    return JsonRpcResponse.failure(None, PARSE_ERROR, f"Parse error: {error.message}")


class LineWriter:
    """
    Writes response envelopes as single lines.

    Each write holds a lock so concurrent workers never interleave output.
    """

    def __init__(self, stream: IO[str]):
        self._stream = stream
        self._lock = threading.Lock()

    def write(self, response: JsonRpcResponse) -> str:
        line = encode_response(response)
        with self._lock:
            self._stream.write(line + "\n")
            self._stream.flush()
        return line
