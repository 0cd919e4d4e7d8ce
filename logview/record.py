"""Decoding of single JSON log lines into records."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

# Header fields that must hold strings when present
_TEXT_FIELDS = ("namespace", "time", "priority")


class RecordDecodeError(ValueError):
    """Raised when a line cannot be decoded into a LogRecord."""


@dataclass(frozen=True)
class LogRecord:
    """A single decoded log line."""

    namespace: str = ""
    time: str = ""  # opaque display text, never parsed
    priority: str = ""
    payload: Any = None  # str or any decoded JSON value


def _reject_constant(name: str) -> Any:
    # NaN/Infinity are not valid JSON
    raise RecordDecodeError(f"invalid JSON constant {name}")


def decode_record(line: str) -> LogRecord:
    """Decode one line of input into a LogRecord.

    Missing fields and JSON nulls take their zero value. A header field with
    a non-string value fails the whole line, so a record is never partially
    populated.

    Args:
        line: A single line of text without its trailing newline.

    Returns:
        The decoded LogRecord.

    Raises:
        RecordDecodeError: The line is not JSON, is not a JSON object, or has
            a header field of the wrong type.
    """
    try:
        obj = json.loads(line, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise RecordDecodeError(f"malformed JSON: {e}") from e
    except (ValueError, RecursionError) as e:
        # Oversized integers or nesting beyond the interpreter limits
        raise RecordDecodeError(f"undecodable JSON: {e}") from e

    if not isinstance(obj, dict):
        raise RecordDecodeError(f"expected a JSON object, got {type(obj).__name__}")

    fields: dict[str, str] = {}
    for name in _TEXT_FIELDS:
        value = obj.get(name)
        if value is None:
            value = ""
        elif not isinstance(value, str):
            raise RecordDecodeError(
                f"field {name!r} must be a string, got {type(value).__name__}"
            )
        fields[name] = value

    return LogRecord(payload=obj.get("payload"), **fields)
