"""Command response status lines ("ok" and "error:<code>")."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")
_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1


def _parse_i32(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(text)
    value = int(text)
    if not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(text)
    return value


@dataclass(frozen=True)
class ResponseStatus:
    """Outcome of a command: success, or the error code the device sent."""

    error_code: int | None = None

    @property
    def is_ok(self) -> bool:
        """Tell whether the command succeeded."""
        return self.error_code is None


def parse_response_status(message: str) -> ResponseStatus:
    """Parse "ok" or a line such as "error:2"."""
    if is_response_status(message):
        segments = message.split(":")
        status_type = segments[0]
        if status_type == "ok":
            return ResponseStatus()
        if status_type == "error" and len(segments) >= 2:
            try:
                code = _parse_i32(segments[1])
            except ValueError:
                raise ValueError(
                    f'Cannot parse response status status code: "{segments[1]}"'
                ) from None
            return ResponseStatus(code)
    raise ValueError(f'Cannot read response status "{message}"')


def is_response_status(message: str) -> bool:
    """Tell whether ``message`` is "ok" or starts with "error"."""
    return message == "ok" or message.startswith("error")