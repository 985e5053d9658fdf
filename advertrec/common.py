"""Response envelope shared by every RPC handler."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

SUCCESS_CODE = 200
SUCCESS_MESSAGE = "success"


@dataclass(frozen=True)
class Response:
    """Status code and message, plus the payload fields of a reply."""

    code: int
    message: str
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.code == SUCCESS_CODE

    def __getitem__(self, key: str) -> Any:
        return self.data[key]


def success(**kwargs: Any) -> Response:
    """Return a successful response carrying the given payload fields."""
    return Response(SUCCESS_CODE, SUCCESS_MESSAGE, dict(kwargs))


def failure(code: int, message: str) -> Response:
    """Return an error response with no payload."""
    return Response(code, message)


def format_time(value: datetime | None) -> str:
    """Format a timestamp as ``YYYY-MM-DD HH:MM:SS``; None gives the zero time."""
    if value is None:
        return "0001-01-01 00:00:00"
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )