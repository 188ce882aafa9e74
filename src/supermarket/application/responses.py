"""HTTP-style responses returned by the application services.

The service never raises for an expected outcome: it always hands back
one of these shapes and the transport decides how to render it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class HttpStatus(Enum):
    OK = 200
    BAD_REQUEST = 400
    INTERNAL_SERVER_ERROR = 500


@dataclass(frozen=True)
class Response:
    status: HttpStatus
    body: Any = None
    message: str | None = None

    @property
    def is_ok(self) -> bool:
        return self.status is HttpStatus.OK


def ok(body: Any = None) -> Response:
    return Response(HttpStatus.OK, body=body)


def bad_request(message: str) -> Response:
    """Client-correctable failure."""
    return Response(HttpStatus.BAD_REQUEST, message=message)


def internal_error(message: str) -> Response:
    """Infrastructure or otherwise unexpected failure."""
    return Response(HttpStatus.INTERNAL_SERVER_ERROR, message=message)
