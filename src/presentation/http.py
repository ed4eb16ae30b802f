"""Transport-agnostic request/response envelope and status helpers."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from src.domain.ports import AccountRecord

from .errors import PresentationError, ServerError


@dataclass(frozen=True)
class HttpRequest:
    body: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body: AccountRecord | PresentationError


def bad_request(error: PresentationError) -> HttpResponse:
    return HttpResponse(status_code=400, body=error)


def server_error() -> HttpResponse:
    return HttpResponse(status_code=500, body=ServerError())


def ok(record: AccountRecord) -> HttpResponse:
    return HttpResponse(status_code=200, body=record)
