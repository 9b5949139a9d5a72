"""HTTP transport: the request shape shared by all three pipeline calls.

A ``Fetcher`` is any callable taking ``FetchParams`` and returning a
response with ``is_success``, ``status_code``, ``text`` and ``json()``.
``httpx.Response`` satisfies that shape, so fakes in tests and proxying
hooks can simply build one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Literal, Protocol

import httpx

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
)
DEFAULT_TIMEOUT = 30.0


class FetchResponse(Protocol):
    @property
    def is_success(self) -> bool: ...

    @property
    def status_code(self) -> int: ...

    @property
    def text(self) -> str: ...

    def json(self) -> Any: ...


@dataclass
class FetchParams:
    """A single request issued by the pipeline."""

    url: str
    lang: str | None = None
    user_agent: str | None = None
    method: Literal["GET", "POST"] = "GET"
    body: str | None = None
    headers: dict[str, str] = field(default_factory=dict)


Fetcher = Callable[[FetchParams], FetchResponse]


def build_headers(params: FetchParams) -> dict[str, str]:
    """User-Agent and Accept-Language, with caller headers merged last."""
    headers = {"User-Agent": params.user_agent or DEFAULT_USER_AGENT}
    if params.lang:
        headers["Accept-Language"] = params.lang
    headers.update(params.headers)
    return headers


def default_fetch(params: FetchParams, *, timeout: float = DEFAULT_TIMEOUT) -> httpx.Response:
    """Issue the request with httpx.

    The body is only sent for POST requests. Transport errors
    (``httpx.HTTPError``) propagate to the caller.
    """
    content = params.body if params.body and params.method == "POST" else None
    return httpx.request(
        params.method,
        params.url,
        headers=build_headers(params),
        content=content,
        timeout=timeout,
        follow_redirects=True,
    )
