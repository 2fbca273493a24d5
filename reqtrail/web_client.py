"""Sending requests over HTTP."""

from __future__ import annotations

import asyncio
import re
import time
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Mapping

import httpx

from .methods import Method
from .requests import RequestData
from .responses import Response, ResponseStage
from .url import UrlInfo

_HEADER_NAME = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+\Z")
_HEADER_VALUE = re.compile(r"^[\t\x20-\x7e]*\Z")


def create_header_map(headers: Mapping[str, str]) -> dict[str, str]:
    """Validate headers and return them with lower-case names.

    Raises ``ValueError`` for a name or value that HTTP does not allow.
    """
    result: dict[str, str] = {}
    for name, value in headers.items():
        if not _HEADER_NAME.match(name):
            raise ValueError(f"Invalid header name: {name!r}")
        if not _HEADER_VALUE.match(value):
            raise ValueError(f"Invalid header value for {name!r}: {value!r}")
        result[name.lower()] = value
    return result


class HttpClientRepository(ABC):
    """Something that can send a request and return its response."""

    @abstractmethod
    async def submit_request(self, request: RequestData) -> Response:
        """Send ``request`` and return the response received."""


class HttpxClientRepository(HttpClientRepository):
    """Sends requests with httpx; a transport may be given for testing."""

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._transport = transport

    async def submit_request(self, request: RequestData) -> Response:
        headers = create_header_map(request.headers)
        content = None if request.method is Method.GET else str(request.body)
        async with httpx.AsyncClient(
            transport=self._transport, follow_redirects=True
        ) as client:
            started = time.monotonic()
            reply = await client.request(
                str(request.method), str(request.url), headers=headers, content=content
            )
            elapsed_ms = int((time.monotonic() - started) * 1000)
        return _to_response(reply, elapsed_ms)


def _to_response(reply: httpx.Response, elapsed_ms: int) -> Response:
    headers = sorted(
        ((key.lower(), value) for key, value in reply.headers.multi_items()),
        key=lambda pair: pair[0],
    )
    return Response(
        status=reply.status_code,
        response_time_ms=elapsed_ms,
        headers=headers,
        body=reply.text,
        stage=ResponseStage.FINISHED,
    )


def _with_default_protocol(request: RequestData) -> RequestData:
    url = request.url
    if isinstance(url, UrlInfo) and url.protocol is None:
        return replace(request, url=replace(url, protocol="http"), headers=dict(request.headers))
    return request


class WebClient:
    """Submits requests through a repository, defaulting the protocol to http."""

    def __init__(self, http_client: HttpClientRepository) -> None:
        self.http_client = http_client

    async def submit(self, request: RequestData) -> Response:
        """Send ``request`` and wait for its response."""
        return await self.http_client.submit_request(_with_default_protocol(request))

    def submit_async(self, request: RequestData) -> asyncio.Task[Response]:
        """Start sending ``request`` and return the task that yields the response."""
        prepared = _with_default_protocol(request)
        loop = asyncio.get_running_loop()
        return loop.create_task(self.http_client.submit_request(prepared))