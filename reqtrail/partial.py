"""Request data in which every part is optional."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .methods import Method
from .requests import Body, RawBody, RequestData
from .url import Url, parse_url


@dataclass
class PartialRequestData:
    """Parts of a request, any of which may be left unset."""

    url: Url | None = None
    method: Method | None = None
    headers: dict[str, str] | None = None
    body: Body | None = None

    def with_url(self, value: str) -> PartialRequestData:
        """Return a copy whose url is ``value``, parsed when possible."""
        return replace(self, url=parse_url(value))

    @classmethod
    def from_request_data(cls, request: RequestData) -> PartialRequestData:
        """Take every part of a complete request."""
        return cls(
            url=request.url,
            method=request.method,
            headers=dict(request.headers),
            body=request.body,
        )

    def to_request_data(self) -> RequestData:
        """Build a complete request; url and method must be set."""
        if self.url is None:
            raise ValueError("Url is required to define a Request Data")
        if self.method is None:
            raise ValueError("METHOD is required to define a Request Data")
        return RequestData(
            url=parse_url(str(self.url)),
            method=self.method,
            headers=dict(self.headers or {}),
            body=self.body if self.body is not None else RawBody(),
        )