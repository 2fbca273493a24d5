"""Request data, request bodies and the edit history of a request."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Union

from .methods import Method
from .url import RawUrl, Url, UrlInfo, parse_url, url_from_dict, url_to_dict

if TYPE_CHECKING:
    from .partial import PartialRequestData


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


@dataclass(frozen=True)
class RawBody:
    """A body sent exactly as written."""

    value: str = ""

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class JsonBody:
    """A body holding a decoded JSON value."""

    value: Any = None

    def __str__(self) -> str:
        return json.dumps(self.value, separators=(",", ":"), ensure_ascii=False)


Body = Union[RawBody, JsonBody]


def parse_body(text: str) -> Body:
    """Decode ``text`` as JSON if possible, otherwise keep it raw."""
    try:
        return JsonBody(json.loads(text, parse_constant=_reject_constant))
    except ValueError:
        return RawBody(text)


def body_to_dict(body: Body) -> dict[str, Any]:
    """Serialise a body to a tagged mapping."""
    if isinstance(body, RawBody):
        return {"Raw": body.value}
    if isinstance(body, JsonBody):
        return {"Json": body.value}
    raise TypeError(f"Not a body: {body!r}")


def body_from_dict(data: dict[str, Any]) -> Body:
    """Build a body from a mapping produced by :func:`body_to_dict`."""
    if not isinstance(data, dict) or len(data) != 1:
        raise ValueError("Body must be a mapping with a single tag")
    (tag, payload), = data.items()
    if tag == "Raw":
        if not isinstance(payload, str):
            raise ValueError("Raw body must be a string")
        return RawBody(payload)
    if tag == "Json":
        return JsonBody(payload)
    raise ValueError(f"Unknown body kind: {tag!r}")


@dataclass
class RequestData:
    """Everything needed to send one HTTP request."""

    url: Url = field(default_factory=RawUrl)
    method: Method = Method.GET
    headers: dict[str, str] = field(default_factory=dict)
    body: Body = field(default_factory=RawBody)

    def with_url(self, value: str) -> RequestData:
        """Return a copy whose url is ``value``, parsed when possible."""
        return replace(self, url=parse_url(value), headers=dict(self.headers))

    def merge(self, other: PartialRequestData) -> RequestData:
        """Return a copy overlaid with the parts ``other`` sets."""
        method = other.method if other.method is not None else self.method

        url = self.url
        if other.url is not None:
            if isinstance(url, UrlInfo) and isinstance(other.url, UrlInfo):
                url = url.overwritten_by(other.url)
            else:
                url = other.url

        headers = {**self.headers, **(other.headers or {})}

        body = self.body
        if other.body is not None:
            if (
                isinstance(body, JsonBody)
                and isinstance(other.body, JsonBody)
                and isinstance(body.value, dict)
                and isinstance(other.body.value, dict)
            ):
                body = JsonBody({**body.value, **other.body.value})
            else:
                body = other.body

        return RequestData(url=url, method=method, headers=headers, body=body)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible mapping."""
        return {
            "url": url_to_dict(self.url),
            "method": str(self.method),
            "headers": dict(self.headers),
            "body": body_to_dict(self.body),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RequestData:
        """Build from a mapping produced by :meth:`to_dict`."""
        if not isinstance(data, dict):
            raise ValueError("Request data must be a mapping")
        try:
            url, method, headers, body = (
                data["url"],
                data["method"],
                data["headers"],
                data["body"],
            )
        except KeyError as exc:
            raise ValueError(f"Missing field: {exc.args[0]}") from exc
        if not isinstance(headers, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in headers.items()
        ):
            raise ValueError("Headers must map strings to strings")
        return cls(
            url=url_from_dict(url),
            method=Method(method),
            headers=dict(headers),
            body=body_from_dict(body),
        )

    def to_json(self) -> str:
        """Serialise to JSON text."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> RequestData:
        """Parse JSON text produced by :meth:`to_json`."""
        return cls.from_dict(json.loads(text))


class RequestEntity:
    """A request together with its undo/redo history."""

    def __init__(self, request_data: RequestData | None = None) -> None:
        self._current = request_data if request_data is not None else RequestData()
        self._past: list[RequestData] = []
        self._future: list[RequestData] = []

    def current(self) -> RequestData:
        """The request as it stands now."""
        return self._current

    def update(self, request_data: RequestData) -> None:
        """Record a new state; any redo history is dropped."""
        self._past.append(self._current)
        self._future.clear()
        self._current = request_data

    def undo(self) -> None:
        """Step back one state, if there is one."""
        if self._past:
            self._future.append(self._current)
            self._current = self._past.pop()

    def redo(self) -> None:
        """Step forward one state, if there is one."""
        if self._future:
            self._past.append(self._current)
            self._current = self._future.pop()