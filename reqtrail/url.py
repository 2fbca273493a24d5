"""Parsed and raw URLs."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Union

from .regexes import complete_url

_ROUTE_SEGMENT = re.compile(r"[^/]+")
_QUERY_PAIR = re.compile(r"[^&]+=[^&]+")
_MAX_PORT = 65535


@dataclass(frozen=True)
class UrlInfo:
    """A URL split into its parts."""

    protocol: str | None = None
    host: str | None = None
    port: int | None = None
    paths: tuple[str, ...] = ()
    query_params: tuple[tuple[str, str], ...] = ()
    anchor: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "paths", tuple(self.paths))
        object.__setattr__(
            self, "query_params", tuple((k, v) for k, v in self.query_params)
        )

    @classmethod
    def parse(cls, value: str) -> UrlInfo:
        """Parse ``value``, raising ``ValueError`` if it is not a valid URL."""
        match = complete_url().match(value)
        if match is None:
            raise ValueError("No valid url")

        port: int | None = None
        if match["port"] is not None:
            port = int(match["port"])
            if port > _MAX_PORT:
                raise ValueError(f"Port out of range: {port}")

        routes = match["routes"]
        paths = tuple(_ROUTE_SEGMENT.findall(routes)) if routes else ()

        query = match["query_params"]
        params = (
            tuple(tuple(pair.split("=", 1)) for pair in _QUERY_PAIR.findall(query))
            if query
            else ()
        )

        return cls(
            protocol=match["protocol"],
            host=match["host"],
            port=port,
            paths=paths,
            query_params=params,
            anchor=match["anchor"],
        )

    def __str__(self) -> str:
        protocol = f"{self.protocol}://" if self.protocol is not None else ""
        host = self.host or ""
        port = f":{self.port}" if self.port is not None else ""
        paths = "".join(f"/{p}" for p in self.paths)
        query = "&".join(f"{k}={v}" for k, v in self.query_params)
        query = f"?{query}" if query else ""
        anchor = f"#{self.anchor}" if self.anchor is not None else ""
        return f"{protocol}{host}{port}{paths}{query}{anchor}"

    def overwritten_by(self, other: UrlInfo) -> UrlInfo:
        """Combine with ``other``, whose set parts take precedence.

        Query parameters of both are kept, ours first.
        """

        def pick(theirs: Any, ours: Any) -> Any:
            return theirs if theirs is not None else ours

        return UrlInfo(
            protocol=pick(other.protocol, self.protocol),
            host=pick(other.host, self.host),
            port=pick(other.port, self.port),
            paths=other.paths if other.paths else self.paths,
            query_params=self.query_params + other.query_params,
            anchor=pick(other.anchor, self.anchor),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible mapping of the parts."""
        return {
            "protocol": self.protocol,
            "host": self.host,
            "port": self.port,
            "paths": list(self.paths),
            "query_params": [[k, v] for k, v in self.query_params],
            "anchor": self.anchor,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UrlInfo:
        """Build from a mapping produced by :meth:`to_dict`."""
        if not isinstance(data, dict):
            raise ValueError("Url info must be a mapping")
        port = data.get("port")
        if port is not None and (not isinstance(port, int) or not 0 <= port <= _MAX_PORT):
            raise ValueError(f"Invalid port: {port!r}")
        try:
            params = tuple((str(k), str(v)) for k, v in data.get("query_params") or ())
        except (TypeError, ValueError) as exc:
            raise ValueError("Invalid query parameters") from exc
        return cls(
            protocol=data.get("protocol"),
            host=data.get("host"),
            port=port,
            paths=tuple(str(p) for p in data.get("paths") or ()),
            query_params=params,
            anchor=data.get("anchor"),
        )


@dataclass(frozen=True)
class RawUrl:
    """A URL kept as given because it could not be parsed."""

    value: str = ""

    def __str__(self) -> str:
        return self.value


Url = Union[UrlInfo, RawUrl]


def parse_url(value: str) -> Url:
    """Parse ``value`` into a :class:`UrlInfo`, or keep it as a :class:`RawUrl`."""
    try:
        return UrlInfo.parse(value)
    except ValueError:
        return RawUrl(value)


def url_to_dict(url: Url) -> dict[str, Any]:
    """Serialise either kind of URL to a tagged mapping."""
    if isinstance(url, UrlInfo):
        return {"ValidatedUrl": url.to_dict()}
    if isinstance(url, RawUrl):
        return {"Raw": url.value}
    raise TypeError(f"Not a url: {url!r}")


def url_from_dict(data: dict[str, Any]) -> Url:
    """Build a URL from a mapping produced by :func:`url_to_dict`."""
    if not isinstance(data, dict) or len(data) != 1:
        raise ValueError("Url must be a mapping with a single tag")
    (tag, payload), = data.items()
    if tag == "ValidatedUrl":
        return UrlInfo.from_dict(payload)
    if tag == "Raw":
        if not isinstance(payload, str):
            raise ValueError("Raw url must be a string")
        return RawUrl(payload)
    raise ValueError(f"Unknown url kind: {tag!r}")