# reqtrail

reqtrail is an asyncio library for building, keeping and sending HTTP
requests. It keeps the edit history of every request held in memory (with
undo and redo), stores named requests as JSON files in a collection on disk,
and submits requests over HTTP with httpx.

## Installation

```
pip install reqtrail
```

## Building requests

`reqtrail.requests.RequestData` holds a url, a `Method`, a header mapping and
a body. `PartialRequestData` (in `reqtrail.partial`) holds the same parts, each
of which may be `None`, and can be laid over a full request with `merge`:

```python
from reqtrail.methods import Method
from reqtrail.partial import PartialRequestData
from reqtrail.requests import RequestData

request = RequestData().with_url("https://example.com/search?q=python")
request.method = Method.POST

override = PartialRequestData(method=Method.PUT).with_url("example.com/other")
merged = request.merge(override)
```

When merging, set parts of the partial request win. Two parsed URLs are
combined part by part (query parameters of both are kept), headers are
updated, and two JSON object bodies are merged key by key; otherwise the
partial value replaces the old one.

`Method.parse("post")` parses a method name case-insensitively and raises
`ValueError` for an unknown one.

### URLs

`reqtrail.url.parse_url` returns a `UrlInfo` when the text matches the
accepted pattern (optional `http`/`https` protocol, host, port, paths, query
parameters and anchor) and a `RawUrl` otherwise:

```python
from reqtrail.url import UrlInfo, parse_url

info = UrlInfo.parse("google.com:8080/search/advanced?name=john#top")
info.paths       # ("search", "advanced")
str(info)        # "google.com:8080/search/advanced?name=john#top"
parse_url("not a url")  # RawUrl("not a url")
```

`UrlInfo.parse` raises `ValueError` for text it cannot parse or a port above
65535.

### Bodies

`parse_body` returns a `JsonBody` when the text is valid JSON and a `RawBody`
otherwise. `str()` of a `JsonBody` gives compact JSON.

### Serialisation

`RequestData.to_json` / `RequestData.from_json` (and the `to_dict` /
`from_dict` pairs on requests, urls and bodies) turn requests into JSON and
back.

### History

`RequestEntity` keeps a request with its history: `update` records a new
state and drops any redo history, `undo` and `redo` step back and forward and
do nothing at either end, `current()` returns the state now in effect.
`reqtrail.request_service.RequestService` stores such entities in memory under
random `uuid.UUID` identifiers (see `reqtrail.ids` for helpers).

## Sending requests

`reqtrail.web_client.WebClient` sends requests through an
`HttpClientRepository`. `HttpxClientRepository` is the httpx-based one; it
accepts an optional httpx transport, which makes it easy to test with
`httpx.MockTransport`. Requests whose parsed url has no protocol are sent over
`http`. The body is not sent with `GET` requests. Invalid header names or
values raise `ValueError` (see `create_header_map`).

A `reqtrail.responses.Response` carries the status code, the response time in
milliseconds, headers sorted by lower-case name, the body text and a
`ResponseStage`. `status_code_message(404)` gives `"Not Found"`, and
`"undefined"` for unknown codes.

## Saved requests on disk

`reqtrail.files_service.FileService` manages files under a configuration, a
data and a temporary directory. Saved requests live in the `collection/`
folder of the data directory, one file per request name.

`reqtrail.fileio` offers `read_from_file`, `write_to_file` and
`append_to_file` coroutines.

## The backend

`reqtrail.backend.AppBackend` ties the request store, the web client and the
file service together. Each service runs on its own asyncio task behind a
`reqtrail.service_runner.ServiceRunner`, so the backend must be created while
an event loop is running. It can be used as an async context manager, which
closes it on exit.

```python
import asyncio

from reqtrail.backend import AppBackend
from reqtrail.files_service import FileService
from reqtrail.request_service import RequestService
from reqtrail.requests import RequestData
from reqtrail.web_client import HttpxClientRepository, WebClient


async def main():
    async with AppBackend(
        RequestService(),
        WebClient(HttpxClientRepository()),
        FileService("config", "data", "tmp"),
    ) as backend:
        request_id = await backend.add_request(RequestData().with_url("example.com"))
        await backend.edit_request(request_id, RequestData().with_url("example.com/page"))
        await backend.undo_request(request_id)
        response = await backend.submit_request_blocking(request_id)
        print(response.status, response.body)

        await backend.save_request_data_as("home", RequestData().with_url("example.com"))
        print(await backend.find_all_request_names())   # ["home"]
        saved = await backend.get_request_saved("home")


asyncio.run(main())
```

`submit_request_async` returns the asyncio task that yields the response.
Submitting an unknown identifier, or loading a saved request that does not
exist, raises `LookupError`.

## Errors

`reqtrail.errors.print_pretty_error(error, stream)` writes an error, and its
cause if it has one, to `stream` (standard error by default) in a framed,
red-coloured block, and returns the error.

## What it does not do

reqtrail is a library only. It has no command-line program: there is no
parsing of command-line arguments or request items (such as `key=value` or
`key:=json`) into requests, and no terminal display of responses. The
patterns for such items are available in `reqtrail.regexes`, but nothing in
the package applies them.

## Running the tests

```
pip install -e ".[test]"
pytest
```