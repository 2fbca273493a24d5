"""The application backend: request store, web client and files behind runners."""

from __future__ import annotations

import asyncio
import uuid
from types import TracebackType

from .fileio import read_from_file, write_to_file
from .files_service import FileService
from .request_service import RequestServiceFacade
from .requests import RequestData
from .responses import Response
from .service_runner import ServiceRunner
from .web_client import WebClient


class AppBackend:
    """Coordinates the services, each running on its own task.

    Must be created while an event loop is running.
    """

    def __init__(
        self,
        request_service: RequestServiceFacade,
        web_client: WebClient,
        file_service: FileService,
    ) -> None:
        self._requests: ServiceRunner[RequestServiceFacade] = ServiceRunner(
            request_service, "RequestService"
        )
        self._web: ServiceRunner[WebClient] = ServiceRunner(web_client, "WebClientService")
        self._files: ServiceRunner[FileService] = ServiceRunner(file_service, "FileService")

    async def __aenter__(self) -> AppBackend:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    # ---- requests in memory ----

    async def add_request(self, request: RequestData) -> uuid.UUID:
        """Store ``request`` and return its new identifier."""
        return await self._requests.run(lambda service: service.add_request(request))

    async def edit_request(self, request_id: uuid.UUID, request: RequestData) -> None:
        """Record a new state of the request ``request_id``."""
        await self._requests.post(lambda service: service.edit_request(request_id, request))

    async def delete_request(self, request_id: uuid.UUID) -> None:
        """Forget the request ``request_id``."""
        await self._requests.post(lambda service: service.delete_request(request_id))

    async def get_request(self, request_id: uuid.UUID) -> RequestData | None:
        """Return the current state of a request, or None if unknown."""
        return await self._requests.run(lambda service: service.get_request_data(request_id))

    async def undo_request(self, request_id: uuid.UUID) -> None:
        """Step a request back in its history."""
        await self._requests.post(lambda service: service.undo_request_data(request_id))

    async def redo_request(self, request_id: uuid.UUID) -> None:
        """Step a request forward in its history."""
        await self._requests.post(lambda service: service.redo_request_data(request_id))

    # ---- submitting ----

    async def _require(self, request_id: uuid.UUID) -> RequestData:
        request = await self.get_request(request_id)
        if request is None:
            raise LookupError("Not found request to given ID")
        return request

    async def submit_request_blocking(self, request_id: uuid.UUID) -> Response:
        """Send the request ``request_id`` and wait for its response."""
        task = await self.submit_request_async(request_id)
        return await task

    async def submit_request_async(self, request_id: uuid.UUID) -> asyncio.Task[Response]:
        """Start sending the request ``request_id``; return the task of its response."""
        request = await self._require(request_id)
        return await self._web.run(lambda client: client.submit_async(request))

    # ---- saved requests ----

    async def save_request_data_as(self, name: str, request_data: RequestData) -> None:
        """Save ``request_data`` under ``name``, replacing any earlier one."""
        path = await self._files.run(
            lambda service: service.get_or_create_saved_request_file(name)
        )
        await write_to_file(path, request_data.to_json())

    async def get_request_saved(self, name: str) -> RequestData:
        """Load the request saved under ``name``; raise ``LookupError`` if none."""
        path = await self._files.run(
            lambda service: service.get_or_create_saved_request_file(name)
        )
        content = await read_from_file(path)
        if not content:
            await self._files.post(lambda service: service.remove_file(path))
            raise LookupError("This request does not exist")
        return RequestData.from_json(content)

    async def find_all_request_names(self) -> list[str]:
        """List the names of every saved request."""
        paths = await self._files.run(lambda service: service.find_all_saved_request_files())
        return [path.name for path in paths]

    async def remove_request_saved(self, name: str) -> None:
        """Delete the request saved under ``name``."""
        await self._files.run(lambda service: service.remove_saved_request_file(name))

    async def rename_request_saved(self, request_name: str, new_name: str) -> None:
        """Rename the saved request ``request_name`` to ``new_name``."""
        await self._files.run(
            lambda service: service.rename_saved_request_file(request_name, new_name)
        )

    async def close(self) -> None:
        """Stop every service runner."""
        for runner in (self._requests, self._web, self._files):
            await runner.close()