"""In-memory store of requests with per-request history."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod

from .ids import new_random
from .requests import RequestData, RequestEntity


class RequestServiceFacade(ABC):
    """Operations a request service offers."""

    @abstractmethod
    def add_request(self, request: RequestData) -> uuid.UUID:
        """Store a new request and return its identifier."""

    @abstractmethod
    def edit_request(self, request_id: uuid.UUID, request: RequestData) -> None:
        """Record a new state of a stored request."""

    @abstractmethod
    def delete_request(self, request_id: uuid.UUID) -> None:
        """Forget a stored request."""

    @abstractmethod
    def get_request_data(self, request_id: uuid.UUID) -> RequestData | None:
        """Return the current state of a request, if it exists."""

    @abstractmethod
    def undo_request_data(self, request_id: uuid.UUID) -> None:
        """Step a request back in its history."""

    @abstractmethod
    def redo_request_data(self, request_id: uuid.UUID) -> None:
        """Step a request forward in its history."""


class RequestService(RequestServiceFacade):
    """Keeps requests in memory, keyed by random identifiers."""

    def __init__(self) -> None:
        self._requests: dict[uuid.UUID, RequestEntity] = {}

    def add_request(self, request: RequestData) -> uuid.UUID:
        request_id = new_random()
        self._requests[request_id] = RequestEntity(request)
        return request_id

    def edit_request(self, request_id: uuid.UUID, request: RequestData) -> None:
        entity = self._requests.get(request_id)
        if entity is not None:
            entity.update(request)

    def delete_request(self, request_id: uuid.UUID) -> None:
        self._requests.pop(request_id, None)

    def get_request_data(self, request_id: uuid.UUID) -> RequestData | None:
        entity = self._requests.get(request_id)
        return entity.current() if entity is not None else None

    def undo_request_data(self, request_id: uuid.UUID) -> None:
        entity = self._requests.get(request_id)
        if entity is not None:
            entity.undo()

    def redo_request_data(self, request_id: uuid.UUID) -> None:
        entity = self._requests.get(request_id)
        if entity is not None:
            entity.redo()