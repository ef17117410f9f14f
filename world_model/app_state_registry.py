"""Registry holding the session's snapshot of open windows."""

from __future__ import annotations

import json
import logging
import uuid
from collections.abc import Iterator
from typing import Any

from pydantic import ValidationError

from core.errors import ParsingError, StaleClientError
from world_model.desktop_state import WindowClient

logger = logging.getLogger("ws.registry")


def parse_clients(raw_json: str) -> list[WindowClient]:
    """Parse hyprctl output, numbering every descriptor by its source position."""
    try:
        payload: Any = json.loads(raw_json)
    except json.JSONDecodeError as exc:
        raise ParsingError(f"Window source returned invalid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise ParsingError(f"Expected a JSON array of clients, got {type(payload).__name__}")

    clients: list[WindowClient] = []
    for position, descriptor in enumerate(payload):
        if not isinstance(descriptor, dict):
            raise ParsingError(f"Client #{position} is not an object")
        try:
            clients.append(WindowClient.model_validate({**descriptor, "id": position}))
        except ValidationError as exc:
            raise ParsingError(f"Client #{position} is malformed: {exc}") from exc
    return clients


class ClientRegistry:
    """Immutable, ordered snapshot of mapped windows."""

    def __init__(self, clients: tuple[WindowClient, ...] = ()) -> None:
        self._clients = clients
        self._by_id = {client.id: client for client in clients}
        self.snapshot_id = uuid.uuid4().hex

    @classmethod
    def build(cls, raw_json: str) -> ClientRegistry:
        """Build a snapshot from raw window source output; raises ParsingError."""
        clients = parse_clients(raw_json)
        mapped = tuple(client for client in clients if client.mapped)
        logger.debug("Snapshot holds %d of %d clients", len(mapped), len(clients))
        return cls(mapped)

    @classmethod
    def empty(cls) -> ClientRegistry:
        return cls(())

    def get(self, client_id: int, snapshot_id: str | None = None) -> WindowClient:
        """Return the client for an id handed out by this snapshot."""
        if snapshot_id is not None and snapshot_id != self.snapshot_id:
            raise StaleClientError(
                f"Client id {client_id} belongs to snapshot {snapshot_id}, not {self.snapshot_id}"
            )
        try:
            return self._by_id[client_id]
        except KeyError:
            raise StaleClientError(f"No client with id {client_id} in snapshot") from None

    def __iter__(self) -> Iterator[WindowClient]:
        return iter(self._clients)

    def __len__(self) -> int:
        return len(self._clients)
