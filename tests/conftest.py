"""Shared fixtures for window switcher tests."""

from __future__ import annotations

import json
from typing import Any

import pytest

from os_controller.base_controller import WindowController


def client_payload(
    address: str,
    initial_title: str,
    title: str | None = None,
    window_class: str = "",
    initial_class: str | None = None,
    mapped: bool = True,
) -> dict[str, Any]:
    return {
        "address": address,
        "mapped": mapped,
        "hidden": False,
        "workspace": {"id": 1, "name": "1"},
        "class": window_class,
        "title": initial_title if title is None else title,
        "initialClass": window_class if initial_class is None else initial_class,
        "initialTitle": initial_title,
        "pid": 4242,
    }


class FakeController(WindowController):
    """In-memory controller recording focus calls."""

    def __init__(self, clients_json: str = "[]", error: Exception | None = None) -> None:
        self.clients_json = clients_json
        self.error = error
        self.focused: list[str] = []

    def list_clients(self) -> str:
        if self.error is not None:
            raise self.error
        return self.clients_json

    def focus_window(self, address: str) -> str:
        self.focused.append(address)
        return "ok"


@pytest.fixture
def sample_clients_json() -> str:
    return json.dumps(
        [
            client_payload("0xa1", "Firefox", title="Firefox — Example", window_class="firefox"),
            client_payload("0xb2", "Terminal", window_class="kitty"),
        ]
    )
