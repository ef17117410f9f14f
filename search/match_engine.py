"""Ranks the window snapshot against launcher input."""

from __future__ import annotations

import logging

from desktop.icon_resolver import IconResolver
from search.scoring import fuzzy_score
from world_model.app_state_registry import ClientRegistry
from world_model.desktop_state import Match, WindowClient

logger = logging.getLogger("ws.match_engine")

DESCRIPTION_LIMIT = 75
ELLIPSIS = "..."


def describe(client: WindowClient) -> str | None:
    """Secondary label: the live title when it differs from the initial one."""
    if client.title == client.initial_title:
        return None
    if len(client.title) > DESCRIPTION_LIMIT:
        return client.title[:DESCRIPTION_LIMIT] + ELLIPSIS
    return client.title


class MatchEngine:
    """Fuzzy-ranks window clients by their initial title."""

    def __init__(
        self,
        registry: ClientRegistry,
        icon_resolver: IconResolver,
        max_entries: int = 10,
        prefix: str = "",
    ) -> None:
        self.registry = registry
        self.icon_resolver = icon_resolver
        self.max_entries = max_entries
        self.prefix = prefix

    def build_match(self, client: WindowClient) -> Match:
        return Match(
            title=client.initial_title,
            id=client.id,
            icon=self.icon_resolver.resolve(client),
            description=describe(client),
            snapshot_id=self.registry.snapshot_id,
        )

    def rank(self, pattern: str) -> list[tuple[int, WindowClient]]:
        """Return (score, client) pairs with positive scores, best first."""
        scored: list[tuple[int, WindowClient]] = []
        for client in self.registry:
            score = fuzzy_score(client.initial_title, pattern)
            if score is not None and score > 0:
                scored.append((score, client))
        # list.sort is stable: equal scores keep snapshot order
        scored.sort(key=lambda pair: pair[0], reverse=True)
        return scored

    def query(self, input_text: str) -> list[Match]:
        """Return matches for input addressed to this plugin."""
        if not input_text.startswith(self.prefix):
            return []
        cleaned = input_text[len(self.prefix):]
        if not cleaned:
            return [self.build_match(client) for client in self.registry]

        ranked = self.rank(cleaned)[: self.max_entries]
        logger.debug("Query %r matched %d window(s)", cleaned, len(ranked))
        return [self.build_match(client) for _, client in ranked]
