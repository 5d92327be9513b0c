"""
Card Catalog - A named, ordered, immutable collection of cards.

Catalogs are plain objects handed to the engine; there is no
process-wide registry. Names are unique within a catalog.
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Iterable, Iterator

from pydantic import TypeAdapter

from .card import Card
from .validation import ValidationResult, ensure_valid, validate_catalog

logger = logging.getLogger(__name__)

_CARD_LIST = TypeAdapter(list[Card])


class UnknownCardError(ValueError):
    """Raised when a card name is not in the catalog."""


class CardCatalog:
    """Ordered list of cards plus name lookup."""

    def __init__(self, name: str, cards: Iterable[Card]):
        self.name = name
        self._cards: tuple[Card, ...] = tuple(cards)
        ensure_valid(self._cards)
        self._by_name = {card.name: card for card in self._cards}

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __repr__(self) -> str:
        return f"CardCatalog({self.name!r}, {len(self._cards)} cards)"

    @property
    def cards(self) -> tuple[Card, ...]:
        return self._cards

    @property
    def names(self) -> list[str]:
        return [card.name for card in self._cards]

    def get(self, name: str) -> Card | None:
        return self._by_name.get(name)

    def by_name(self, name: str) -> Card:
        """Look up a card; unknown names are an argument error."""
        card = self._by_name.get(name)
        if card is None:
            raise UnknownCardError(f"Unknown card '{name}' in catalog '{self.name}'")
        return card

    def resolve(self, names: Iterable[str]) -> list[Card]:
        return [self.by_name(name) for name in names]

    def extended(self, name: str, extra: Iterable[Card]) -> CardCatalog:
        """A new catalog with `extra` appended."""
        return CardCatalog(name, [*self._cards, *extra])

    def validate(self) -> ValidationResult:
        return validate_catalog(self._cards)

    # =========================================================================
    # JSON
    # =========================================================================

    def to_json(self) -> str:
        return _CARD_LIST.dump_json(list(self._cards), indent=2).decode()

    @classmethod
    def from_json(cls, name: str, text: str | bytes) -> CardCatalog:
        cards = _CARD_LIST.validate_json(text)
        logger.debug("Loaded %d cards into catalog %s", len(cards), name)
        return cls(name, cards)

    @classmethod
    def from_file(cls, path: str | Path) -> CardCatalog:
        path = Path(path)
        return cls.from_json(path.stem, path.read_text())


def catalog_summary(catalog: CardCatalog) -> dict:
    """Counts per kind and tag; used by the CLI."""
    kinds: dict[str, int] = {}
    tags: dict[str, int] = {}
    for card in catalog:
        kinds[card.kind.value] = kinds.get(card.kind.value, 0) + 1
        for tag in card.tags:
            tags[tag.value] = tags.get(tag.value, 0) + 1
    return {"name": catalog.name, "cards": len(catalog), "kinds": kinds, "tags": tags}


def dump_summary(catalog: CardCatalog) -> str:
    return json.dumps(catalog_summary(catalog), indent=2, sort_keys=True)
