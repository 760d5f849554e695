"""Playing cards and the ordered deck that holds them."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, Optional


class Suit(IntEnum):
    """The four suits, in the order a fresh deck is built."""

    CLUBS = 0
    SPADES = 1
    HEARTS = 2
    DIAMONDS = 3

    @property
    def label(self) -> str:
        return _SUIT_LABELS[self]


_SUIT_LABELS = {
    Suit.CLUBS: "Paus",
    Suit.SPADES: "Espadas",
    Suit.HEARTS: "Copas",
    Suit.DIAMONDS: "Ouros",
}

_RANK_LABELS = {1: "As", 11: "Valete", 12: "Rainha", 13: "Rei"}


@dataclass
class Card:
    """A single card; ``card_id`` is its position label inside a deck."""

    suit: Suit
    rank: int
    card_id: int = 0

    def describe(self) -> str:
        rank_label = _RANK_LABELS.get(self.rank, str(self.rank))
        return f"{rank_label} de {Suit(self.suit).label} id: {self.card_id}"


class DeckError(Exception):
    """Raised when a deck operation cannot be carried out."""


class Deck:
    """An ordered collection of cards, drawn from and added to at the end."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: list[Card] = list(cards)

    @classmethod
    def full(cls) -> "Deck":
        """Build the standard 52-card deck, suit by suit, ace to king."""
        cards = (
            Card(suit, rank)
            for suit in Suit
            for rank in range(1, 14)
        )
        deck = cls(cards)
        deck.renumber()
        return deck

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def pick_by_id(self, card_id: int) -> Card:
        """Remove and return the card carrying ``card_id``."""
        if card_id < 0 or card_id > len(self._cards) - 1:
            raise DeckError(f"id {card_id} nao encontrado no baralho")
        for position, card in enumerate(self._cards):
            if card.card_id == card_id:
                return self._cards.pop(position)
        raise DeckError(f"id {card_id} nao encontrado no baralho")

    def remove_by_id(self, card_id: int) -> None:
        """Discard the card carrying ``card_id``."""
        self.pick_by_id(card_id)

    def pick_last(self) -> Card:
        """Remove and return the last card."""
        if not self._cards:
            raise DeckError("Baralho vazio")
        return self._cards.pop()

    def insert_last(self, card: Card) -> None:
        """Append a card to the end of the deck."""
        self._cards.append(card)

    def renumber(self) -> None:
        """Give every card its current position as id."""
        for position, card in enumerate(self._cards):
            card.card_id = position

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """Shuffle the cards in place; ids are left unchanged."""
        (rng or random.Random()).shuffle(self._cards)

    def clear(self) -> None:
        """Remove every card."""
        self._cards.clear()

    def describe(self) -> str:
        """One line per card, in order."""
        return "".join(f"{card.describe()}\n" for card in self._cards)

    def describe_links(self) -> str:
        """Every card with its neighbours, for inspecting the order."""
        parts: list[str] = []
        last = len(self._cards) - 1
        for position, card in enumerate(self._cards):
            parts.append(f"\n{card.describe()}\n\n")
            if position > 0:
                parts.append(f"Anterior: {self._cards[position - 1].describe()}\n")
            if position < last:
                parts.append(f"Proxima: {self._cards[position + 1].describe()}\n\n")
            parts.append("------------------\n")
        return "".join(parts)