"""Classifying a played hand and the chips and multiplier it is worth."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping
from enum import IntEnum
from itertools import islice

from .deck import Card

HAND_SIZE = 5

_ACE_HIGH = [1, 10, 11, 12, 13]


class HandRank(IntEnum):
    """Hand categories, weakest first."""

    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    TRIPLE = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    STRAIGHT_FLUSH = 7


_MODIFIERS: dict[HandRank, tuple[int, int]] = {
    HandRank.HIGH_CARD: (10, 1),
    HandRank.PAIR: (15, 2),
    HandRank.TWO_PAIR: (30, 4),
    HandRank.TRIPLE: (33, 3),
    HandRank.STRAIGHT: (123, 12),
    HandRank.FLUSH: (111, 11),
    HandRank.FULL_HOUSE: (333, 22),
    HandRank.STRAIGHT_FLUSH: (123, 111),
}


def is_flush(suit_counts: Mapping[int, int]) -> bool:
    """True when five cards share one suit."""
    return any(count == HAND_SIZE for count in suit_counts.values())


def is_straight(ranks: Iterable[int]) -> bool:
    """True when five ranks form a run; the ace may sit low or high."""
    ordered = sorted(ranks)
    if len(ordered) != HAND_SIZE:
        return False
    if all(high == low + 1 for low, high in zip(ordered, ordered[1:])):
        return True
    return ordered == _ACE_HIGH


def _counts_in_range(rank_counts: Mapping[int, int]) -> list[int]:
    return [rank_counts.get(rank, 0) for rank in range(1, 14)]


def is_full_house(rank_counts: Mapping[int, int]) -> bool:
    """True when there is both a rank held three times and one held twice."""
    counts = _counts_in_range(rank_counts)
    return 3 in counts and 2 in counts


def is_triple(rank_counts: Mapping[int, int]) -> bool:
    """True when some rank is held exactly three times."""
    return 3 in _counts_in_range(rank_counts)


def is_two_pair(rank_counts: Mapping[int, int]) -> bool:
    """True when exactly two ranks are held exactly twice."""
    return _counts_in_range(rank_counts).count(2) == 2


def is_pair(rank_counts: Mapping[int, int]) -> bool:
    """True when some rank is held exactly twice."""
    return 2 in _counts_in_range(rank_counts)


def rank_hand(cards: Iterable[Card]) -> HandRank:
    """Classify the first five cards of a selection."""
    played = list(islice(cards, HAND_SIZE))
    if not played:
        return HandRank.HIGH_CARD

    rank_counts = Counter(card.rank for card in played)
    suit_counts = Counter(int(card.suit) for card in played)
    ranks = [card.rank for card in played]

    flush = is_flush(suit_counts)
    straight = is_straight(ranks)

    if flush and straight:
        return HandRank.STRAIGHT_FLUSH
    if is_full_house(rank_counts):
        return HandRank.FULL_HOUSE
    if flush:
        return HandRank.FLUSH
    if straight:
        return HandRank.STRAIGHT
    if is_triple(rank_counts):
        return HandRank.TRIPLE
    if is_two_pair(rank_counts):
        return HandRank.TWO_PAIR
    if is_pair(rank_counts):
        return HandRank.PAIR
    return HandRank.HIGH_CARD


def hand_modifiers(cards: Iterable[Card]) -> tuple[int, int]:
    """Return the base ``(chips, multiplier)`` the selection scores."""
    return _MODIFIERS[rank_hand(cards)]