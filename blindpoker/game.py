"""One round of play: the hand, the selection and the turn menus."""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Optional

from .deck import Deck, DeckError
from .hands import HandRank, hand_modifiers, rank_hand

HAND_SIZE = 8
MAX_SELECTION = 5
INITIAL_BLIND = 300
STARTING_HANDS = 4
STARTING_DISCARDS = 4

_RULE = "-" * 56 + "\n"

Reader = Callable[[], str]
Writer = Callable[[str], None]


class GameError(Exception):
    """Raised when a move is not allowed in the current state."""


@dataclass
class GameState:
    """Everything one round needs: the cards and the running counters."""

    deck: Deck = field(default_factory=Deck)
    hand: Deck = field(default_factory=Deck)
    selected: Deck = field(default_factory=Deck)
    hands: int = STARTING_HANDS
    discards: int = STARTING_DISCARDS
    score: int = 0
    chips: int = 0
    multi: int = 0
    blind: int = INITIAL_BLIND

    @classmethod
    def new_round(cls, rng: Optional[random.Random] = None) -> "GameState":
        """Shuffle a full deck and deal a fresh hand from its end."""
        deck = Deck.full()
        deck.shuffle(rng)
        state = cls(deck=deck)
        state.refill_hand()
        return state

    def render(self) -> str:
        """The status screen shown before every move."""
        header = (
            f"|{self.chips:03d}| x |{self.multi:03d}|             "
            f"{len(self.deck):02d}/52                    |{self.blind:03d}|\n"
        )
        return (
            _RULE
            + header
            + _RULE
            + f"Pontuacao atual: {self.score:03d}\n"
            + f"Maos: {self.hands:02d} | Descartes {self.discards:02d}\n\n"
            + "Sua jogada:\n\n"
            + self.selected.describe()
            + "\n"
            + "Sua mao:\n\n"
            + self.hand.describe()
        )

    def add_to_selection(self, card_id: int) -> None:
        """Move a card from the hand into the selection."""
        if len(self.selected) >= MAX_SELECTION:
            raise GameError(f"Limite de {MAX_SELECTION} cartas atingido")
        try:
            card = self.hand.pick_by_id(card_id)
        except DeckError as exc:
            raise GameError(str(exc)) from exc
        self.selected.insert_last(card)
        self.hand.renumber()
        self.selected.renumber()

    def remove_from_selection(self, card_id: int) -> None:
        """Move a card from the selection back into the hand."""
        if not len(self.selected):
            raise GameError("Impossivel remover essa carta: baralho vazio")
        try:
            card = self.selected.pick_by_id(card_id)
        except DeckError as exc:
            raise GameError(str(exc)) from exc
        self.hand.insert_last(card)
        self.hand.renumber()
        self.selected.renumber()

    def refill_hand(self) -> None:
        """Draw from the deck until the hand is full or the deck is empty."""
        while len(self.hand) < HAND_SIZE and len(self.deck):
            self.hand.insert_last(self.deck.pick_last())
        self.hand.renumber()

    def play_selected(self) -> HandRank:
        """Score the selection, add it to the total and use up one hand."""
        if not len(self.selected):
            raise GameError("nao eh possivel jogar uma mao vazia")
        played = rank_hand(self.selected)
        self.chips, self.multi = hand_modifiers(self.selected)
        self.chips += sum(card.rank for card in self.selected)
        self.score += self.chips * self.multi
        self.selected.clear()
        self.refill_hand()
        self.hands -= 1
        return played

    def discard_selected(self) -> None:
        """Throw the selection away and draw replacements."""
        if self.discards == 0 or not len(self.selected):
            raise GameError("nao ha descartes restantes ou a mao esta vazia")
        self.selected.clear()
        self.refill_hand()
        self.discards -= 1

    def can_continue(self) -> bool:
        """True while hands remain and there are still cards in play."""
        return self.hands > 0 and (
            len(self.deck) > 0 or len(self.hand) > 0 or len(self.selected) > 0
        )


def _read_int(read: Reader) -> Optional[int]:
    try:
        return int(read().strip())
    except ValueError:
        return None


def _modify(state: GameState, read: Reader, write: Writer) -> None:
    write("1-Adicionar carta\n2-Remover carta\n\nOpcao: ")
    option = _read_int(read)
    if option == 1:
        if len(state.selected) >= MAX_SELECTION:
            write(f"Limite de {MAX_SELECTION} cartas atingido\n")
            return
        write("Escolha uma carta para ser adicionada\n\n")
        write(state.hand.describe())
        write("Selecione uma carta pelo id: ")
        card_id = _read_int(read)
        if card_id is None:
            write("id invalido\n")
            return
        try:
            state.add_to_selection(card_id)
        except GameError as exc:
            write(f"{exc}\n")
            return
        write(state.selected.describe())
    elif option == 2:
        if not len(state.selected):
            write("Impossivel remover essa carta: baralho vazio\n")
            return
        write("Escolha uma carta para ser REMOVIDA\n\n")
        write(state.selected.describe())
        write("Selecione uma carta pelo id: ")
        card_id = _read_int(read)
        if card_id is None:
            write("id invalido\n")
            return
        try:
            state.remove_from_selection(card_id)
        except GameError as exc:
            write(f"{exc}\n")
    else:
        write("opcao invalida\n")


def _confirm(state: GameState, read: Reader, write: Writer) -> None:
    write("1-Jogar mao selecionada\n2-Descartar mao selecionada\n\nSelecione uma opcao: ")
    option = _read_int(read)
    if option == 1:
        try:
            state.play_selected()
        except GameError as exc:
            write(f"{exc}\n")
            return
        write(state.render())
    elif option == 2:
        try:
            state.discard_selected()
        except GameError as exc:
            write(f"{exc}\n")
            return
        write("Baralho descartado\n")


def play_turn(state: GameState, read: Reader, write: Writer) -> None:
    """Show the screen and carry out one menu choice."""
    write(state.render())
    write("\n\n1: Modificar jogada\n2: Confirmar jogada\n\n")
    option = _read_int(read)
    if option == 1:
        _modify(state, read, write)
    elif option == 2:
        _confirm(state, read, write)
    else:
        write("opcao invalida\n")