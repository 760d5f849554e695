import pytest

from blindpoker.deck import Card, Deck, Suit
from blindpoker.game import GameError, GameState, play_turn
from blindpoker.hands import HandRank, hand_modifiers

import random


def _scripted(*answers):
    pending = list(answers)

    def read():
        if not pending:
            raise EOFError
        return pending.pop(0)

    return read


def _collector():
    out = []
    return out, out.append


def _state_with(hand_cards, deck_cards=(), selected_cards=()):
    state = GameState(
        deck=Deck(deck_cards), hand=Deck(hand_cards), selected=Deck(selected_cards)
    )
    state.hand.renumber()
    state.selected.renumber()
    return state


def test_new_round_deals_full_hand():
    state = GameState.new_round(random.Random(3))
    assert len(state.hand) == 8
    assert [card.card_id for card in state.hand] == list(range(8))
    assert len(state.hand) + len(state.deck) == 52
    everything = {(card.suit, card.rank) for card in list(state.hand) + list(state.deck)}
    assert len(everything) == 52


def test_add_to_selection_moves_and_renumbers():
    state = GameState.new_round(random.Random(1))
    first = list(state.hand)[0]
    state.add_to_selection(0)
    assert list(state.selected) == [first]
    assert first.card_id == 0
    assert [card.card_id for card in state.hand] == list(range(len(state.hand)))
    assert len(state.hand) == 7


def test_selection_limit():
    state = GameState.new_round(random.Random(1))
    for _ in range(5):
        state.add_to_selection(0)
    with pytest.raises(GameError):
        state.add_to_selection(0)
    assert len(state.selected) == 5


def test_add_unknown_id_raises():
    state = GameState.new_round(random.Random(1))
    with pytest.raises(GameError):
        state.add_to_selection(8)
    assert len(state.hand) == 8


def test_remove_from_empty_selection_raises():
    state = GameState.new_round(random.Random(1))
    with pytest.raises(GameError):
        state.remove_from_selection(0)


def test_remove_returns_card_to_end_of_hand():
    state = GameState.new_round(random.Random(2))
    state.add_to_selection(0)
    card = list(state.selected)[0]
    state.remove_from_selection(0)
    assert len(state.selected) == 0
    assert list(state.hand)[-1] is card
    assert card.card_id == len(state.hand) - 1


def test_play_selected_scores_pair():
    pair = [Card(Suit.CLUBS, 5), Card(Suit.HEARTS, 5)]
    state = _state_with(
        [Card(Suit.SPADES, 2)],
        deck_cards=[Card(Suit.DIAMONDS, rank) for rank in range(1, 10)],
        selected_cards=pair,
    )
    base_chips, base_multi = hand_modifiers(pair)
    before = state.hands
    played = state.play_selected()
    assert played is HandRank.PAIR
    assert state.multi == base_multi
    assert state.chips == base_chips + 10
    assert state.score == state.chips * state.multi
    assert state.hands == before - 1
    assert len(state.selected) == 0
    assert len(state.hand) == 8


def test_play_empty_selection_raises():
    state = GameState.new_round(random.Random(1))
    with pytest.raises(GameError):
        state.play_selected()
    assert state.score == 0


def test_refill_stops_when_deck_runs_out():
    state = _state_with([Card(Suit.CLUBS, 1)], deck_cards=[Card(Suit.CLUBS, 2)])
    state.refill_hand()
    assert len(state.hand) == 2
    assert len(state.deck) == 0


def test_discard_without_discards_left_raises():
    state = _state_with([], selected_cards=[Card(Suit.CLUBS, 3)])
    state.discards = 0
    with pytest.raises(GameError):
        state.discard_selected()
    assert len(state.selected) == 1


def test_discard_refills_and_counts():
    state = GameState.new_round(random.Random(4))
    state.add_to_selection(0)
    state.add_to_selection(0)
    before = state.discards
    state.discard_selected()
    assert state.discards == before - 1
    assert len(state.selected) == 0
    assert len(state.hand) == 8
    assert len(state.hand) + len(state.deck) == 50


def test_can_continue():
    state = GameState.new_round(random.Random(1))
    assert state.can_continue() is True
    state.hands = 0
    assert state.can_continue() is False
    empty = GameState()
    assert empty.can_continue() is False


def test_render_shows_counters_and_cards():
    state = _state_with([Card(Suit.CLUBS, 1)], deck_cards=[Card(Suit.SPADES, 2)])
    screen = state.render()
    assert "|000| x |000|" in screen
    assert "|300|" in screen
    assert "01/52" in screen
    assert "Sua jogada:" in screen
    assert "As de Paus id: 0" in screen


def test_play_turn_adds_card():
    state = GameState.new_round(random.Random(5))
    first = list(state.hand)[0]
    out, write = _collector()
    play_turn(state, _scripted("1", "1", "0"), write)
    assert list(state.selected) == [first]
    assert any("Escolha uma carta para ser adicionada" in text for text in out)


def test_play_turn_plays_selection():
    state = GameState.new_round(random.Random(5))
    play_turn(state, _scripted("1", "1", "0"), lambda text: None)
    out, write = _collector()
    play_turn(state, _scripted("2", "1"), write)
    assert state.score > 0
    assert state.hands == 3
    assert len(state.selected) == 0


def test_play_turn_invalid_option():
    state = GameState.new_round(random.Random(5))
    out, write = _collector()
    play_turn(state, _scripted("9"), write)
    assert "opcao invalida\n" in out
    assert len(state.selected) == 0


def test_play_turn_reports_empty_play():
    state = GameState.new_round(random.Random(5))
    out, write = _collector()
    play_turn(state, _scripted("2", "1"), write)
    assert "nao eh possivel jogar uma mao vazia\n" in out
    assert state.hands == 4