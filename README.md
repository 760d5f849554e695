# blindpoker

A small terminal card game. Each round starts from a freshly shuffled 52-card
deck and you are dealt eight cards. Pick up to five of them and play them as a
poker hand. The hand type sets your chips and multiplier. Every played card
adds its rank to the chips, and chips × multiplier is added to your score.

Reach the blind before your four hands run out to win the round. The blind
then grows by a quarter, rounded down, and the game saves your progress. If you
run out of hands, the game shows how many points you were short and starts a
new round at the same blind.

You may also discard your selection to draw fresh cards. Each round allows
four discards, and a discard needs at least one selected card.

## Installing

```
pip install .
```

## Playing

```
blindpoker [--save PATH] [--seed N]
```

- `--save PATH`: the save file to use. The default is `save.txt` in the working
  directory.
- `--seed N`: seeds the shuffle so that deals can be repeated.

The start menu offers a new game or loading a saved one. Loading lists the
valid saves in the file, and you pick one by number. The save file holds at
most ten lines. Each line has the date and time, the round reached and the
current blind. When you continue a loaded game, its line is updated in place.
A new game adds a new line. If the file is already full, the game reports this
and does not save.

The menus are in Portuguese:

- `1: Modificar jogada`: add a card from your hand to the selection by its
  id, or move a selected card back to the hand.
- `2: Confirmar jogada`: play the selection, or discard it.

The game runs until input ends, for example with Ctrl-D, or until you press
Ctrl-C. There is no quit option in the menus. The screen is not cleared
between moves, and the game never pauses for you to press a key.

## Hand values

| Hand            | Chips | Multiplier |
|-----------------|------:|-----------:|
| High card       |    10 |          1 |
| Pair            |    15 |          2 |
| Two pair        |    30 |          4 |
| Three of a kind |    33 |          3 |
| Straight        |   123 |         12 |
| Flush           |   111 |         11 |
| Full house      |   333 |         22 |
| Straight flush  |   123 |        111 |

Straights and flushes need all five cards. In a straight the ace counts both
low (A-2-3-4-5) and high (10-J-Q-K-A).

## Using the library

The parts can also be used on their own:

- `blindpoker.deck`: `Suit`, `Card` and `Deck`. A `Deck` is an ordered pile of
  cards with numbered positions. It provides `Deck.full()`, `pick_by_id`,
  `pick_last`, `insert_last`, `renumber`, `shuffle` and `describe`. Failed
  operations raise `DeckError`.
- `blindpoker.hands`: `HandRank`, `rank_hand` and `hand_modifiers`, which
  classify a hand and return its base `(chips, multiplier)`. It also has the
  checks `is_flush`, `is_straight`, `is_full_house`, `is_triple`,
  `is_two_pair` and `is_pair`.
- `blindpoker.saves`: `SaveRecord`, `validate_save`, `count_saves`,
  `read_saves` and `save_game` for the save file. These raise `SaveError` and
  `SaveLimitError`.
- `blindpoker.game`: `GameState` holds one round, and `play_turn` runs one
  menu turn with any `read`/`write` callables. Moves that are not allowed
  raise `GameError`.
- `blindpoker.cli`: `run_game` and `choose_save` drive the whole game.
  `main` is the `blindpoker` command.

## Running the tests

```
pip install .[test]
pytest
```