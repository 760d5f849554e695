"""The interactive game: start menu, rounds, and saving progress."""

from __future__ import annotations

import argparse
import random
from typing import Optional, Sequence

from .game import INITIAL_BLIND, GameState, Reader, Writer, play_turn
from .saves import (
    DEFAULT_SAVE_PATH,
    PathLike,
    SaveError,
    SaveRecord,
    read_saves,
    save_game,
)


def _read_int(read: Reader) -> Optional[int]:
    try:
        return int(read().strip())
    except ValueError:
        return None


def choose_save(
    path: PathLike, read: Reader, write: Writer
) -> Optional[SaveRecord]:
    """List the valid saves and return the one the player picks, if any."""
    try:
        records = read_saves(path)
    except SaveError:
        write("Erro: Arquivo de salvamento nao encontrado!\n")
        return None

    write("\n=== SAVES DISPONIVEIS ===\n\n")
    for number, record in enumerate(records, start=1):
        write(f"{number}. {record.format()}\n")

    if not records:
        write("Nenhum save valido encontrado!\n")
        return None

    write(f"\nEscolha um save (1-{len(records)}) ou 0 para cancelar: ")
    choice = _read_int(read)
    if choice is None or not 1 <= choice <= len(records):
        write("Escolha cancelada.\n")
        return None

    record = records[choice - 1]
    write("\nSave carregado com sucesso!\n")
    write(f"Data: {record.date}\n")
    write(f"Round: {record.round_number}\n")
    write(f"Current Blind: {record.blind}\n")
    return record


def run_game(
    read: Reader,
    write: Writer,
    save_path: PathLike = DEFAULT_SAVE_PATH,
    rng: Optional[random.Random] = None,
) -> int:
    """Play rounds until input runs out; return the round number reached."""
    round_number = 0
    blind = INITIAL_BLIND
    current_save = ""

    try:
        write("=== SIMPLE CARD GAME ===\n\n1. Novo Jogo\n2. Carregar Jogo\n\nEscolha uma opcao: ")
        option = _read_int(read)
        if option == 1:
            write("Iniciando novo jogo...\n")
        elif option == 2:
            record = choose_save(save_path, read, write)
            if record is not None:
                round_number = record.round_number
                blind = record.blind
                current_save = record.format()
                write(f"Jogo carregado! Continuando do round {round_number}...\n")
            else:
                write("Falha ao carregar. Iniciando novo jogo...\n")
        else:
            write("Opcao invalida. Iniciando novo jogo...\n")

        while True:
            state = GameState.new_round(rng)
            state.blind = blind
            while True:
                if not state.can_continue():
                    write(
                        "Voce perdeu :(\n\n"
                        f"Pontuacao necessaria: {state.blind}\n"
                        f"Pontuacao atingida: {state.score}\n"
                        f"Faltaram {state.blind - state.score} pontos.\n"
                    )
                    break
                play_turn(state, read, write)
                if state.score >= state.blind:
                    round_number += 1
                    write(
                        "Parabens!!\n\n"
                        f"Voce ganhou o round {round_number} com {state.score} pontos\n"
                        f"{state.score - state.blind} Pontos cima da puntuacao necessaria\n"
                    )
                    blind += blind // 4
                    try:
                        current_save = save_game(
                            round_number, blind, current_save, save_path
                        )
                    except SaveError as exc:
                        write(f"{exc}\n")
                    else:
                        write("Jogo salvo com sucesso!\n")
                    break
                state.chips = 0
                state.multi = 0
    except EOFError:
        pass
    return round_number


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="A poker-hand scoring card game.")
    parser.add_argument("--save", default=DEFAULT_SAVE_PATH, help="save file to use")
    parser.add_argument("--seed", type=int, default=None, help="seed for shuffling")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed) if args.seed is not None else None

    def write(text: str) -> None:
        print(text, end="", flush=True)

    try:
        run_game(input, write, args.save, rng)
    except KeyboardInterrupt:
        write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())