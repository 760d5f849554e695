"""Reading and writing the save file: one line per saved game."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

MAX_SAVES = 10
DEFAULT_SAVE_PATH = "save.txt"
DATE_FORMAT = "%d/%m/%Y-%H:%M:%S"

PathLike = Union[str, "os.PathLike[str]"]

_LINE = re.compile(r"\s*(\S+)\s+([+-]?\d+)\s*([+-]?\d+)")


class SaveError(Exception):
    """Raised when a save cannot be read or written."""


class SaveLimitError(SaveError):
    """Raised when the save file already holds the maximum number of saves."""


@dataclass(frozen=True)
class SaveRecord:
    """A saved game: when it was saved, the round reached and the next blind."""

    date: str
    round_number: int
    blind: int

    @classmethod
    def parse(cls, line: str) -> "SaveRecord":
        """Read a record from a save line; trailing text is ignored."""
        match = _LINE.match(line)
        if match is None:
            raise SaveError(f"Formato de save invalido: {line!r}")
        date, round_text, blind_text = match.groups()
        return cls(date, int(round_text), int(blind_text))

    def format(self) -> str:
        return f"{self.date} {self.round_number} {self.blind}"


def validate_save(line: str) -> bool:
    """True when the line parses and holds a non-negative round and a positive blind."""
    try:
        record = SaveRecord.parse(line)
    except SaveError:
        return False
    return record.round_number >= 0 and record.blind > 0


def count_saves(path: PathLike = DEFAULT_SAVE_PATH) -> int:
    """Number of non-empty lines in the save file; 0 when it does not exist."""
    try:
        with open(path, encoding="utf-8") as handle:
            return sum(1 for line in handle if len(line) > 1)
    except FileNotFoundError:
        return 0


def read_saves(path: PathLike = DEFAULT_SAVE_PATH) -> list[SaveRecord]:
    """The valid saves in the file, at most ``MAX_SAVES`` of them."""
    records: list[SaveRecord] = []
    try:
        with open(path, encoding="utf-8") as handle:
            for raw in handle:
                if len(records) >= MAX_SAVES:
                    break
                line = raw.rstrip("\n")
                if line and validate_save(line):
                    records.append(SaveRecord.parse(line))
    except FileNotFoundError as exc:
        raise SaveError("Arquivo de salvamento nao encontrado") from exc
    return records


def _non_empty_lines(path: PathLike) -> list[str]:
    lines: list[str] = []
    try:
        with open(path, encoding="utf-8") as handle:
            for raw in handle:
                if len(lines) >= MAX_SAVES:
                    break
                line = raw.rstrip("\n")
                if line:
                    lines.append(line)
    except FileNotFoundError:
        pass
    return lines


def save_game(
    round_number: int,
    blind: int,
    current_save: str = "",
    path: PathLike = DEFAULT_SAVE_PATH,
    now: Optional[datetime] = None,
) -> str:
    """Record the game and return its save line.

    When ``current_save`` names a line already in the file, that line is
    replaced; otherwise a new line is added, as long as the file holds fewer
    than ``MAX_SAVES`` saves.
    """
    stamp = (now or datetime.now()).strftime(DATE_FORMAT)
    new_save = SaveRecord(stamp, round_number, blind).format()
    limit_message = f"Limite de saves atingido ({MAX_SAVES}). Nao foi possivel salvar."

    try:
        if current_save:
            saves = _non_empty_lines(path)
            if current_save in saves:
                saves = [new_save if line == current_save else line for line in saves]
            elif len(saves) < MAX_SAVES:
                saves.append(new_save)
            else:
                raise SaveLimitError(limit_message)
            with open(path, "w", encoding="utf-8") as handle:
                handle.writelines(f"{line}\n" for line in saves)
        else:
            if count_saves(path) >= MAX_SAVES:
                raise SaveLimitError(limit_message)
            with open(path, "a", encoding="utf-8") as handle:
                handle.write(f"{new_save}\n")
    except OSError as exc:
        raise SaveError(f"Nao foi possivel gravar o arquivo de salvamento: {exc}") from exc

    return new_save