"""High-score file handling and player name entry."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .state import GameState, Screen

MAX_ENTRIES = 5

_LEADING_INT = re.compile(r"[+-]?\d+")


@dataclass
class ScoreEntry:
    """One line of the high-score table."""

    name: str
    score: int


def _leading_int(token: str) -> int:
    match = _LEADING_INT.match(token)
    return int(match.group()) if match else 0


def parse_scores(lines: Iterable[str]) -> list[ScoreEntry]:
    """Read entries of the form ``name score`` from lines, skipping blank ones.

    A score that does not start with a number reads as 0.
    """
    entries = []
    for line in lines:
        tokens = line.split()
        if not tokens:
            continue
        score = _leading_int(tokens[1]) if len(tokens) > 1 else 0
        entries.append(ScoreEntry(tokens[0], score))
    return entries


class HighScoreFile:
    """The high-score table kept in a text file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> list[ScoreEntry]:
        """Return the entries in the file; raises OSError if it cannot be read."""
        with self.path.open(encoding="utf-8") as handle:
            return parse_scores(handle)

    def update(self, name: str, score: int) -> list[ScoreEntry]:
        """Record a score for a player and rewrite the file with the best five.

        An existing entry with the same name has its score replaced.
        Returns the entries written.
        """
        entries = self.load()
        for entry in entries:
            if entry.name == name:
                entry.score = score
                break
        else:
            entries.append(ScoreEntry(name, score))
        entries.sort(key=lambda entry: entry.score, reverse=True)
        best = entries[:MAX_ENTRIES]
        with self.path.open("w", encoding="utf-8") as handle:
            handle.writelines(f"{entry.name}  {entry.score}\n" for entry in best)
        return best

    def listing(self) -> str:
        """The file's lines, each followed by a blank line, for display."""
        with self.path.open(encoding="utf-8") as handle:
            return "".join(line.rstrip("\n") + "\n\n" for line in handle)


def erase_character(state: GameState) -> None:
    """Remove the last character of the player's name, if there is one."""
    state.player_name = state.player_name[:-1]
    state.player_name_file = state.player_name


def type_character(state: GameState, char: str) -> None:
    """Apply one typed character to the player's name.

    Backspace erases; other non-ASCII characters are ignored.
    """
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    if char == "\b":
        erase_character(state)
        return
    if ord(char) < 128:
        state.player_name += char
    state.player_name_file = state.player_name


def submit_name(state: GameState) -> None:
    """Finish name entry and go to the battle for the current level."""
    state.player_name_file = state.player_name
    if state.level == 1:
        state.screen = Screen.BATTLE_ONE
    elif state.level == 2:
        state.screen = Screen.BATTLE_TWO