"""Core draft lottery rules: odds parsing, weighted draw and elimination order."""

from __future__ import annotations

import random
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_INT_PATTERN = re.compile(r"[+-]?\d+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

ELIMINATION_STEP_MS = 5400
FINAL_STEP_MS = 4000


@dataclass(frozen=True)
class Team:
    """A team taking part in the lottery with its winning odds in percent."""

    name: str
    odds: int


def parse_odds(text: str) -> int | None:
    """Parse an odds entry as a 32-bit integer, or return None if it is not one."""
    stripped = text.strip()
    if not _INT_PATTERN.fullmatch(stripped):
        return None
    value = int(stripped)
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def collect_teams(rows: Iterable[tuple[str, str]]) -> list[Team]:
    """Build the teams from (name, odds text) rows, skipping rows without positive odds.

    A row with a blank name is called "Team N" after its position, counted from 1.
    """
    teams = []
    for position, (name, odds_text) in enumerate(rows, start=1):
        odds = parse_odds(odds_text)
        if odds is None or odds <= 0:
            continue
        teams.append(Team(name.strip() or f"Team {position}", odds))
    return teams


def draw_winner(teams: Sequence[Team], rng: random.Random | None = None) -> int:
    """Pick the index of the winning team, weighted by its odds."""
    rng = rng or random.SystemRandom()
    total = sum(team.odds for team in teams)
    if total <= 0:
        raise ValueError("the lottery needs teams with positive total odds")
    ticket = rng.randrange(total)
    cumulative = 0
    for index, team in enumerate(teams):
        cumulative += team.odds
        if ticket < cumulative:
            return index
    raise ValueError("no team holds the drawn ticket")


def elimination_order(
    teams: Sequence[Team], winner_index: int, rng: random.Random | None = None
) -> list[Team]:
    """Return every team but the winner, in a randomly shuffled elimination order."""
    if not 0 <= winner_index < len(teams):
        raise IndexError("winner index out of range")
    rng = rng or random.SystemRandom()
    order = [team for index, team in enumerate(teams) if index != winner_index]
    for i in reversed(range(1, len(order))):
        j = rng.randrange(i + 1)
        order[i], order[j] = order[j], order[i]
    return order


def animation_duration_ms(team_count: int) -> int:
    """Time from the draw until the final announcement, in milliseconds."""
    return (team_count - 1) * ELIMINATION_STEP_MS + FINAL_STEP_MS


def elimination_text(team: Team) -> str:
    """Text shown when a team is eliminated."""
    return f"ELIMINATED: {team.name} - {team.odds}% chance of winning"


def winner_banner_text(team: Team) -> str:
    """Text of the banner that drops in for the winner."""
    return f"{team.name}\nWon with {team.odds}% odds!"


def winner_message(team: Team) -> str:
    """Text of the final congratulation message."""
    return (
        "Congratulations to:\n"
        f"{team.name}!\n"
        "who will draft first overall. "
        f"They had a {team.odds}% chance of winning."
    )