"""Editable team entry form: names and odds with a running total."""

from __future__ import annotations

from dataclasses import dataclass

from draftlottery.lottery import Team, collect_teams, parse_odds


@dataclass
class TeamRow:
    """One row of the form: a team name and the odds as typed."""

    name: str = ""
    odds_text: str = ""


class TeamForm:
    """A list of team rows whose odds must add up to 100 before a draw."""

    def __init__(self, count: int = 0) -> None:
        self.rows: list[TeamRow] = []
        self.resize(count)

    def resize(self, count: int) -> None:
        """Grow or shrink the form, keeping what is typed in surviving rows."""
        if count < 0:
            raise ValueError("team count cannot be negative")
        if count > len(self.rows):
            self.rows.extend(TeamRow() for _ in range(count - len(self.rows)))
        else:
            del self.rows[count:]

    def set_name(self, index: int, name: str) -> None:
        self.rows[index].name = name

    def set_odds(self, index: int, text: str) -> None:
        self.rows[index].odds_text = text

    def total_odds(self) -> int:
        """Sum of every odds entry that reads as an integer."""
        return sum(
            value
            for value in (parse_odds(row.odds_text) for row in self.rows)
            if value is not None
        )

    def is_ready(self) -> bool:
        """Whether the odds add up to exactly 100 percent."""
        return self.total_odds() == 100

    def total_label(self) -> str:
        return f"Total Odds: {self.total_odds()}%"

    def teams(self) -> list[Team]:
        """Teams with positive odds, in form order."""
        return collect_teams((row.name, row.odds_text) for row in self.rows)