import heapq
import itertools
import random

import pytest

from draftlottery.app import LotteryWindow, build_parser, main
from draftlottery.lottery import (
    Team,
    animation_duration_ms,
    elimination_text,
    winner_banner_text,
    winner_message,
)


class FakeRoot:
    """A scheduler with a virtual clock."""

    def __init__(self):
        self.now = 0
        self._queue = []
        self._seq = itertools.count()

    def after(self, ms, func, *args):
        heapq.heappush(self._queue, (self.now + ms, next(self._seq), func, args))

    def run(self, until=None):
        while self._queue:
            when = self._queue[0][0]
            if until is not None and when > until:
                break
            _, _, func, args = heapq.heappop(self._queue)
            self.now = when
            func(*args)
        if until is not None:
            self.now = max(self.now, until)


def make_window(entries, seed=7):
    root = FakeRoot()
    window = LotteryWindow(root, len(entries))
    window.rng = random.Random(seed)
    for index, (name, odds) in enumerate(entries):
        window.form.set_name(index, name)
        window.form.set_odds(index, odds)
    return root, window


ENTRIES = [("Alpha", "40"), ("Bravo", "30"), ("Charlie", "20"), ("Delta", "10")]


def test_new_window_is_not_ready():
    window = LotteryWindow(FakeRoot(), 3)
    assert len(window.form.rows) == 3
    assert window.total_label == "Total Odds: 0%"
    assert window.lottery_enabled is False


def test_enabled_when_odds_reach_hundred():
    _, window = make_window(ENTRIES)
    assert window.lottery_enabled is True
    window.form.set_odds(3, "11")
    assert window.lottery_enabled is False


def test_start_without_full_odds_raises():
    _, window = make_window([("Alpha", "50"), ("Bravo", "20")])
    with pytest.raises(ValueError):
        window.start_lottery()


def test_second_start_while_running_raises():
    _, window = make_window(ENTRIES)
    window.start_lottery()
    assert window.lottery_enabled is False
    with pytest.raises(RuntimeError):
        window.start_lottery()


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_full_sequence_eliminates_everyone_but_winner(seed):
    root, window = make_window(ENTRIES, seed)
    winner = window.start_lottery()
    root.run()
    teams = window.form.teams()
    assert winner in teams
    assert window.announcements[0] == "Drawing lottery..."
    assert window.announcements[-1] == winner_banner_text(winner)
    eliminated = window.announcements[1:-1]
    expected = {elimination_text(team) for team in teams if team != winner}
    assert sorted(eliminated) == sorted(expected)
    assert window.messages == [winner_message(winner)]
    assert window.running is False
    assert window.lottery_enabled is True


def test_final_message_waits_for_animation_duration():
    root, window = make_window(ENTRIES)
    winner = window.start_lottery()
    duration = animation_duration_ms(len(window.form.teams()))
    root.run(until=duration - 1)
    assert window.messages == []
    assert window.running is True
    root.run(until=duration)
    assert window.messages == [winner_message(winner)]


def test_confetti_flies_at_final_message_and_is_cleared_after():
    root, window = make_window(ENTRIES)
    window.start_lottery()
    duration = animation_duration_ms(len(window.form.teams()))
    root.run(until=duration)
    assert len(window.confetti) == 150
    root.run()
    assert window.confetti == []
    assert window.banner_opacity == pytest.approx(0.0)
    assert window.label_position is None


def test_sure_winner_with_zero_odds_teams():
    root, window = make_window([("Alpha", "100"), ("Bravo", "0"), ("Charlie", "")])
    winner = window.start_lottery()
    root.run()
    assert winner == Team("Alpha", 100)
    assert window.announcements == ["Drawing lottery...", winner_banner_text(winner)]


def test_blank_name_gets_default_in_announcements():
    root, window = make_window([("", "50"), ("Bravo", "50")])
    winner = window.start_lottery()
    root.run()
    names = {team.name for team in window.form.teams()}
    assert names == {"Team 1", "Bravo"}
    assert winner.name in names


def test_set_team_count_keeps_existing_rows():
    _, window = make_window(ENTRIES)
    window.set_team_count(2)
    assert [row.name for row in window.form.rows] == ["Alpha", "Bravo"]
    window.set_team_count(5)
    assert [row.name for row in window.form.rows][:2] == ["Alpha", "Bravo"]
    assert all(row.name == "" and row.odds_text == "" for row in window.form.rows[2:])
    assert window.form.total_odds() == 70


def test_parser_reads_team_count():
    parser = build_parser()
    assert parser.parse_args(["--teams", "6"]).teams == 6


def test_parser_rejects_invalid_team_count():
    parser = build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["--teams", "-1"])
    with pytest.raises(SystemExit):
        parser.parse_args(["--teams", "many"])


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0