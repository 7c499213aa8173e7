"""Desktop window that runs the draft lottery with animated eliminations."""

from __future__ import annotations

import argparse
import math
import random
from collections.abc import Callable, Sequence

try:
    import tkinter as tk
    from tkinter import font as tkfont
    from tkinter import messagebox
except ImportError:  # pragma: no cover - Python built without Tk
    tk = None
    tkfont = None
    messagebox = None

from draftlottery.confetti import ConfettiParticle, spawn_confetti
from draftlottery.easing import (
    ease_in_cubic,
    ease_in_quad,
    ease_out_bounce,
    ease_out_cubic,
    interpolate,
)
from draftlottery.form import TeamForm
from draftlottery.lottery import (
    Team,
    animation_duration_ms,
    draw_winner,
    elimination_order,
    elimination_text,
    winner_banner_text,
    winner_message,
)

TITLE = "YOFHL Draft Lottery"
WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 768
DEFAULT_TEAM_COUNT = 10
MAX_TEAM_COUNT = 32

DRAWING_TEXT = "Drawing lottery..."
WINNER_TITLE = "WE HAVE A WINNER!"

FRAME_MS = 16
DRAW_DELAY_MS = 1000
ELIMINATION_START_DELAY_MS = 500
SLIDE_MS = 800
HOLD_MS = 3000
BETWEEN_TEAMS_MS = 800
DROP_MS = 1200
FADE_MS = 800

ELIMINATION_SIZE = (750, 100)
BANNER_SIZE = (700, 300)

Point = tuple[float, float]


class LotteryWindow:
    """The lottery screen: a team form, a draw button and the animated draw.

    ``root`` schedules callbacks through ``after(ms, func, *args)``. When it is
    a Tk widget the form and the animations are drawn in it; any other
    scheduler runs the same sequence without drawing anything.
    """

    def __init__(self, root, team_count: int) -> None:
        self.root = root
        self.form = TeamForm(team_count)
        self.rng: random.Random = random.SystemRandom()
        self.running = False
        self.winner: Team | None = None
        self.announcements: list[str] = []
        self.messages: list[str] = []
        self.confetti: list[ConfettiParticle] = []
        self.label_position: Point | None = None
        self.banner_opacity = 1.0
        self._confetti_active = False
        self._view = _TkView(self) if tk is not None and isinstance(root, tk.Misc) else None
        self._refresh()

    @property
    def lottery_enabled(self) -> bool:
        """Whether a draw may start: odds total 100 and nothing is running."""
        return self.form.is_ready() and not self.running

    @property
    def total_label(self) -> str:
        return self.form.total_label()

    def set_team_count(self, count: int) -> None:
        """Change the number of team rows, keeping what surviving rows hold."""
        self.form.resize(count)
        if self._view:
            self._view.sync_rows()
        self._refresh()

    def start_lottery(self) -> Team:
        """Draw the winner and start the elimination sequence; return the winner."""
        if self.running:
            raise RuntimeError("a lottery is already running")
        if not self.form.is_ready():
            raise ValueError("the odds must add up to 100%")
        teams = self.form.teams()
        winner_index = draw_winner(teams, self.rng)
        winner = teams[winner_index]
        self.winner = winner
        self.running = True
        self._refresh()

        self.announcements.append(DRAWING_TEXT)
        if self._view:
            self._view.show_drawing()
        self.root.after(DRAW_DELAY_MS, self._begin_elimination, teams, winner_index)
        self.root.after(animation_duration_ms(len(teams)), self._finish, winner)
        return winner

    def _refresh(self) -> None:
        if self._view:
            self._view.refresh()

    def _animate(
        self,
        duration: int,
        easing: Callable[[float], float],
        step: Callable[[float], None],
        done: Callable[[], None],
    ) -> None:
        frames = max(1, math.ceil(duration / FRAME_MS))

        def offset(i: int) -> int:
            return duration * i // frames

        def frame(i: int) -> None:
            step(easing(i / frames))
            if i >= frames:
                done()
                return
            self.root.after(offset(i + 1) - offset(i), frame, i + 1)

        frame(0)

    def _move(self, start: Point, end: Point, text: str, size, color: str, border: str):
        def step(progress: float) -> None:
            self.label_position = interpolate(start, end, progress)
            if self._view:
                self._view.draw_card(text, size, self.label_position, color, border, 1.0)

        return step

    def _begin_elimination(self, teams: Sequence[Team], winner_index: int) -> None:
        if self._view:
            self._view.hide_drawing()
        order = elimination_order(teams, winner_index, self.rng)
        self.root.after(
            ELIMINATION_START_DELAY_MS, self._eliminate_next, order, 0, teams[winner_index]
        )

    def _eliminate_next(self, order: list[Team], index: int, winner: Team) -> None:
        if index >= len(order):
            self._show_winner(winner)
            return
        text = elimination_text(order[index])
        self.announcements.append(text)

        width, height = ELIMINATION_SIZE
        centre_y = (WINDOW_HEIGHT - height) // 2
        outside = (-width, centre_y)
        centre = ((WINDOW_WIDTH - width) // 2, centre_y)
        exit_point = (WINDOW_WIDTH, (WINDOW_HEIGHT - width) // 2)

        def finished() -> None:
            self.label_position = None
            if self._view:
                self._view.clear_card()
            self.root.after(BETWEEN_TEAMS_MS, self._eliminate_next, order, index + 1, winner)

        def slide_out() -> None:
            self._animate(
                SLIDE_MS,
                ease_in_cubic,
                self._move(centre, exit_point, text, ELIMINATION_SIZE, "#ff0000", "#555555"),
                finished,
            )

        self._animate(
            SLIDE_MS,
            ease_out_cubic,
            self._move(outside, centre, text, ELIMINATION_SIZE, "#ff0000", "#555555"),
            lambda: self.root.after(HOLD_MS, slide_out),
        )

    def _show_winner(self, winner: Team) -> None:
        text = winner_banner_text(winner)
        self.announcements.append(text)
        self.banner_opacity = 1.0

        width, height = BANNER_SIZE
        x = (WINDOW_WIDTH - width) // 2
        top = (x, -height)
        centre = (x, (WINDOW_HEIGHT - height) // 2)

        def fade_step(progress: float) -> None:
            self.banner_opacity = interpolate(1.0, 0.0, progress)
            if self._view:
                self._view.draw_card(
                    text, BANNER_SIZE, centre, "gold", "gold", self.banner_opacity
                )

        def cleanup() -> None:
            self._confetti_active = False
            self.confetti = []
            self.label_position = None
            if self._view:
                self._view.clear_card()
                self._view.draw_confetti([])
                self._view.hide_overlay()

        def start_confetti() -> None:
            self.confetti = spawn_confetti(WINDOW_WIDTH, WINDOW_HEIGHT, self.rng)
            self._confetti_active = True
            self.root.after(FRAME_MS, self._tick_confetti)
            self.root.after(
                HOLD_MS, lambda: self._animate(FADE_MS, ease_in_quad, fade_step, cleanup)
            )

        self._animate(
            DROP_MS,
            ease_out_bounce,
            self._move(top, centre, text, BANNER_SIZE, "gold", "gold"),
            start_confetti,
        )

    def _tick_confetti(self) -> None:
        if not self._confetti_active:
            return
        for particle in self.confetti:
            particle.update()
        if self._view:
            self._view.draw_confetti(self.confetti)
        self.root.after(FRAME_MS, self._tick_confetti)

    def _finish(self, winner: Team) -> None:
        message = winner_message(winner)
        self.messages.append(message)
        if self._view:
            self._view.show_message(WINNER_TITLE, message)
        self.running = False
        self._refresh()


class _TkView:
    """Tk widgets for a LotteryWindow."""

    _STIPPLES = ((0.875, ""), (0.625, "gray75"), (0.375, "gray50"), (0.1875, "gray25"))

    def __init__(self, window: LotteryWindow) -> None:
        self.window = window
        root = window.root
        root.title(TITLE)
        root.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        root.resizable(False, False)

        body = tk.Frame(root)
        body.pack(fill="both", expand=True, padx=20, pady=20)

        header = tk.Frame(body)
        header.pack(fill="x")
        tk.Label(header, text="Number of teams").pack(side="left")
        self.count_var = tk.StringVar(value=str(len(window.form.rows)))
        spin = tk.Spinbox(
            header,
            from_=1,
            to=MAX_TEAM_COUNT,
            width=5,
            textvariable=self.count_var,
            command=self._on_count,
        )
        spin.pack(side="left", padx=8)
        spin.bind("<Return>", lambda _event: self._on_count())
        spin.bind("<FocusOut>", lambda _event: self._on_count())

        self.rows_frame = tk.Frame(body)
        self.rows_frame.pack(fill="both", expand=True, pady=10)
        self.rows: list[tuple[tk.Frame, tk.StringVar, tk.StringVar]] = []

        self.total = tk.Label(body, font=("TkDefaultFont", 12, "bold"))
        self.total.pack()
        self.button = tk.Button(body, text="Do Lottery", command=self._on_draw)
        self.button.pack(pady=10)

        self.canvas = tk.Canvas(
            root,
            width=WINDOW_WIDTH,
            height=WINDOW_HEIGHT,
            background="#1e1e1e",
            highlightthickness=0,
        )
        self.sync_rows()

    def _on_count(self) -> None:
        try:
            count = int(self.count_var.get())
        except ValueError:
            return
        count = min(MAX_TEAM_COUNT, max(1, count))
        if count != len(self.window.form.rows):
            self.window.set_team_count(count)

    def _on_draw(self) -> None:
        try:
            self.window.start_lottery()
        except (ValueError, RuntimeError):
            self.refresh()

    def sync_rows(self) -> None:
        form = self.window.form
        while len(self.rows) > len(form.rows):
            frame, _, _ = self.rows.pop()
            frame.destroy()
        while len(self.rows) < len(form.rows):
            self._add_row(len(self.rows))

    def _add_row(self, index: int) -> None:
        row = self.window.form.rows[index]
        frame = tk.Frame(self.rows_frame)
        frame.pack(fill="x", pady=1)
        name_var = tk.StringVar(value=row.name)
        odds_var = tk.StringVar(value=row.odds_text)

        def on_name(*_args) -> None:
            self.window.form.set_name(index, name_var.get())

        def on_odds(*_args) -> None:
            self.window.form.set_odds(index, odds_var.get())
            self.window._refresh()

        name_var.trace_add("write", on_name)
        odds_var.trace_add("write", on_odds)
        tk.Label(frame, text=f"Team {index + 1}", width=8, anchor="e").pack(side="left")
        tk.Entry(frame, textvariable=name_var, justify="center").pack(
            side="left", fill="x", expand=True, padx=4
        )
        tk.Entry(
            frame, textvariable=odds_var, width=6, justify="center",
            font=("TkDefaultFont", 12, "bold"),
        ).pack(side="left")
        tk.Label(frame, text="%", font=("TkDefaultFont", 12, "bold")).pack(side="left")
        self.rows.append((frame, name_var, odds_var))

    def refresh(self) -> None:
        window = self.window
        self.total.configure(
            text=window.total_label,
            foreground="green" if window.form.is_ready() else "red",
        )
        self.button.configure(state="normal" if window.lottery_enabled else "disabled")

    def _show_overlay(self) -> None:
        self.canvas.place(x=0, y=0)
        self.canvas.lift()

    def hide_overlay(self) -> None:
        self.canvas.place_forget()

    def show_drawing(self) -> None:
        self._show_overlay()
        self.canvas.create_text(
            WINDOW_WIDTH / 2, 70, text=DRAWING_TEXT, fill="white", tags="drawing"
        )

    def hide_drawing(self) -> None:
        self.canvas.delete("drawing")

    def draw_card(self, text, size, position, color, border, opacity) -> None:
        self._show_overlay()
        self.canvas.delete("card")
        if opacity <= 0:
            return
        stipple = next(
            (pattern for limit, pattern in self._STIPPLES if opacity >= limit), "gray12"
        )
        x, y = position
        width, height = size
        self.canvas.create_rectangle(
            x, y, x + width, y + height, fill="#262626", outline=border,
            width=2, stipple=stipple, tags="card",
        )
        self.canvas.create_text(
            x + width / 2, y + height / 2, text=text, fill=color, justify="center",
            width=width - 30, font=("TkDefaultFont", 18, "bold"), tags="card",
        )

    def clear_card(self) -> None:
        self.canvas.delete("card")

    def draw_confetti(self, particles: Sequence[ConfettiParticle]) -> None:
        self.canvas.delete("confetti")
        for particle in particles:
            points = [coordinate for corner in particle.corners() for coordinate in corner]
            self.canvas.create_polygon(
                points, fill=particle.color, outline="", tags="confetti"
            )

    def show_message(self, title: str, text: str) -> None:
        messagebox.showinfo(title, text, parent=self.window.root)


def _team_count(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a whole number: {text!r}") from None
    if not 1 <= value <= MAX_TEAM_COUNT:
        raise argparse.ArgumentTypeError(f"team count must be from 1 to {MAX_TEAM_COUNT}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="draftlottery", description=TITLE)
    parser.add_argument(
        "--teams",
        type=_team_count,
        default=DEFAULT_TEAM_COUNT,
        help="number of team rows to start with",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Open the lottery window and run until it is closed."""
    args = build_parser().parse_args(argv)
    if tk is None:
        raise RuntimeError("the lottery window needs Tk")
    root = tk.Tk()
    tkfont.nametofont("TkDefaultFont").configure(size=12)
    LotteryWindow(root, args.teams)
    root.mainloop()
    return 0