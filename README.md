# draftlottery

This is a desktop draft lottery. You enter each team and its odds as a
whole-number percentage. When the odds add up to exactly 100%, you can draw the
lottery. The losing teams are then eliminated one at a time in random order.
The team that wins the first overall pick is shown last, with confetti.

## Installation

```
pip install .
```

The window uses `tkinter` from the standard library. Some Linux distributions
ship it as a separate system package, for example `python3-tk`.

## Running

```
draftlottery
draftlottery --teams 12
```

This opens the lottery window. `--teams` sets how many team rows the window
starts with. The value must be from 1 to 32, and the default is 10. You can
also change the number of rows in the window with the spin box. Rows that stay
keep what was typed in them.

- Give each row a name and its odds.
- A row with no name takes part as `Team N`, where N is its position.
- The label below the rows shows `Total Odds: N%`. It is green at 100% and red
  at any other value.
- Entries that are not whole numbers do not count toward the total.
- The **Do Lottery** button works only when the total is exactly 100%. It stays
  disabled while a draw is running.

When the draw finishes, a message box titled "WE HAVE A WINNER!" names the team
that drafts first overall and shows its odds.

## How the draw works

- Only teams with odds greater than zero take part.
- A random integer in `[0, total)` is drawn. The winner is the first team whose
  running total of odds is greater than that number. Each team's chance of
  winning is therefore its share of the total.
- The other teams are shuffled and eliminated one at a time. After the last of
  them, the winner is announced.
- When no generator is passed in, the system's random source is used
  (`random.SystemRandom`).

## Using the pieces directly

The drawing logic does not depend on the window:

```python
import random
from draftlottery.lottery import Team, draw_winner, elimination_order

teams = [Team("Sharks", 50), Team("Wolves", 30), Team("Owls", 20)]
rng = random.Random()
winner = draw_winner(teams, rng)
for team in elimination_order(teams, winner, rng):
    print("eliminated:", team.name)
print("first overall:", teams[winner].name)
```

Other parts of `draftlottery.lottery`:

- `parse_odds` reads an odds entry.
- `collect_teams` builds teams from `(name, odds text)` pairs.
- `animation_duration_ms` gives the time from the draw to the final message.
- `elimination_text`, `winner_banner_text` and `winner_message` give the texts
  that are shown.

`draftlottery.form.TeamForm` holds the team rows and their running total, with
no display attached.

`draftlottery.app.LotteryWindow` runs the whole sequence. You pass it any
object that has an `after(ms, func, *args)` method. If that object is a Tk
widget, the form and the animations are drawn in it. Otherwise the sequence
runs without drawing anything, and the texts it would show are collected in
`announcements` and `messages`.

`draftlottery.confetti` and `draftlottery.easing` provide the particle motion
and the easing curves used by the animations.

## Limitations

Team lists and results are not saved. Each run of the window starts with empty
rows.

## Tests

```
pip install .[test]
pytest
```