"""
Streak calculation.

A streak is the number of consecutive calendar days with saved wins.
Everything here is pure - no database access - so the rules are easy
to test on their own.
"""
import logging
from collections import namedtuple

logger = logging.getLogger(__name__)


class StreakState(namedtuple('StreakState', ['current_streak', 'longest_streak', 'last_entry_date'])):
    """Snapshot of a user's streak. Brand new users start at zero with no last date."""
    __slots__ = ()

    def __new__(cls, current_streak=0, longest_streak=0, last_entry_date=None):
        return super().__new__(cls, current_streak, longest_streak, last_entry_date)

    @classmethod
    def from_model(cls, streak):
        return cls(streak.current_streak, streak.longest_streak, streak.last_entry_date)


def next_streak(previous, today):
    """
    Work out the streak after saving wins for `today`.

    - Same day again: nothing changes (editing today's wins doesn't count twice)
    - No previous entry: fresh start at 1
    - Yesterday was the last entry: keep going, +1
    - Gap of more than a day: streak broken, back to 1
    - `today` before the last entry (backdated save or clock skew): ignored,
      the previous state is kept as is
    """
    last = previous.last_entry_date

    if last == today:
        return previous

    if last is None:
        current = 1
    else:
        days_diff = (today - last).days
        if days_diff == 1:
            current = previous.current_streak + 1
        elif days_diff > 1:
            current = 1
        else:
            logger.warning(
                "Ignoring streak update for %s, last entry is later (%s)", today, last
            )
            return previous

    return StreakState(
        current_streak=current,
        longest_streak=max(current, previous.longest_streak),
        last_entry_date=today,
    )
