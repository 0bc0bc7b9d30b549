"""
Numbers and encouragement for the dashboard sidebar.
"""
import logging
from collections import namedtuple

from django.db import DatabaseError
from django.db.models import Count, Q

from .exceptions import RepositoryError
from .models import DailyWin

logger = logging.getLogger(__name__)

# (upper bound, message) - first tier where streak < bound wins
MILESTONES = [
    (3, "Great start!"),
    (7, "Building momentum!"),
    (14, "On fire! 🔥"),
    (30, "Incredible consistency!"),
    (100, "You're unstoppable!"),
]


def milestone_message(days):
    """Encouragement text for the current streak length"""
    if days == 0:
        return "Start your journey"
    for bound, message in MILESTONES:
        if days < bound:
            return message
    return "Legendary streak! 🏆"


def record_message(state):
    """Subtitle under the best streak counter"""
    if state.longest_streak == state.current_streak and state.current_streak > 0:
        return "Matching your record!"
    return "Your personal best"


class WinStats(namedtuple('WinStats', ['total_wins', 'work_count', 'personal_count', 'growth_count'])):
    __slots__ = ()

    def __new__(cls, total_wins=0, work_count=0, personal_count=0, growth_count=0):
        return super().__new__(cls, total_wins, work_count, personal_count, growth_count)

    @property
    def top_category(self):
        """Category with the most filled-in wins. Ties go Work, then Personal, then Growth."""
        top = max(self.work_count, self.personal_count, self.growth_count)
        if top == 0:
            return "None yet"
        if self.work_count == top:
            return "Work"
        if self.personal_count == top:
            return "Personal"
        return "Growth"

    @property
    def status(self):
        return "Active" if self.total_wins > 0 else "Start"

    def as_dict(self):
        data = self._asdict()
        data['top_category'] = self.top_category
        data['status'] = self.status
        return data


def compute_stats(user_id):
    """
    Count entries and non-empty wins per category in one query.
    """
    try:
        totals = DailyWin.objects.filter(user_id=user_id).aggregate(
            total_wins=Count('id'),
            work_count=Count('id', filter=~Q(work_win='')),
            personal_count=Count('id', filter=~Q(personal_win='')),
            growth_count=Count('id', filter=~Q(growth_win='')),
        )
    except DatabaseError as exc:
        logger.error("Loading stats for user %s failed: %s", user_id, exc)
        raise RepositoryError("Could not load stats") from exc
    return WinStats(**totals)
