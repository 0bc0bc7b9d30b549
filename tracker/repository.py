"""
Data access for daily wins and streaks.

Views and services go through these functions instead of touching the
ORM directly. Database failures come back as RepositoryError so callers
only have one thing to catch.
"""
import logging

from django.db import DatabaseError

from .exceptions import RepositoryError
from .models import DailyWin, Streak
from .streaks import StreakState

logger = logging.getLogger(__name__)

RECENT_LIMIT = 7


def get_entry(user_id, day):
    """Wins for one day, or None if nothing was saved yet"""
    try:
        return DailyWin.objects.filter(user_id=user_id, date=day).first()
    except DatabaseError as exc:
        logger.error("Loading wins for user %s on %s failed: %s", user_id, day, exc)
        raise RepositoryError("Could not load wins") from exc


def upsert_entry(user_id, day, work_win='', personal_win='', growth_win=''):
    """
    Save the wins for (user, day). If there is already an entry for that
    day it gets replaced - never a second row.

    Returns (entry, created).
    """
    try:
        entry, created = DailyWin.objects.update_or_create(
            user_id=user_id,
            date=day,
            defaults={
                'work_win': work_win or '',
                'personal_win': personal_win or '',
                'growth_win': growth_win or '',
            },
        )
    except DatabaseError as exc:
        logger.error("Saving wins for user %s on %s failed: %s", user_id, day, exc)
        raise RepositoryError("Could not save wins") from exc

    logger.info("%s wins for user %s on %s", "Created" if created else "Updated", user_id, day)
    return entry, created


def list_recent_entries(user_id, limit=RECENT_LIMIT):
    """Most recent entries first"""
    try:
        return list(DailyWin.objects.filter(user_id=user_id).order_by('-date')[:limit])
    except DatabaseError as exc:
        logger.error("Loading recent wins for user %s failed: %s", user_id, exc)
        raise RepositoryError("Could not load recent wins") from exc


def get_streak(user_id, for_update=False):
    """
    Current StreakState for the user, or None if they don't have a streak row.
    Pass for_update=True inside a transaction to lock the row while it's recalculated.
    """
    try:
        queryset = Streak.objects.filter(user_id=user_id)
        if for_update:
            queryset = queryset.select_for_update()
        streak = queryset.first()
    except DatabaseError as exc:
        logger.error("Loading streak for user %s failed: %s", user_id, exc)
        raise RepositoryError("Could not load streak") from exc

    if streak is None:
        return None
    return StreakState.from_model(streak)


def update_streak(user_id, next_state):
    """Store the new streak state, creating the row if it's missing"""
    try:
        Streak.objects.update_or_create(
            user_id=user_id,
            defaults={
                'current_streak': next_state.current_streak,
                'longest_streak': next_state.longest_streak,
                'last_entry_date': next_state.last_entry_date,
            },
        )
    except DatabaseError as exc:
        logger.error("Updating streak for user %s failed: %s", user_id, exc)
        raise RepositoryError("Could not update streak") from exc

    return next_state
