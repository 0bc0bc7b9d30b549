import logging
from collections import namedtuple

from django.db import transaction
from django.utils import timezone

from . import repository
from .streaks import StreakState, next_streak

logger = logging.getLogger(__name__)

SaveResult = namedtuple('SaveResult', ['entry', 'created', 'streak'])


def save_todays_wins(session, wins, today=None):
    """
    Save today's wins and move the streak along.

    `wins` is a dict with work_win / personal_win / growth_win (usually the
    form's cleaned_data). The entry and the streak are written in the same
    transaction, so if the streak update fails the entry isn't kept either.
    RepositoryError is left for the caller to report.
    """
    if today is None:
        today = timezone.localdate()

    with transaction.atomic():
        entry, created = repository.upsert_entry(
            session.user_id,
            today,
            work_win=wins.get('work_win', ''),
            personal_win=wins.get('personal_win', ''),
            growth_win=wins.get('growth_win', ''),
        )

        previous = repository.get_streak(session.user_id, for_update=True)
        if previous is None:
            # Shouldn't happen for users created through sign up
            logger.warning("User %s had no streak row, starting a new one", session.user_id)
            previous = StreakState()

        streak = next_streak(previous, today)
        if streak != previous:
            repository.update_streak(session.user_id, streak)

    return SaveResult(entry=entry, created=created, streak=streak)
