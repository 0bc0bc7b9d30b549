from datetime import date, timedelta
from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.db import DatabaseError
from django.test import TestCase

from tracker import repository
from tracker.exceptions import RepositoryError
from tracker.models import DailyWin, Streak
from tracker.streaks import StreakState

User = get_user_model()

DAY = date(2026, 4, 20)


class EntryRepositoryTests(TestCase):

    def setUp(self):
        self.user = User.objects.create_user(username='ana@example.com', email='ana@example.com', password='secret1')

    def test_get_entry_missing(self):
        self.assertIsNone(repository.get_entry(self.user.pk, DAY))

    def test_upsert_creates_then_replaces(self):
        entry, created = repository.upsert_entry(self.user.pk, DAY, work_win='Fixed the build')
        self.assertTrue(created)

        again, created = repository.upsert_entry(self.user.pk, DAY, personal_win='Called mum')
        self.assertFalse(created)
        self.assertEqual(again.pk, entry.pk)

        self.assertEqual(DailyWin.objects.filter(user=self.user, date=DAY).count(), 1)
        stored = repository.get_entry(self.user.pk, DAY)
        self.assertEqual(stored.work_win, '')
        self.assertEqual(stored.personal_win, 'Called mum')

    def test_upsert_treats_none_as_empty(self):
        entry, _ = repository.upsert_entry(self.user.pk, DAY, work_win='Demo went well', growth_win=None)
        self.assertEqual(entry.growth_win, '')

    def test_same_day_for_different_users(self):
        other = User.objects.create_user(username='ben@example.com', email='ben@example.com', password='secret1')
        repository.upsert_entry(self.user.pk, DAY, work_win='Mine')
        repository.upsert_entry(other.pk, DAY, work_win='Theirs')
        self.assertEqual(DailyWin.objects.filter(date=DAY).count(), 2)

    def test_list_recent_entries_newest_first_and_limited(self):
        for offset in range(10):
            repository.upsert_entry(self.user.pk, DAY + timedelta(days=offset), growth_win=f'Day {offset}')

        recent = repository.list_recent_entries(self.user.pk)
        self.assertEqual(len(recent), 7)
        self.assertEqual(recent[0].date, DAY + timedelta(days=9))
        self.assertEqual([e.date for e in recent], sorted((e.date for e in recent), reverse=True))

    def test_upsert_failure_raises_repository_error(self):
        with patch('tracker.repository.DailyWin.objects.update_or_create', side_effect=DatabaseError('locked')):
            with self.assertLogs('tracker.repository', level='ERROR'):
                with self.assertRaises(RepositoryError) as ctx:
                    repository.upsert_entry(self.user.pk, DAY, work_win='x')
        self.assertEqual(ctx.exception.reason, "Could not save wins")


class StreakRepositoryTests(TestCase):

    def setUp(self):
        self.user = User.objects.create_user(username='cy@example.com', email='cy@example.com', password='secret1')

    def test_new_users_get_an_empty_streak(self):
        self.assertEqual(repository.get_streak(self.user.pk), StreakState())

    def test_get_streak_missing_row(self):
        Streak.objects.filter(user=self.user).delete()
        self.assertIsNone(repository.get_streak(self.user.pk))

    def test_update_streak(self):
        state = StreakState(3, 5, DAY)
        repository.update_streak(self.user.pk, state)
        self.assertEqual(repository.get_streak(self.user.pk), state)

    def test_update_streak_recreates_missing_row(self):
        Streak.objects.filter(user=self.user).delete()
        repository.update_streak(self.user.pk, StreakState(1, 1, DAY))
        self.assertEqual(Streak.objects.get(user=self.user).current_streak, 1)
