from datetime import date, timedelta

from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.db import DatabaseError
from django.test import SimpleTestCase, TestCase

from tracker.exceptions import RepositoryError
from tracker.models import DailyWin
from tracker.stats import WinStats, compute_stats, milestone_message, record_message
from tracker.streaks import StreakState

User = get_user_model()


class MilestoneMessageTests(SimpleTestCase):

    def test_boundaries(self):
        expected = {
            0: "Start your journey",
            1: "Great start!",
            2: "Great start!",
            3: "Building momentum!",
            6: "Building momentum!",
            7: "On fire! 🔥",
            13: "On fire! 🔥",
            14: "Incredible consistency!",
            29: "Incredible consistency!",
            30: "You're unstoppable!",
            99: "You're unstoppable!",
            100: "Legendary streak! 🏆",
            365: "Legendary streak! 🏆",
        }
        for days, message in expected.items():
            with self.subTest(days=days):
                self.assertEqual(milestone_message(days), message)

    def test_record_message(self):
        self.assertEqual(record_message(StreakState(4, 4)), "Matching your record!")
        self.assertEqual(record_message(StreakState(2, 4)), "Your personal best")
        self.assertEqual(record_message(StreakState(0, 0)), "Your personal best")


class WinStatsTests(SimpleTestCase):

    def test_empty(self):
        stats = WinStats()
        self.assertEqual(stats.top_category, "None yet")
        self.assertEqual(stats.status, "Start")

    def test_top_category(self):
        self.assertEqual(WinStats(5, 1, 3, 2).top_category, "Personal")
        self.assertEqual(WinStats(5, 1, 1, 4).top_category, "Growth")

    def test_ties_prefer_work_then_personal(self):
        self.assertEqual(WinStats(3, 2, 2, 2).top_category, "Work")
        self.assertEqual(WinStats(3, 0, 2, 2).top_category, "Personal")

    def test_as_dict(self):
        data = WinStats(2, 2, 1, 0).as_dict()
        self.assertEqual(data['total_wins'], 2)
        self.assertEqual(data['top_category'], "Work")
        self.assertEqual(data['status'], "Active")


class ComputeStatsTests(TestCase):

    def setUp(self):
        self.user = User.objects.create_user(username='sam@example.com', email='sam@example.com', password='secret1')
        other = User.objects.create_user(username='kim@example.com', email='kim@example.com', password='secret1')
        day = date(2026, 5, 1)
        DailyWin.objects.create(user=self.user, date=day, work_win='Shipped it', growth_win='Read a chapter')
        DailyWin.objects.create(user=self.user, date=day + timedelta(days=1), growth_win='Learned SQL window functions')
        DailyWin.objects.create(user=self.user, date=day + timedelta(days=2), personal_win='Long walk')
        DailyWin.objects.create(user=other, date=day, work_win='Not mine')

    def test_counts_only_own_non_empty_wins(self):
        stats = compute_stats(self.user.pk)
        self.assertEqual(stats, WinStats(total_wins=3, work_count=1, personal_count=1, growth_count=2))
        self.assertEqual(stats.top_category, "Growth")
        self.assertEqual(stats.status, "Active")

    def test_database_error_becomes_repository_error(self):
        with patch('tracker.stats.DailyWin.objects.filter', side_effect=DatabaseError('gone')):
            with self.assertRaises(RepositoryError):
                compute_stats(self.user.pk)
