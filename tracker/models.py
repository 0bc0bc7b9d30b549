from django.db import models
from django.conf import settings
from django.db.models import UniqueConstraint, CheckConstraint, F, Q
from django.db.models.signals import post_save
from django.dispatch import receiver

# 280 characters, same as a tweet - short on purpose
MAX_WIN_LENGTH = 280


class DailyWin(models.Model):
    """
    One user's wins for a single calendar day.
    Up to three short wins - work, personal and growth. All optional,
    but the form makes sure at least one is filled in.
    """

    # User relationship
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='daily_wins')

    # Calendar day, no time - enforces one entry per day
    date = models.DateField(help_text="The day these wins are for")

    # The three wins
    work_win = models.CharField(max_length=MAX_WIN_LENGTH, blank=True, help_text="What did you accomplish at work today?")
    personal_win = models.CharField(max_length=MAX_WIN_LENGTH, blank=True, help_text="What made you smile today?")
    growth_win = models.CharField(max_length=MAX_WIN_LENGTH, blank=True, help_text="What did you learn today?")

    # Auto timestamps
    date_created = models.DateTimeField(auto_now_add=True)
    date_modified = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'daily_wins'
        verbose_name = "Daily win"
        verbose_name_plural = "Daily wins"
        # Newest days first
        ordering = ['-date']
        constraints = [
            # One entry per user per day - saving again replaces it
            UniqueConstraint(
                fields=['user', 'date'],
                name='unique_win_per_user_per_day',
                violation_error_message='You can only have one entry per day.'
            ),
        ]
        indexes = [
            models.Index(fields=['user', '-date'], name='daily_wins_user_recent_idx'),  # Recent wins list
        ]

    def __str__(self):
        return f"{self.user} - {self.date}"

    @property
    def wins(self):
        """(category, text) pairs for the wins that were actually filled in"""
        pairs = [
            ('work', self.work_win),
            ('personal', self.personal_win),
            ('growth', self.growth_win),
        ]
        return [(category, text) for category, text in pairs if text]

    @property
    def has_content(self):
        return bool(self.work_win or self.personal_win or self.growth_win)


class Streak(models.Model):
    """
    Running streak for a user. One row per user, created when the user
    signs up and only ever changed by saving a day's wins.
    """

    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='streak')
    current_streak = models.PositiveIntegerField(default=0)
    longest_streak = models.PositiveIntegerField(default=0)
    last_entry_date = models.DateField(null=True, blank=True)

    date_modified = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'streaks'
        constraints = [
            CheckConstraint(
                name='longest_streak_not_below_current',
                condition=Q(longest_streak__gte=F('current_streak')),
                violation_error_message='Longest streak can never be shorter than the current one.',
            ),
        ]

    def __str__(self):
        return f"{self.user} - {self.current_streak} days (best {self.longest_streak})"


@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def provision_streak(sender, instance, created, **kwargs):
    """Every new user starts with an empty streak row."""
    if created:
        Streak.objects.get_or_create(user=instance)
