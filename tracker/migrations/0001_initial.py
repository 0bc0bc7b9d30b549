import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='DailyWin',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('date', models.DateField(help_text='The day these wins are for')),
                ('work_win', models.CharField(blank=True, help_text='What did you accomplish at work today?', max_length=280)),
                ('personal_win', models.CharField(blank=True, help_text='What made you smile today?', max_length=280)),
                ('growth_win', models.CharField(blank=True, help_text='What did you learn today?', max_length=280)),
                ('date_created', models.DateTimeField(auto_now_add=True)),
                ('date_modified', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='daily_wins', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Daily win',
                'verbose_name_plural': 'Daily wins',
                'db_table': 'daily_wins',
                'ordering': ['-date'],
                'indexes': [models.Index(fields=['user', '-date'], name='daily_wins_user_recent_idx')],
                'constraints': [models.UniqueConstraint(fields=('user', 'date'), name='unique_win_per_user_per_day', violation_error_message='You can only have one entry per day.')],
            },
        ),
        migrations.CreateModel(
            name='Streak',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('current_streak', models.PositiveIntegerField(default=0)),
                ('longest_streak', models.PositiveIntegerField(default=0)),
                ('last_entry_date', models.DateField(blank=True, null=True)),
                ('date_modified', models.DateTimeField(auto_now=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='streak', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'streaks',
                'constraints': [models.CheckConstraint(condition=models.Q(('longest_streak__gte', models.F('current_streak'))), name='longest_streak_not_below_current', violation_error_message='Longest streak can never be shorter than the current one.')],
            },
        ),
    ]
