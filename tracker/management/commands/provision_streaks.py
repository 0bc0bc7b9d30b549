from django.core.management.base import BaseCommand
from django.contrib.auth import get_user_model
from tracker.models import Streak

User = get_user_model()


class Command(BaseCommand):
    help = 'Create empty streak rows for users who don\'t have one yet (e.g. accounts created before streaks existed)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--email',
            type=str,
            help='Only provision the user with this email (optional)',
        )

    def handle(self, *args, **options):
        email = options.get('email')

        if email:
            # Provision a specific user - sign up stores the lowercased email as username
            email = email.strip().lower()
            try:
                user = User.objects.get(username=email)
            except User.DoesNotExist:
                try:
                    user = User.objects.get(email__iexact=email)
                except User.DoesNotExist:
                    self.stdout.write(
                        self.style.ERROR(f'User {email} not found.')
                    )
                    return
                except User.MultipleObjectsReturned:
                    self.stdout.write(
                        self.style.ERROR(f'More than one user has the email {email}. Fix them in the admin first.')
                    )
                    return

            _, created = Streak.objects.get_or_create(user=user)
            if created:
                self.stdout.write(
                    self.style.SUCCESS(f'Created streak for {user.email}')
                )
            else:
                self.stdout.write(
                    self.style.WARNING(f'User {user.email} already has a streak. No action taken.')
                )
            return

        # Everybody without a streak row
        users_without_streak = User.objects.filter(streak__isnull=True)

        if not users_without_streak.exists():
            self.stdout.write(
                self.style.WARNING('All users already have streaks. No action taken.')
            )
            return

        total_created = 0
        for user in users_without_streak:
            Streak.objects.create(user=user)
            total_created += 1
            self.stdout.write(f'Created streak for {user.email or user.username}')

        self.stdout.write(
            self.style.SUCCESS(f'Successfully created streaks for {total_created} users.')
        )
