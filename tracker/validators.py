from django.core.exceptions import ValidationError
from django.core.validators import validate_email

MIN_PASSWORD_LENGTH = 6


class MinimumPasswordLengthValidator:
    """
    Keeping passwords simple: 6 characters minimum, nothing else.
    Registered in AUTH_PASSWORD_VALIDATORS so sign up uses the same rule.
    """

    def __init__(self, min_length=MIN_PASSWORD_LENGTH):
        self.min_length = min_length

    def validate(self, password, user=None):
        if len(password or '') < self.min_length:
            raise ValidationError(
                f"Password must be at least {self.min_length} characters",
                code='password_too_short',
            )

    def get_help_text(self):
        """What shows up on the form"""
        return f"Minimum {self.min_length} characters"


def validate_password_length(password):
    MinimumPasswordLengthValidator().validate(password)


def clean_email_address(email):
    """
    Trim and lowercase the email, then make sure it looks like one.
    Returns the cleaned address.
    """
    email = (email or '').strip().lower()
    try:
        validate_email(email)
    except ValidationError:
        raise ValidationError("Please enter a valid email", code='invalid_email')
    return email
