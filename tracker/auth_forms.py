from django import forms
from .validators import clean_email_address, validate_password_length


class SignInForm(forms.Form):
    """
    Email + password. Only checks the inputs look right -
    whether they're correct is up to authenticate() in the view.
    """

    # Same limit as User.username, which is where the email ends up
    email = forms.CharField(max_length=150, widget=forms.EmailInput(attrs={
        'class': 'form-control',
        'placeholder': 'you@example.com',
    }))
    password = forms.CharField(strip=False, widget=forms.PasswordInput(attrs={
        'class': 'form-control',
        'placeholder': '••••••••',
    }))

    def clean_email(self):
        return clean_email_address(self.cleaned_data.get('email'))

    def clean_password(self):
        password = self.cleaned_data.get('password')
        validate_password_length(password)
        return password


class SignUpForm(SignInForm):
    """Same as signing in plus an optional name"""

    full_name = forms.CharField(required=False, max_length=150, widget=forms.TextInput(attrs={
        'class': 'form-control',
        'placeholder': 'Your name',
    }))

    field_order = ['full_name', 'email', 'password']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['password'].help_text = 'Minimum 6 characters'

    def clean_full_name(self):
        return (self.cleaned_data.get('full_name') or '').strip()
