from django import forms
from django.core.exceptions import ValidationError
from .models import DailyWin, MAX_WIN_LENGTH


class WinsEntryForm(forms.ModelForm):
    """
    Today's three wins. Every field is optional but saving a completely
    empty day isn't allowed.
    """

    class Meta:
        model = DailyWin
        fields = ['work_win', 'personal_win', 'growth_win']

        widgets = {
            'work_win': forms.Textarea(attrs={
                'class': 'form-control',
                'placeholder': 'What did you accomplish at work today?',
                'maxlength': MAX_WIN_LENGTH,
                'rows': 3,
            }),
            'personal_win': forms.Textarea(attrs={
                'class': 'form-control',
                'placeholder': 'What made you smile today?',
                'maxlength': MAX_WIN_LENGTH,
                'rows': 3,
            }),
            'growth_win': forms.Textarea(attrs={
                'class': 'form-control',
                'placeholder': 'What did you learn today?',
                'maxlength': MAX_WIN_LENGTH,
                'rows': 3,
            }),
        }
        labels = {
            'work_win': 'Work Win',
            'personal_win': 'Personal Win',
            'growth_win': 'Growth Win',
        }
        help_texts = {
            'work_win': '',
            'personal_win': '',
            'growth_win': '',
        }
        error_messages = {
            field: {'max_length': f'Keep it short - {MAX_WIN_LENGTH} characters max.'}
            for field in ['work_win', 'personal_win', 'growth_win']
        }

    def clean(self):
        """At least one win has to be filled in"""
        cleaned_data = super().clean()

        wins = [cleaned_data.get(field) for field in self.Meta.fields]
        if not any(win and win.strip() for win in wins):
            raise ValidationError("Please enter at least one win")

        return cleaned_data
