# apps/accounts/forms.py

from django import forms
from django.contrib.auth import authenticate
from django.core.exceptions import ValidationError

from algorithms import suspension as rules
from .models import User


class AdminLoginForm(forms.Form):
    """Console sign-in by email and password"""

    email = forms.EmailField(
        widget=forms.EmailInput(attrs={
            'class': 'form-control',
            'placeholder': 'Admin email',
            'autofocus': True
        })
    )

    password = forms.CharField(
        widget=forms.PasswordInput(attrs={
            'class': 'form-control',
            'placeholder': 'Password'
        })
    )

    error_message = 'Invalid credentials or insufficient permissions.'

    def __init__(self, *args, request=None, **kwargs):
        self.request = request
        super().__init__(*args, **kwargs)

    def clean(self):
        cleaned_data = super().clean()
        email = cleaned_data.get('email')
        password = cleaned_data.get('password')

        if not email or not password:
            return cleaned_data

        account = User.objects.filter(email__iexact=email).first()
        user = None
        if account is not None:
            user = authenticate(self.request, username=account.username, password=password)

        # Same message whether the account is missing, the password is wrong or the role is absent
        if user is None or not user.is_active or not user.is_admin_user:
            raise ValidationError(self.error_message)

        cleaned_data['user'] = user
        return cleaned_data


class SuspendUserForm(forms.Form):
    duration = forms.ChoiceField(
        choices=[(key, rules.DURATION_LABELS[key]) for key in rules.USER_DURATIONS]
    )


class ArtistLevelForm(forms.Form):
    level = forms.ChoiceField(choices=User.ARTIST_LEVELS)
