"""
Forms for the core app.
Handles registration and the account profile/mindset/startup updates.
"""

from django import forms
from django.contrib.auth.forms import UserCreationForm

from .models import StartupStage, User


class StringListField(forms.Field):
    """
    Accepts a JSON list of strings or a comma-separated string.

    Items are stripped; blanks and duplicates are dropped, order is kept.
    """

    def __init__(self, *, max_items=50, max_length=100, **kwargs):
        self.max_items = max_items
        self.max_length = max_length
        kwargs.setdefault('required', False)
        super().__init__(**kwargs)

    def to_python(self, value):
        if value in (None, ''):
            return []
        if isinstance(value, str):
            value = value.split(',')
        if not isinstance(value, (list, tuple)):
            raise forms.ValidationError('Expected a list of strings.', code='invalid')

        items = []
        for item in value:
            if not isinstance(item, str):
                raise forms.ValidationError('Every item must be a string.', code='invalid')
            item = item.strip()
            if item and item not in items:
                items.append(item)
        return items

    def validate(self, value):
        super().validate(value)
        if len(value) > self.max_items:
            raise forms.ValidationError(
                f'At most {self.max_items} items allowed.', code='max_items'
            )
        for item in value:
            if len(item) > self.max_length:
                raise forms.ValidationError(
                    f'Items must be at most {self.max_length} characters.', code='max_length'
                )


class SignupForm(UserCreationForm):
    """
    Registration form for founders and investors.
    Extends Django's UserCreationForm with the display name and role.
    """
    name = forms.CharField(max_length=255, required=True)
    email = forms.EmailField(required=True)
    role = forms.ChoiceField(
        choices=[
            (User.Role.FOUNDER, User.Role.FOUNDER.label),
            (User.Role.INVESTOR, User.Role.INVESTOR.label),
        ],
        initial=User.Role.FOUNDER,
    )

    class Meta:
        model = User
        fields = ('username', 'email', 'name', 'role', 'password1', 'password2')

    def clean_email(self):
        email = self.cleaned_data.get('email', '').lower()
        if User.objects.filter(email__iexact=email).exists():
            raise forms.ValidationError('An account with this email already exists.')
        return email


class ProfileForm(forms.Form):
    """Editable profile fields; only submitted keys are applied."""

    name = forms.CharField(max_length=255, required=False)
    bio = forms.CharField(max_length=500, required=False)
    location = forms.CharField(max_length=255, required=False)
    avatar_url = forms.URLField(required=False)
    skills = StringListField()
    experience = forms.ChoiceField(choices=User.Experience.choices, required=False)


class MindsetForm(forms.Form):
    """All three mindset attributes are required together."""

    risk_tolerance = forms.ChoiceField(choices=User.RiskTolerance.choices)
    work_style = forms.ChoiceField(choices=User.WorkStyle.choices)
    communication_style = forms.ChoiceField(choices=User.CommunicationStyle.choices)


class StartupForm(forms.Form):
    name = forms.CharField(max_length=255)
    stage = forms.ChoiceField(choices=StartupStage.choices)
    description = forms.CharField(required=False)
    industry = forms.CharField(max_length=100, required=False)
    website = forms.URLField(required=False)


class StageForm(forms.Form):
    stage = forms.ChoiceField(choices=StartupStage.choices)
    milestone = forms.CharField(max_length=180, required=False)


class InvestorInterestForm(forms.Form):
    message = forms.CharField(max_length=5000)
    investment_max = forms.IntegerField(min_value=0, required=False)
