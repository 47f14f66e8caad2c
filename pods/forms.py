"""
Forms for pods: creation, founder updates, applications and goal updates.
"""

from django import forms

from core.forms import StringListField
from core.models import Category

from .models import Pod, PodGoal, PodMember

COMMUNICATION_PLATFORMS = ('slack', 'discord', 'telegram', 'whatsapp', 'other')


def clean_goal_list(value):
    """Validate a list of {title, description?, deadline?} goal dicts."""
    if value in (None, ''):
        return []
    if not isinstance(value, list):
        raise forms.ValidationError('goals must be a list.')

    goals = []
    for item in value:
        form = GoalForm(item if isinstance(item, dict) else {})
        if not form.is_valid():
            raise forms.ValidationError(f'Invalid goal: {form.errors.as_text()}')
        goals.append(form.cleaned_data)
    return goals


class GoalForm(forms.Form):
    title = forms.CharField(max_length=200)
    description = forms.CharField(required=False)
    deadline = forms.DateTimeField(required=False)


class PodForm(forms.Form):
    title = forms.CharField(max_length=100, error_messages={'required': 'Title is required'})
    description = forms.CharField(max_length=1000, error_messages={'required': 'Description is required'})
    category = forms.ChoiceField(choices=Category.choices)
    compensation_model = forms.ChoiceField(choices=Pod.CompensationModel.choices)
    start_date = forms.DateTimeField(error_messages={'required': 'Start date is required'})
    end_date = forms.DateTimeField(error_messages={'required': 'End date is required'})
    sprint_days = forms.IntegerField(min_value=30, max_value=90, required=False)
    max_members = forms.IntegerField(min_value=1, max_value=100, required=False)
    tags = StringListField(max_items=20, max_length=50)
    goals = forms.JSONField(required=False)
    status = forms.ChoiceField(
        choices=[(Pod.Status.DRAFT, 'Draft'), (Pod.Status.OPEN, 'Open')],
        required=False,
    )

    def clean_goals(self):
        return clean_goal_list(self.cleaned_data.get('goals'))

    def clean(self):
        cleaned_data = super().clean()
        start, end = cleaned_data.get('start_date'), cleaned_data.get('end_date')
        if start and end and end <= start:
            self.add_error('end_date', 'End date must be after the start date.')
        return cleaned_data


class PodUpdateForm(forms.Form):
    """Founder edits; only submitted keys are applied."""

    title = forms.CharField(max_length=100, required=False)
    description = forms.CharField(max_length=1000, required=False)
    category = forms.ChoiceField(choices=Category.choices, required=False)
    stage = forms.ChoiceField(choices=Pod.Stage.choices, required=False)
    status = forms.ChoiceField(choices=Pod.Status.choices, required=False)
    tags = StringListField(max_items=20, max_length=50)
    is_public = forms.NullBooleanField(required=False)
    max_members = forms.IntegerField(min_value=1, max_value=100, required=False)
    communication = forms.JSONField(required=False)

    def clean_communication(self):
        value = self.cleaned_data.get('communication')
        if value in (None, ''):
            return None
        if not isinstance(value, dict):
            raise forms.ValidationError('communication must be an object.')
        if value.get('platform', 'slack') not in COMMUNICATION_PLATFORMS:
            raise forms.ValidationError(
                f'communication.platform must be one of: {", ".join(COMMUNICATION_PLATFORMS)}.'
            )
        return value

    def model_values(self) -> dict:
        values = {}
        for name in self.fields:
            if name not in self.data:
                continue
            value = self.cleaned_data[name]
            if value in ('', None):
                continue
            values[name] = value
        return values


class PodApplicationForm(forms.Form):
    role = forms.ChoiceField(
        choices=[c for c in PodMember.Role.choices if c[0] != PodMember.Role.FOUNDER],
        error_messages={'required': 'Role is required'},
    )
    contribution = forms.ChoiceField(
        choices=PodMember.Contribution.choices,
        error_messages={'required': 'Contribution type is required'},
    )
    equity_percentage = forms.DecimalField(min_value=0, max_value=100, decimal_places=2, required=False)
    message = forms.CharField(max_length=1000, required=False)


class GoalStatusForm(forms.Form):
    status = forms.ChoiceField(choices=PodGoal.Status.choices)


class PodFilterForm(forms.Form):
    category = forms.ChoiceField(choices=Category.choices, required=False)
    stage = forms.ChoiceField(choices=Pod.Stage.choices, required=False)
    status = forms.ChoiceField(choices=Pod.Status.choices, required=False)
    featured = forms.NullBooleanField(required=False)
