"""
Forms for the job board.
"""

from django import forms

from core.forms import StringListField
from core.models import Category

from .models import Job, JobApplication


class JobForm(forms.Form):
    """Job posting; with an instance bound, every field is optional."""

    title = forms.CharField(max_length=200, error_messages={'required': 'Job title is required'})
    description = forms.CharField(max_length=5000, error_messages={'required': 'Job description is required'})
    category = forms.ChoiceField(choices=Category.choices)
    type = forms.ChoiceField(choices=Job.JobType.choices)
    location = forms.CharField(max_length=255, error_messages={'required': 'Location is required'})
    remote = forms.BooleanField(required=False)
    salary = forms.JSONField(required=False)
    requirements = StringListField()
    benefits = StringListField()
    tags = StringListField(max_items=20, max_length=50)
    deadline = forms.DateTimeField(required=False)
    pod_id = forms.IntegerField(required=False)
    status = forms.ChoiceField(
        choices=[(s, label) for s, label in Job.Status.choices if s != Job.Status.DELETED],
        required=False,
    )

    # form field -> model field
    FIELD_MAP = {
        'title': 'title',
        'description': 'description',
        'category': 'category',
        'type': 'job_type',
        'location': 'location',
        'remote': 'remote',
        'requirements': 'requirements',
        'benefits': 'benefits',
        'tags': 'tags',
        'deadline': 'deadline',
        'status': 'status',
    }

    def __init__(self, *args, instance=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.instance = instance
        if instance is not None:
            for field in self.fields.values():
                field.required = False
        else:
            del self.fields['status']

    def clean_salary(self):
        salary = self.cleaned_data.get('salary')
        if salary in (None, ''):
            return None
        if not isinstance(salary, dict):
            raise forms.ValidationError('salary must be an object.')

        cleaned = {}
        for bound in ('min', 'max'):
            value = salary.get(bound)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise forms.ValidationError(f'salary.{bound} must be a non-negative integer.')
            cleaned[f'salary_{bound}'] = value
        if 'salary_min' in cleaned and 'salary_max' in cleaned and cleaned['salary_min'] > cleaned['salary_max']:
            raise forms.ValidationError('salary.min cannot exceed salary.max.')

        if 'currency' in salary:
            currency = str(salary['currency']).upper()
            if len(currency) != 3:
                raise forms.ValidationError('salary.currency must be a 3-letter code.')
            cleaned['salary_currency'] = currency
        if 'period' in salary:
            if salary['period'] not in Job.SalaryPeriod.values:
                raise forms.ValidationError('salary.period must be hourly, monthly or yearly.')
            cleaned['salary_period'] = salary['period']
        return cleaned

    def model_values(self) -> dict:
        """Model field values to write; only submitted keys for updates."""
        values = {}
        for form_name, model_name in self.FIELD_MAP.items():
            if form_name not in self.fields:
                continue
            if self.instance is not None and form_name not in self.data:
                continue
            value = self.cleaned_data[form_name]
            if self.instance is not None and value in ('', None) and form_name not in ('deadline',):
                continue
            values[model_name] = value
        if self.cleaned_data.get('salary'):
            values.update(self.cleaned_data['salary'])
        return values


class ApplicationForm(forms.Form):
    cover_letter = forms.CharField(max_length=2000, error_messages={'required': 'Cover letter is required'})
    resume = forms.CharField(max_length=500, required=False)


class ApplicationStatusForm(forms.Form):
    status = forms.ChoiceField(choices=JobApplication.Status.choices)
    feedback = forms.CharField(required=False)


class JobFilterForm(forms.Form):
    category = forms.ChoiceField(choices=Category.choices, required=False)
    type = forms.ChoiceField(choices=Job.JobType.choices, required=False)
    location = forms.CharField(max_length=255, required=False)
    remote = forms.NullBooleanField(required=False)
