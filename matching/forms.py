"""
Forms for the matching module.
"""

from django import forms

from .models import Match


class MatchFilterForm(forms.Form):
    """Query-string filters for the match list."""

    status = forms.ChoiceField(choices=Match.Status.choices, required=False)
    quality = forms.ChoiceField(choices=Match.Quality.choices, required=False)


class MatchFeedbackForm(forms.Form):
    rating = forms.IntegerField(min_value=1, max_value=5)
    comment = forms.CharField(max_length=2000, required=False)
