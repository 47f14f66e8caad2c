"""
Forms for community posts.

PostForm validates both creation and partial updates; the type-specific
`failure` / `signal` / `investor` blocks are checked against their enums and
folded into a single `details` dict.
"""

from django import forms

from core.forms import StringListField
from core.models import Category, StartupStage

from .models import (
    FAILURE_CATEGORIES, FAILURE_IMPACTS, FUNDING_TYPES, SIGNAL_IMPACTS, SIGNAL_TYPES, Post,
)

MEDIA_TYPES = ('image', 'video', 'document')


def _choice(block, key, allowed, default=None, required=False):
    value = block.get(key, default)
    if value is None and not required:
        return None
    if value not in allowed:
        raise forms.ValidationError(
            f'{key} must be one of: {", ".join(allowed)}.', code='invalid_choice'
        )
    return value


def clean_failure(block: dict) -> dict:
    return {
        **block,
        'category': _choice(block, 'category', FAILURE_CATEGORIES, default='other'),
        'impact': _choice(block, 'impact', FAILURE_IMPACTS, default='medium'),
        'lessons': StringListField().clean(block.get('lessons')),
        'recovery_steps': StringListField().clean(block.get('recovery_steps')),
    }


def clean_signal(block: dict) -> dict:
    return {
        **block,
        'type': _choice(block, 'type', SIGNAL_TYPES, required=True),
        'impact': _choice(block, 'impact', SIGNAL_IMPACTS, default='medium'),
    }


def clean_investor(block: dict) -> dict:
    cleaned = {**block, 'stage': _choice(block, 'stage', StartupStage.values, required=True)}
    funding = block.get('funding')
    if funding is not None:
        if not isinstance(funding, dict):
            raise forms.ValidationError('funding must be an object.', code='invalid')
        cleaned['funding'] = {**funding, 'type': _choice(funding, 'type', FUNDING_TYPES)}
    return cleaned


DETAIL_CLEANERS = {
    'failure': clean_failure,
    'signal': clean_signal,
    'investor': clean_investor,
}


class PostForm(forms.Form):
    type = forms.ChoiceField(choices=Post.PostType.choices)
    title = forms.CharField(max_length=200, error_messages={'required': 'Title is required'})
    content = forms.CharField(max_length=5000, error_messages={'required': 'Content is required'})
    category = forms.ChoiceField(choices=Category.choices, required=False)
    tags = StringListField(max_items=20, max_length=50)
    media = forms.JSONField(required=False)
    failure = forms.JSONField(required=False)
    signal = forms.JSONField(required=False)
    investor = forms.JSONField(required=False)

    def __init__(self, *args, instance=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.instance = instance
        if instance is not None:
            # updates are partial and never change the post type
            del self.fields['type']
            for field in self.fields.values():
                field.required = False

    @property
    def post_type(self):
        if self.instance is not None:
            return self.instance.post_type
        return self.cleaned_data.get('type')

    def clean_media(self):
        media = self.cleaned_data.get('media') or []
        if not isinstance(media, list):
            raise forms.ValidationError('media must be a list.')
        for item in media:
            if not isinstance(item, dict) or not item.get('url'):
                raise forms.ValidationError('Every media item needs a url.')
            if item.get('type') not in MEDIA_TYPES:
                raise forms.ValidationError(f'Media type must be one of: {", ".join(MEDIA_TYPES)}.')
        return media

    def clean(self):
        cleaned_data = super().clean()
        key = Post.DETAIL_KEYS.get(self.post_type)
        cleaned_data['details'] = None

        if key is None:
            if self.instance is None:
                cleaned_data['details'] = {}
            return cleaned_data

        if self.instance is not None and key not in self.data:
            return cleaned_data

        block = cleaned_data.get(key) or {}
        if not isinstance(block, dict):
            self.add_error(key, f'{key} must be an object.')
            return cleaned_data
        try:
            cleaned_data['details'] = {key: DETAIL_CLEANERS[key](block)}
        except forms.ValidationError as e:
            self.add_error(key, e)
        return cleaned_data

    def changed_fields(self):
        """Model fields to write: every submitted key for updates."""
        names = ['title', 'content', 'category', 'tags', 'media']
        if self.instance is None:
            return names
        return [name for name in names if name in self.data]


class CommentForm(forms.Form):
    content = forms.CharField(max_length=1000, error_messages={'required': 'Comment content is required'})


class ShareForm(forms.Form):
    platform = forms.CharField(max_length=50, error_messages={'required': 'Platform is required'})


class PostFilterForm(forms.Form):
    SORTS = (('newest', 'Newest'), ('popular', 'Popular'), ('trending', 'Trending'))

    type = forms.ChoiceField(choices=Post.PostType.choices, required=False)
    category = forms.ChoiceField(choices=Category.choices, required=False)
    featured = forms.NullBooleanField(required=False)
    sort = forms.ChoiceField(choices=SORTS, required=False)
