# journal/forms.py
from django import forms

from .display import vibe_label
from .models import JournalEntry, EntryVibe
from .services import normalize_media_fields

VIBE_CHOICES = [('', 'None')] + [(value, vibe_label(value)) for value in EntryVibe.values]


class JournalEntryForm(forms.ModelForm):
    """Fields collected by the new entry dialog"""

    vibe = forms.TypedChoiceField(
        choices=VIBE_CHOICES,
        required=False,
        empty_value=None,
        label='Vibe (optional)',
        widget=forms.Select(attrs={'class': 'form-select'}),
    )

    class Meta:
        model = JournalEntry
        fields = ['content', 'category', 'media_type', 'vibe', 'media_url', 'media_annotation']
        labels = {
            'content': 'Your Entry',
            'category': 'Category',
            'media_type': 'Media Type',
            'media_url': 'Media URL',
            'media_annotation': 'Media Annotation',
        }
        widgets = {
            'content': forms.Textarea(attrs={
                'class': 'form-control',
                'rows': 6,
                'placeholder': "What's on your mind?",
            }),
            'category': forms.Select(attrs={'class': 'form-select'}),
            'media_type': forms.Select(attrs={'class': 'form-select'}),
            # The browser checks the URL shape; the server stores what it gets.
            'media_url': forms.URLInput(attrs={
                'class': 'form-control',
                'placeholder': 'https://example.com/media',
            }),
            'media_annotation': forms.Textarea(attrs={
                'class': 'form-control',
                'rows': 3,
                'placeholder': 'Your thoughts about this media...',
            }),
        }

    def clean(self):
        cleaned_data = super().clean()
        cleaned_data['media_url'], cleaned_data['media_annotation'] = normalize_media_fields(
            cleaned_data.get('media_type'),
            cleaned_data.get('media_url'),
            cleaned_data.get('media_annotation'),
        )
        return cleaned_data
