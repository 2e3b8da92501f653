import uuid
from urllib.parse import urlsplit

from django.db import models
from django.db.models.functions import Length, Trim
from django.db.models.lookups import GreaterThan
from django.utils import timezone


class JournalCategory(models.TextChoices):
    THOUGHTS = 'thoughts', 'Thoughts'
    WISHES = 'wishes', 'Wishes'
    GRIEVANCES = 'grievances', 'Grievances'
    REFLECTION = 'reflection', 'Reflection'
    GRATITUDE = 'gratitude', 'Gratitude'


class MediaType(models.TextChoices):
    TEXT = 'text', 'Text'
    VOICE = 'voice', 'Voice'
    ANNOTATED_MEDIA_LINK = 'annotated_media_link', 'Media Link'
    IMAGE = 'image', 'Image'
    VIDEO = 'video', 'Video'


class EntryVibe(models.TextChoices):
    HAPPY = 'happy', 'Happy'
    SAD = 'sad', 'Sad'
    ANXIOUS = 'anxious', 'Anxious'
    CALM = 'calm', 'Calm'
    EXCITED = 'excited', 'Excited'
    ANGRY = 'angry', 'Angry'
    PEACEFUL = 'peaceful', 'Peaceful'
    CONFUSED = 'confused', 'Confused'
    HOPEFUL = 'hopeful', 'Hopeful'
    NEUTRAL = 'neutral', 'Neutral'


# Media types whose entries point at external media.
MEDIA_LINK_TYPES = frozenset({
    MediaType.ANNOTATED_MEDIA_LINK,
    MediaType.IMAGE,
    MediaType.VIDEO,
})

LINK_SCHEMES = ('http', 'https')


class JournalEntryQuerySet(models.QuerySet):

    def newest_first(self):
        return self.order_by('-created_at')

    def update(self, **kwargs):
        # Bulk updates bypass save(), so auto_now has to be applied here.
        kwargs.setdefault('updated_at', timezone.now())
        return super().update(**kwargs)


class JournalEntry(models.Model):
    """One user-authored journal record"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        'accounts.Profile',
        on_delete=models.CASCADE,
        related_name='journal_entries',
    )
    content = models.TextField()
    category = models.CharField(
        max_length=20, choices=JournalCategory.choices, default=JournalCategory.THOUGHTS
    )
    media_type = models.CharField(
        max_length=20, choices=MediaType.choices, default=MediaType.TEXT
    )
    media_url = models.TextField(null=True, blank=True)
    media_annotation = models.TextField(null=True, blank=True)
    vibe = models.CharField(max_length=20, choices=EntryVibe.choices, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = JournalEntryQuerySet.as_manager()

    class Meta:
        db_table = 'journal_entries'
        ordering = ['-created_at']
        verbose_name_plural = 'journal entries'
        indexes = [
            models.Index(fields=['category'], name='idx_journal_entries_category'),
            models.Index(fields=['media_type'], name='idx_journal_entries_media_type'),
            models.Index(fields=['vibe'], name='idx_journal_entries_vibe'),
            models.Index(fields=['-created_at'], name='idx_journal_entries_created_at'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=GreaterThan(Length(Trim('content')), 0),
                name='journal_entries_content_not_empty',
                violation_error_message='Entry content cannot be empty.',
            ),
            models.CheckConstraint(
                condition=models.Q(category__in=JournalCategory.values),
                name='journal_entries_category_valid',
            ),
            models.CheckConstraint(
                condition=models.Q(media_type__in=MediaType.values),
                name='journal_entries_media_type_valid',
            ),
            models.CheckConstraint(
                condition=models.Q(vibe__isnull=True) | models.Q(vibe__in=EntryVibe.values),
                name='journal_entries_vibe_valid',
            ),
        ]

    def __str__(self):
        return f"{self.user_id} - {self.category} - {self.created_at:%Y-%m-%d}"

    @property
    def has_media_link(self):
        if not self.media_url:
            return False
        return urlsplit(self.media_url).scheme.lower() in LINK_SCHEMES
