"""Schema tests for journal_entries constraints and defaults."""

import pytest
from django.db import IntegrityError, transaction

from journal.models import JournalEntry, JournalCategory, MediaType


@pytest.mark.django_db
class TestJournalEntrySchema:

    def test_defaults(self, user, make_entry):
        entry = make_entry(user)
        entry.refresh_from_db()

        assert entry.category == JournalCategory.THOUGHTS
        assert entry.media_type == MediaType.TEXT
        assert entry.media_url is None
        assert entry.media_annotation is None
        assert entry.vibe is None
        assert entry.user_id == user.pk
        assert entry.created_at is not None

    def test_ids_are_unique(self, user, make_entry):
        first = make_entry(user)
        second = make_entry(user)
        assert first.id != second.id

    def test_whitespace_content_rejected_by_database(self, user):
        with pytest.raises(IntegrityError), transaction.atomic():
            JournalEntry.objects.create(user=user.profile, content="   ")
        assert JournalEntry.objects.count() == 0

    @pytest.mark.parametrize("field,value", [
        ("category", "rants"),
        ("media_type", "hologram"),
        ("vibe", "ecstatic"),
    ])
    def test_values_outside_domain_rejected_by_database(self, user, field, value):
        with pytest.raises(IntegrityError), transaction.atomic():
            JournalEntry.objects.create(user=user.profile, content="hello", **{field: value})

    def test_updated_at_refreshes_on_update(self, user, make_entry):
        entry = make_entry(user)
        original = entry.updated_at

        entry.content = "Changed my mind"
        entry.save()
        entry.refresh_from_db()

        assert entry.updated_at > original
        assert entry.created_at <= original

    def test_deleting_profile_cascades_to_entries(self, user, other_user, make_entry):
        make_entry(user)
        make_entry(user)
        kept = make_entry(other_user)

        user.profile.delete()

        assert list(JournalEntry.objects.all()) == [kept]

    def test_updated_at_refreshes_on_queryset_update(self, user, make_entry):
        entry = make_entry(user)
        original = entry.updated_at

        JournalEntry.objects.filter(pk=entry.pk).update(content="Bulk edit")
        entry.refresh_from_db()

        assert entry.content == "Bulk edit"
        assert entry.updated_at > original

    @pytest.mark.parametrize("url,linked", [
        ("https://example.com/song", True),
        ("HTTP://example.com/song", True),
        ("javascript:alert(1)", False),
        ("data:text/html,hi", False),
        ("example.com/no-scheme", False),
        (None, False),
    ])
    def test_has_media_link_only_for_http_urls(self, url, linked):
        entry = JournalEntry(content="x", media_type=MediaType.IMAGE, media_url=url)
        assert entry.has_media_link is linked
