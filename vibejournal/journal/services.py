# journal/services.py
import logging

from django.core.exceptions import ValidationError
from django.db import DatabaseError

from accounts.policies import INSERT
from accounts.services import get_profile
from .exceptions import AuthenticationMissing, EntryReadError, EntryWriteError
from .models import JournalEntry, JournalCategory, MediaType, MEDIA_LINK_TYPES
from .policies import ENTRY_POLICY

logger = logging.getLogger(__name__)


def blank_to_none(value):
    """Strip text input; blank becomes None so it is stored as NULL"""
    if value is None:
        return None
    value = value.strip()
    return value or None


def normalize_media_fields(media_type, media_url, media_annotation):
    """Media URL and annotation only belong to link-style media types"""
    if media_type not in MEDIA_LINK_TYPES:
        return None, None
    return blank_to_none(media_url), blank_to_none(media_annotation)


def require_user(user):
    if user is None or not user.is_authenticated:
        raise AuthenticationMissing()
    return user


def create_entry(user, content, category=JournalCategory.THOUGHTS, media_type=MediaType.TEXT,
                 media_url=None, media_annotation=None, vibe=None, owner=None):
    """Insert one entry for ``user``.

    ``owner`` defaults to the caller's own profile. Passing anyone else's
    profile is refused by the entry policy before anything is written.
    Each call inserts a new row; identical calls produce duplicates.
    """
    require_user(user)
    if owner is None:
        owner = get_profile(user)

    media_url, media_annotation = normalize_media_fields(media_type, media_url, media_annotation)
    entry = JournalEntry(
        user=owner,
        content=(content or '').strip(),
        category=category,
        media_type=media_type,
        media_url=media_url,
        media_annotation=media_annotation,
        vibe=vibe or None,
    )
    ENTRY_POLICY.enforce(user, INSERT, entry)

    try:
        entry.full_clean()
        entry.save(force_insert=True)
    except ValidationError as exc:
        logger.info("Rejected entry for user %s: %s", user.pk, exc.message_dict)
        raise EntryWriteError() from exc
    except DatabaseError as exc:
        logger.exception("Failed to insert entry for user %s", user.pk)
        raise EntryWriteError() from exc

    logger.info("Created entry %s for user %s", entry.pk, user.pk)
    return entry


def fetch_entries(user):
    """All entries the caller owns, newest first"""
    require_user(user)
    queryset = ENTRY_POLICY.scope(JournalEntry.objects.all(), user).newest_first()
    try:
        return list(queryset)
    except DatabaseError as exc:
        logger.exception("Failed to load entries for user %s", user.pk)
        raise EntryReadError() from exc
