# journal/filters.py
"""Archive filtering over an already fetched list of entries.

Three independent equality predicates (category, media type, vibe) are
combined with AND. A predicate left at ``all`` is dropped.
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .models import EntryVibe, JournalCategory, MediaType

ALL = 'all'


def _pick(value, choices) -> Optional[str]:
    # Anything outside the domain, "all" included, disables the predicate.
    if value in choices.values:
        return value
    return None


@dataclass(frozen=True)
class ArchiveFilters:
    category: Optional[str] = None
    media_type: Optional[str] = None
    vibe: Optional[str] = None

    @classmethod
    def from_params(cls, params) -> "ArchiveFilters":
        return cls(
            category=_pick(params.get('category'), JournalCategory),
            media_type=_pick(params.get('media_type'), MediaType),
            vibe=_pick(params.get('vibe'), EntryVibe),
        )

    def as_params(self) -> dict:
        """Selected value per filter, ``all`` where no predicate applies"""
        return {
            'category': self.category or ALL,
            'media_type': self.media_type or ALL,
            'vibe': self.vibe or ALL,
        }

    def matches(self, entry) -> bool:
        if self.category is not None and entry.category != self.category:
            return False
        if self.media_type is not None and entry.media_type != self.media_type:
            return False
        if self.vibe is not None and entry.vibe != self.vibe:
            return False
        return True


def filter_entries(entries: Iterable, filters: ArchiveFilters) -> List:
    """Entries satisfying every active predicate, in their original order"""
    return [entry for entry in entries if filters.matches(entry)]
