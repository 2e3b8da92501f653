# journal/display.py
"""Lookup tables used to render entries: mood glyphs and category badges."""
from .models import EntryVibe, JournalCategory

VIBE_EMOJIS = {
    EntryVibe.HAPPY: "😊",
    EntryVibe.SAD: "😢",
    EntryVibe.ANXIOUS: "😰",
    EntryVibe.CALM: "😌",
    EntryVibe.EXCITED: "🤩",
    EntryVibe.ANGRY: "😠",
    EntryVibe.PEACEFUL: "🕊️",
    EntryVibe.CONFUSED: "😕",
    EntryVibe.HOPEFUL: "🌟",
    EntryVibe.NEUTRAL: "😐",
}

CATEGORY_COLORS = {
    JournalCategory.THOUGHTS: "badge-thoughts",
    JournalCategory.WISHES: "badge-wishes",
    JournalCategory.GRIEVANCES: "badge-grievances",
    JournalCategory.REFLECTION: "badge-reflection",
    JournalCategory.GRATITUDE: "badge-gratitude",
}

DEFAULT_CATEGORY_COLOR = "badge-muted"


def vibe_emoji(vibe):
    """Glyph for a vibe value; empty for no vibe or an unknown one"""
    if not vibe:
        return ""
    return VIBE_EMOJIS.get(vibe, "")


def category_color(category):
    return CATEGORY_COLORS.get(category, DEFAULT_CATEGORY_COLOR)


def vibe_label(vibe):
    """Choice label with its glyph, e.g. ``Happy 😊``"""
    return f"{EntryVibe(vibe).label} {vibe_emoji(vibe)}"
