"""Display helper tests: mood glyphs, badge colours, card excerpts."""

import pytest
from django.template import Context, Template

from journal.display import VIBE_EMOJIS, category_color, vibe_emoji, vibe_label
from journal.models import EntryVibe, JournalCategory


class TestVibeEmoji:

    def test_every_vibe_has_a_glyph(self):
        assert set(VIBE_EMOJIS) == set(EntryVibe.values)
        assert all(vibe_emoji(value) for value in EntryVibe.values)

    @pytest.mark.parametrize("vibe", [None, "", "ecstatic"])
    def test_missing_or_unknown_vibe_has_no_glyph(self, vibe):
        assert vibe_emoji(vibe) == ""

    def test_label_includes_glyph(self):
        assert vibe_label("happy") == "Happy 😊"


class TestCategoryColor:

    def test_each_category_has_its_own_badge(self):
        colors = [category_color(value) for value in JournalCategory.values]
        assert len(set(colors)) == len(colors)
        assert category_color("gratitude") == "badge-gratitude"

    def test_unknown_category_is_muted(self):
        assert category_color("rants") == "badge-muted"


class TestTemplateFilters:

    def render(self, source, **context):
        return Template("{% load journal_extras %}" + source).render(Context(context))

    def test_vibe_and_category_filters(self):
        out = self.render("{{ v|vibe_emoji }} {{ c|category_color }}", v="calm", c="wishes")
        assert out == "😌 badge-wishes"

    def test_card_excerpt_truncates_words(self, settings):
        settings.ARCHIVE_CONTENT_WORDS = 3
        out = self.render("{{ text|card_excerpt }}", text="one two three four five")
        assert out == "one two three…"

    def test_card_excerpt_keeps_short_content(self):
        out = self.render("{{ text|card_excerpt:10 }}", text="short entry")
        assert out == "short entry"
