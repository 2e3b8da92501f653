from django import template
from django.conf import settings
from django.utils.text import Truncator

from journal import display

register = template.Library()


@register.filter
def vibe_emoji(vibe):
    return display.vibe_emoji(vibe)


@register.filter
def category_color(category):
    return display.category_color(category)


@register.filter
def card_excerpt(content, words=None):
    """Entry content cut down to fit a card"""
    return Truncator(content).words(int(words or settings.ARCHIVE_CONTENT_WORDS), truncate="…")
