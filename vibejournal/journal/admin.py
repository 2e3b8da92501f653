from django.contrib import admin

from .models import JournalEntry


@admin.register(JournalEntry)
class JournalEntryAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "category", "media_type", "vibe", "created_at", "updated_at")
    search_fields = ("user__user__username", "user__display_name")
    list_filter = ("category", "media_type", "vibe", "created_at")
    readonly_fields = ("id", "created_at", "updated_at")
