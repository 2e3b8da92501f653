# journal/serializers.py
from rest_framework import serializers

from accounts.models import Profile
from .display import vibe_emoji, category_color
from .models import JournalEntry
from .services import normalize_media_fields


class JournalEntrySerializer(serializers.ModelSerializer):
    user = serializers.PrimaryKeyRelatedField(queryset=Profile.objects.all(), required=False)
    category_display = serializers.CharField(source='get_category_display', read_only=True)
    media_type_display = serializers.CharField(source='get_media_type_display', read_only=True)
    vibe_emoji = serializers.SerializerMethodField()
    category_color = serializers.SerializerMethodField()

    class Meta:
        model = JournalEntry
        fields = [
            'id', 'user', 'content', 'category', 'category_display', 'category_color',
            'media_type', 'media_type_display', 'media_url', 'media_annotation',
            'vibe', 'vibe_emoji', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def get_vibe_emoji(self, obj):
        return vibe_emoji(obj.vibe)

    def get_category_color(self, obj):
        return category_color(obj.category)

    def validate_content(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Entry content cannot be empty.")
        return value

    def validate_user(self, value):
        if self.instance is not None and value.pk != self.instance.user_id:
            raise serializers.ValidationError("Entry owner cannot be changed.")
        return value

    def validate(self, attrs):
        media_type = attrs.get('media_type', getattr(self.instance, 'media_type', None))
        media_url = attrs.get('media_url', getattr(self.instance, 'media_url', None))
        media_annotation = attrs.get('media_annotation', getattr(self.instance, 'media_annotation', None))
        attrs['media_url'], attrs['media_annotation'] = normalize_media_fields(
            media_type, media_url, media_annotation
        )
        if 'vibe' in attrs:
            attrs['vibe'] = attrs['vibe'] or None
        return attrs
