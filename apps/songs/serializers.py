# apps/songs/serializers.py

from rest_framework import serializers
from .models import Song


class SongSerializer(serializers.ModelSerializer):
    status = serializers.CharField(read_only=True)
    allowed_actions = serializers.ListField(child=serializers.CharField(), read_only=True)

    class Meta:
        model = Song
        fields = (
            'id', 'owner_id', 'title', 'nickname', 'genre', 'audio_url', 'image_url',
            'status', 'allowed_actions', 'is_pending', 'is_visible', 'is_deleted',
            'likes_count', 'created_at', 'updated_at'
        )
        read_only_fields = fields
