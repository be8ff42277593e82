# apps/accounts/serializers.py

from rest_framework import serializers
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Serializer for User model as the console sees it"""

    suspension_status = serializers.SerializerMethodField()
    fan_count = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = (
            'id', 'email', 'nickname', 'profile_image_url', 'np_balance',
            'is_admin', 'is_artist', 'artist_level', 'artist_application_status',
            'suspended_until', 'is_permanently_banned', 'suspension_count',
            'suspension_status', 'fan_count', 'created_at', 'last_active'
        )
        read_only_fields = fields

    def get_suspension_status(self, obj):
        return obj.get_suspension_status()

    def get_fan_count(self, obj):
        return obj.get_fan_count()


class SuspendSerializer(serializers.Serializer):
    duration = serializers.CharField()


class AdminRoleSerializer(serializers.Serializer):
    is_admin = serializers.BooleanField()
