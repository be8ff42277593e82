# apps/songs/admin.py

from django.contrib import admin
from .models import Song


@admin.register(Song)
class SongAdmin(admin.ModelAdmin):
    list_display = ['title', 'nickname', 'genre', 'song_status', 'likes_count', 'created_at']
    list_filter = ['genre', 'is_pending', 'is_visible', 'is_deleted', 'created_at']
    search_fields = ['title', 'nickname', 'owner__email']
    readonly_fields = ['likes_count', 'created_at', 'updated_at']
    date_hierarchy = 'created_at'

    fieldsets = (
        ('Song', {
            'fields': ('owner', 'title', 'nickname', 'genre')
        }),
        ('Media', {
            'fields': ('audio_url', 'image_url')
        }),
        ('Lifecycle', {
            'fields': ('is_pending', 'is_visible', 'is_deleted')
        }),
        ('Stats', {
            'fields': ('likes_count', 'created_at', 'updated_at')
        }),
    )

    def song_status(self, obj):
        return obj.status
    song_status.short_description = 'Status'
