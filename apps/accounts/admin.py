# apps/accounts/admin.py

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import User, Fan, LoginHistory


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ('email', 'nickname', 'is_artist', 'artist_level', 'np_balance', 'is_admin', 'suspended_until', 'is_permanently_banned', 'created_at')
    list_filter = ('is_artist', 'artist_level', 'is_admin', 'is_permanently_banned', 'is_active', 'created_at')
    search_fields = ('username', 'email', 'nickname')
    ordering = ('-created_at',)
    readonly_fields = ('np_balance', 'suspension_count', 'last_active')

    fieldsets = BaseUserAdmin.fieldsets + (
        ('NADA Profile', {
            'fields': ('nickname', 'profile_image_url', 'np_balance')
        }),
        ('Artist', {
            'fields': ('is_artist', 'artist_level', 'artist_application_status', 'application_rejected_at')
        }),
        ('Console Role', {
            'fields': ('is_admin',)
        }),
        ('Suspension', {
            'fields': ('suspended_until', 'is_permanently_banned', 'suspension_count')
        }),
        ('Activity', {
            'fields': ('last_active',)
        }),
    )

    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ('NADA Profile', {
            'fields': ('email', 'nickname')
        }),
    )


@admin.register(Fan)
class FanAdmin(admin.ModelAdmin):
    list_display = ('fan', 'artist', 'created_at')
    search_fields = ('fan__nickname', 'artist__nickname')
    date_hierarchy = 'created_at'


@admin.register(LoginHistory)
class LoginHistoryAdmin(admin.ModelAdmin):
    list_display = ('user', 'ip_address', 'login_time', 'logout_time')
    list_filter = ('login_time',)
    search_fields = ('user__email', 'ip_address')
    date_hierarchy = 'login_time'
    readonly_fields = ('login_time', 'logout_time')
