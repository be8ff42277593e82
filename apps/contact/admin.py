# apps/contact/admin.py

from django.contrib import admin
from .models import ContactMessage


@admin.register(ContactMessage)
class ContactMessageAdmin(admin.ModelAdmin):
    list_display = ('display_nickname', 'email', 'created_at', 'is_resolved', 'resolved_by')
    list_filter = ('is_resolved', 'created_at')
    search_fields = ('nickname', 'email', 'message')
    date_hierarchy = 'created_at'
    readonly_fields = ('resolved_at', 'resolved_by')
