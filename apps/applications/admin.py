# apps/applications/admin.py

from django.contrib import admin
from .models import ArtistApplication


@admin.register(ArtistApplication)
class ArtistApplicationAdmin(admin.ModelAdmin):
    list_display = ('nickname', 'applicant', 'status', 'created_at', 'rejected_at', 'can_reapply_after')
    list_filter = ('status', 'created_at')
    search_fields = ('nickname', 'applicant__email', 'introduction')
    date_hierarchy = 'created_at'
