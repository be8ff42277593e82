# apps/reports/admin.py

from django.contrib import admin
from .models import Report, GuiltyReport


@admin.register(Report)
class ReportAdmin(admin.ModelAdmin):
    list_display = ('report_type', 'reporter_nickname', 'reported_user_nickname', 'reason', 'created_at')
    list_filter = ('report_type', 'created_at')
    search_fields = ('reporter_nickname', 'reported_user_nickname', 'reason', 'target_id')
    date_hierarchy = 'created_at'


@admin.register(GuiltyReport)
class GuiltyReportAdmin(admin.ModelAdmin):
    list_display = ('report_type', 'reported_user_nickname', 'suspension', 'adjudicated_by', 'adjudicated_at')
    list_filter = ('report_type', 'suspension', 'adjudicated_at')
    search_fields = ('reporter_nickname', 'reported_user_nickname', 'reason')
    readonly_fields = ('id', 'adjudicated_at', 'adjudicated_by')
    date_hierarchy = 'adjudicated_at'
