# apps/reports/serializers.py

from rest_framework import serializers
from algorithms import suspension as rules
from .models import Report, GuiltyReport

REPORT_FIELDS = (
    'id', 'report_type', 'target_id', 'post_id', 'song_id', 'parent_comment_id',
    'board_owner_id', 'reporter_id', 'reporter_nickname', 'reported_user_id',
    'reported_user_nickname', 'reason', 'created_at',
    'content_snapshot', 'image_snapshot', 'nickname_snapshot'
)


class ReportSerializer(serializers.ModelSerializer):
    class Meta:
        model = Report
        fields = REPORT_FIELDS
        read_only_fields = fields


class GuiltyReportSerializer(serializers.ModelSerializer):
    class Meta:
        model = GuiltyReport
        fields = REPORT_FIELDS + ('adjudicated_at', 'adjudicated_by_id', 'suspension')
        read_only_fields = fields


class VerdictSerializer(serializers.Serializer):
    duration = serializers.ChoiceField(choices=[rules.PERMANENT, *rules.SUSPENSION_DURATIONS])
