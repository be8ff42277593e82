# api/filters.py

from django.db.models import Q
from django_filters import rest_framework as filters

from algorithms import song_lifecycle as lifecycle
from apps.accounts.models import User
from apps.reports.models import Report
from apps.songs.models import Song


class UserFilter(filters.FilterSet):
    search = filters.CharFilter(method='filter_search')

    class Meta:
        model = User
        fields = ['is_artist', 'artist_level', 'is_admin', 'is_permanently_banned', 'search']

    def filter_search(self, queryset, name, value):
        return queryset.filter(Q(nickname__icontains=value) | Q(email__icontains=value))


class ReportFilter(filters.FilterSet):
    created_after = filters.DateTimeFilter(field_name='created_at', lookup_expr='gte')
    created_before = filters.DateTimeFilter(field_name='created_at', lookup_expr='lte')
    reported_user = filters.CharFilter(field_name='reported_user_nickname')

    class Meta:
        model = Report
        fields = ['report_type', 'created_after', 'created_before', 'reported_user']


class SongFilter(filters.FilterSet):
    status = filters.ChoiceFilter(choices=[(s, s) for s in lifecycle.STATUSES], method='filter_status')
    search = filters.CharFilter(method='filter_search')

    class Meta:
        model = Song
        fields = ['genre', 'status', 'search']

    def filter_status(self, queryset, name, value):
        return queryset.with_status(value)

    def filter_search(self, queryset, name, value):
        return queryset.filter(Q(title__icontains=value) | Q(nickname__icontains=value))
