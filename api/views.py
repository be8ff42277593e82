# api/views.py

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response

from algorithms import song_lifecycle as lifecycle
from apps.accounts.models import User
from apps.accounts.serializers import UserSerializer, SuspendSerializer, AdminRoleSerializer
from apps.accounts.utils import AdminRoleError, suspend_user, unsuspend_user, set_admin_role
from apps.ledger.serializers import BalanceEntrySerializer, AdjustBalanceSerializer, TransactionSerializer
from apps.ledger.utils import InvalidAdjustment, balance_history, adjust_balance
from apps.reports.models import Report, GuiltyReport
from apps.reports.serializers import ReportSerializer, GuiltyReportSerializer, VerdictSerializer
from apps.reports.utils import ReportAlreadyProcessed, mark_innocent, mark_guilty
from apps.songs.models import Song
from apps.songs.serializers import SongSerializer
from apps.songs.utils import transition_song

from .filters import UserFilter, ReportFilter, SongFilter
from .permissions import IsSuperAdmin


# Users

class UserViewSet(viewsets.ReadOnlyModelViewSet):
    """Accounts with suspension state, NP history and role changes"""
    queryset = User.objects.all()
    serializer_class = UserSerializer
    filterset_class = UserFilter

    @action(detail=True, methods=['post'])
    def suspend(self, request, pk=None):
        user = self.get_object()
        serializer = SuspendSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            user = suspend_user(user, serializer.validated_data['duration'], request.user)
        except ValueError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(UserSerializer(user).data)

    @action(detail=True, methods=['post'])
    def unsuspend(self, request, pk=None):
        user = unsuspend_user(self.get_object(), request.user)
        return Response(UserSerializer(user).data)

    @action(detail=True, methods=['get'], url_path='balance-history')
    def balance_history(self, request, pk=None):
        """Transactions newest first, each with the balance right after it"""
        user = self.get_object()
        entries = balance_history(user)
        return Response({
            'user': str(user.id),
            'np_balance': user.np_balance,
            'history': BalanceEntrySerializer(entries, many=True).data,
        })

    @action(detail=True, methods=['post'], url_path='adjust-balance')
    def adjust_balance(self, request, pk=None):
        user = self.get_object()
        serializer = AdjustBalanceSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            record = adjust_balance(
                user,
                serializer.validated_data['kind'],
                serializer.validated_data['amount'],
                request.user
            )
        except InvalidAdjustment as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        user.refresh_from_db(fields=['np_balance'])
        return Response({
            'transaction': TransactionSerializer(record).data,
            'np_balance': user.np_balance,
        }, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=['post'], url_path='admin-role', permission_classes=[IsSuperAdmin])
    def admin_role(self, request, pk=None):
        user = self.get_object()
        serializer = AdminRoleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        make_admin = serializer.validated_data['is_admin']

        try:
            set_admin_role(user, make_admin, request.user)
        except AdminRoleError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

        return Response(UserSerializer(user).data)


# Reports

class ReportViewSet(viewsets.ReadOnlyModelViewSet):
    """Open reports and their verdicts"""
    queryset = Report.objects.all()
    serializer_class = ReportSerializer
    filterset_class = ReportFilter

    @action(detail=True, methods=['post'])
    def innocent(self, request, pk=None):
        try:
            mark_innocent(pk, request.user)
        except ReportAlreadyProcessed as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
        return Response({'status': 'innocent'})

    @action(detail=True, methods=['post'])
    def guilty(self, request, pk=None):
        serializer = VerdictSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            guilty = mark_guilty(pk, serializer.validated_data['duration'], request.user)
        except ReportAlreadyProcessed as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(GuiltyReportSerializer(guilty).data)


class GuiltyReportViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = GuiltyReport.objects.all()
    serializer_class = GuiltyReportSerializer
    filterset_fields = ['report_type', 'suspension']


# Songs

class SongViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = Song.objects.select_related('owner')
    serializer_class = SongSerializer
    filterset_class = SongFilter

    @action(detail=True, methods=['post'])
    def transition(self, request, pk=None):
        """Apply a lifecycle action: approve, reject, pause, resume, delete, restore, purge"""
        song = self.get_object()
        song_action = request.data.get('action', '')

        try:
            new_status = transition_song(song, song_action, request.user)
        except lifecycle.InvalidSongTransition as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        if new_status == lifecycle.PURGED:
            return Response({'id': pk, 'status': new_status})

        song.refresh_from_db()
        return Response(SongSerializer(song).data)
