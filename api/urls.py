# api/urls.py

from django.urls import path, include
from rest_framework.routers import DefaultRouter
from rest_framework_simplejwt.views import (
    TokenObtainPairView,
    TokenRefreshView,
)

from .views import (
    UserViewSet,
    ReportViewSet,
    GuiltyReportViewSet,
    SongViewSet,
)

router = DefaultRouter()
router.register('users', UserViewSet, basename='user')
router.register('reports', ReportViewSet, basename='report')
router.register('guilty-reports', GuiltyReportViewSet, basename='guilty-report')
router.register('songs', SongViewSet, basename='song')

urlpatterns = [
    # JWT Authentication
    path('auth/token/', TokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('auth/token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),

    path('', include(router.urls)),
]
