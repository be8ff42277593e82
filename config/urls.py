# config/urls.py

from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from django.views.generic import RedirectView

from apps.accounts.views import AdminLoginView, logout_view

urlpatterns = [
    # Django admin
    path('django-admin/', admin.site.urls),

    # Home
    path('', RedirectView.as_view(pattern_name='admin_dashboard', permanent=False), name='home'),

    # Authentication
    path('console/login/', AdminLoginView.as_view(), name='console_login'),
    path('console/logout/', logout_view, name='console_logout'),

    # Console sections
    path('console/', include('apps.admin_dashboard.urls')),
    path('console/users/', include('apps.accounts.urls')),
    path('console/reports/', include('apps.reports.urls')),
    path('console/songs/', include('apps.songs.urls')),
    path('console/np/', include('apps.ledger.urls')),
    path('console/applications/', include('apps.applications.urls')),
    path('console/contact/', include('apps.contact.urls')),

    # API URLs
    path('api/v1/', include('api.urls')),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
