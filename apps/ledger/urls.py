# apps/ledger/urls.py

from django.urls import path
from . import views

urlpatterns = [
    path('', views.np_console, name='np_console'),
    path('<uuid:user_id>/adjust/', views.np_adjust, name='np_adjust'),
]
