# apps/accounts/urls.py

from django.urls import path
from . import views

urlpatterns = [
    path('', views.user_list, name='user_list'),
    path('<uuid:user_id>/suspend/', views.user_suspend, name='user_suspend'),
    path('<uuid:user_id>/unsuspend/', views.user_unsuspend, name='user_unsuspend'),
    path('<uuid:user_id>/level/', views.user_change_level, name='user_change_level'),
    path('<uuid:user_id>/admin/', views.user_toggle_admin, name='user_toggle_admin'),
]
