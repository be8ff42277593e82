# apps/reports/urls.py
from django.urls import path
from . import views

urlpatterns = [
    path('', views.report_list, name='report_list'),
    path('<uuid:report_id>/innocent/', views.report_innocent, name='report_innocent'),
    path('<uuid:report_id>/guilty/', views.report_guilty, name='report_guilty'),

    # Guilty set
    path('guilty/', views.guilty_list, name='guilty_list'),
    path('guilty/<uuid:guilty_id>/delete/', views.guilty_delete, name='guilty_delete'),
    path('guilty/users/<uuid:user_id>/unban/', views.guilty_unban, name='guilty_unban'),
    path('guilty/users/<uuid:user_id>/permanent/', views.guilty_ban_permanently, name='guilty_ban_permanently'),
]
