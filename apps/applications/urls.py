# apps/applications/urls.py

from django.urls import path
from . import views

urlpatterns = [
    path('', views.application_list, name='application_list'),
    path('<uuid:application_id>/<str:action>/', views.application_action, name='application_action'),
]
