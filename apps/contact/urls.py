# apps/contact/urls.py

from django.urls import path
from . import views

urlpatterns = [
    path('', views.message_list, name='contact_list'),
    path('<uuid:message_id>/resolve/', views.message_resolve, name='contact_resolve'),
    path('<uuid:message_id>/delete/', views.message_delete, name='contact_delete'),
]
