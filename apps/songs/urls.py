# apps/songs/urls.py

from django.urls import path
from . import views

urlpatterns = [
    path('', views.song_list, name='song_list'),
    path('<uuid:song_id>/<str:action>/', views.song_action, name='song_action'),
]
