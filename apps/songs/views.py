# apps/songs/views.py

import logging

from django.shortcuts import render, redirect, get_object_or_404
from django.contrib import messages
from django.views.decorators.http import require_POST
from django.core.paginator import Paginator
from django.conf import settings
from django.db import DatabaseError

from algorithms import song_lifecycle as lifecycle
from utils.decorators import admin_required
from .models import Song
from .utils import songs_by_status, status_counts, transition_song

logger = logging.getLogger('nada')


@admin_required
def song_list(request):
    """Songs grouped by lifecycle status"""
    status = request.GET.get('status', lifecycle.PENDING)
    if status not in lifecycle.STATUSES:
        status = lifecycle.PENDING
    genre = request.GET.get('genre', '')
    search = request.GET.get('q', '').strip()

    songs = songs_by_status(status, genre=genre, search=search)
    paginator = Paginator(songs, settings.NADA_SETTINGS['ITEMS_PER_PAGE'])

    context = {
        'songs': paginator.get_page(request.GET.get('page')),
        'status': status,
        'statuses': lifecycle.STATUSES,
        'genre': genre,
        'genres': Song.GENRES,
        'search': search,
        'counts': status_counts(),
    }
    return render(request, 'songs/song_list.html', context)


@admin_required
@require_POST
def song_action(request, song_id, action):
    song = get_object_or_404(Song, id=song_id)
    title = song.title

    try:
        new_status = transition_song(song, action, request.admin_session.user)
    except lifecycle.InvalidSongTransition as e:
        messages.error(request, str(e))
    except DatabaseError:
        logger.exception(f"Song {song_id} {action} failed")
        messages.error(request, 'Something went wrong. Please try again.')
    else:
        if new_status == lifecycle.PURGED:
            messages.success(request, f'"{title}" permanently deleted.')
        else:
            messages.success(request, f'"{title}" is now {new_status}.')

    return redirect(request.POST.get('next') or 'song_list')
