# utils/storage.py

import logging
import re
from urllib.parse import unquote, urlparse

from django.conf import settings
from django.core.files.storage import default_storage

logger = logging.getLogger('nada')

DOWNLOAD_URL_PATTERN = re.compile(r'/o/(.+)\?alt=media')


def storage_path_from_url(url):
    """
    Object path inside a public download URL

    'https://host/v0/b/bucket/o/songs%2Fa.mp3?alt=media&token=x' -> 'songs/a.mp3'
    Returns None when the URL is not a download URL.
    """
    if not url:
        return None
    match = DOWNLOAD_URL_PATTERN.search(unquote(url))
    return match.group(1) if match else None


def _media_path_from_url(url):
    path = unquote(urlparse(url).path)
    if settings.MEDIA_URL and path.startswith(settings.MEDIA_URL):
        return path[len(settings.MEDIA_URL):]
    return None


def delete_stored_file(url):
    """
    Remove the blob behind a URL, best-effort

    Returns True when a file was deleted. Failures are logged, never raised.
    """
    path = storage_path_from_url(url) or _media_path_from_url(url or '')
    if not path:
        logger.warning(f"No storage path in URL: {url}")
        return False

    try:
        if not default_storage.exists(path):
            return False
        default_storage.delete(path)
        return True
    except Exception:
        logger.warning(f"Could not delete stored file {path}", exc_info=True)
        return False


def delete_stored_files(urls):
    """Best-effort delete of several blobs; returns how many were removed"""
    return sum(1 for url in urls if url and delete_stored_file(url))
