"""Lazy Firebase Admin SDK initialization shared by identity and storage."""

import logging
import threading

import firebase_admin
from firebase_admin import credentials

from omnicode.core.config import settings

logger = logging.getLogger(__name__)

_lock = threading.Lock()


def get_firebase_app() -> firebase_admin.App:
    """Return the default Firebase app, initializing it on first use.

    Uses the service account file from OMNICODE_FIREBASE_CREDENTIALS_PATH when
    set, application default credentials otherwise.
    """
    with _lock:
        try:
            return firebase_admin.get_app()
        except ValueError:
            pass

        if settings.firebase_credentials_path:
            cred = credentials.Certificate(settings.firebase_credentials_path)
        else:
            cred = credentials.ApplicationDefault()

        options = {}
        if settings.firebase_project_id:
            options["projectId"] = settings.firebase_project_id

        logger.info(f"Initializing Firebase app (project: {settings.firebase_project_id or 'default'})")
        return firebase_admin.initialize_app(cred, options or None)
