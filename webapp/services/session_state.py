"""
Session State

Tracks whether the visitor is logged in. The only signal is the presence of
the identity marker stored under the ``user`` key; its contents are not
checked here. An optional expiry and revalidation hook can retire a marker,
but by default a stored marker stays valid until logout.
"""

import threading
import time
import logging
from flask import session

logger = logging.getLogger(__name__)

SESSION_KEY = "user"
STORED_AT_KEY = "user_stored_at"


class MemorySessionSource:
    """In-process key/value session, used by tests and scripts."""

    def __init__(self, initial=None):
        self._data = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key, default=None):
        return self._data.get(key, default)

    def set(self, key, value):
        with self._lock:
            self._data[key] = value

    def delete(self, key):
        with self._lock:
            self._data.pop(key, None)


class FlaskSessionSource:
    """The signed-cookie session of the current Flask request."""

    def get(self, key, default=None):
        return session.get(key, default)

    def set(self, key, value):
        session[key] = value

    def delete(self, key):
        session.pop(key, None)


class SessionState:
    """
    Login state derived from the persisted identity marker.

    Args:
        source: Object with ``get``, ``set`` and ``delete`` for session keys
        max_age (int, optional): Seconds a marker stays valid; None or 0 disables expiry
        revalidate (callable, optional): Receives the raw marker, returns False to retire it
        clock (callable): Returns the current time in epoch seconds
    """

    def __init__(self, source, max_age=None, revalidate=None, clock=time.time):
        self.source = source
        self.max_age = max_age or None
        self.revalidate = revalidate
        self.clock = clock

    def read_identity(self):
        """
        Return the raw marker text, or None when logged out.

        A marker that fails the expiry or revalidation check is removed and
        reported as absent.
        """
        raw = self.source.get(SESSION_KEY)
        if raw is None:
            return None
        if not self._is_fresh(raw):
            self.clear()
            return None
        return raw

    def is_logged_in(self):
        return self.read_identity() is not None

    def store(self, identity):
        """Overwrite the marker with a serialized identity."""
        self.source.set(SESSION_KEY, identity.to_json())
        self.source.set(STORED_AT_KEY, self.clock())
        logger.info(f"Stored session identity for {identity.email}")

    def clear(self):
        """Remove the marker. Safe to call when already logged out."""
        self.source.delete(SESSION_KEY)
        self.source.delete(STORED_AT_KEY)

    def _is_fresh(self, raw):
        if self.max_age:
            stored_at = self.source.get(STORED_AT_KEY)
            if isinstance(stored_at, bool) or not isinstance(stored_at, (int, float)):
                logger.info("Session marker has no usable timestamp, treating it as expired")
                return False
            if self.clock() - stored_at > self.max_age:
                logger.info("Session marker expired")
                return False

        if self.revalidate is not None:
            try:
                valid = self.revalidate(raw)
            except Exception as e:
                logger.warning(f"Session revalidation failed: {e}")
                return False
            if not valid:
                logger.info("Session marker rejected by revalidation")
                return False

        return True
