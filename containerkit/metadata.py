"""Version, session identity and the labels put on managed resources."""

from __future__ import annotations

import threading
import uuid

VERSION = "0.20.0"

LABEL_BASE = "org.testcontainers"
LABEL_LANG = LABEL_BASE + ".lang"
LABEL_REAPER = LABEL_BASE + ".reaper"
LABEL_SESSION_ID = LABEL_BASE + ".sessionId"
LABEL_VERSION = LABEL_BASE + ".version"

_LANGUAGE = "python"

_session_lock = threading.Lock()
_session: uuid.UUID | None = None


def session_id() -> uuid.UUID:
    """Return the random identifier of this process's session, created once."""
    global _session
    with _session_lock:
        if _session is None:
            _session = uuid.uuid4()
        return _session


def session_id_string() -> str:
    """Return the session identifier in its canonical text form."""
    return str(session_id())


def default_labels() -> dict[str, str]:
    """Return a fresh mapping of the labels attached to every resource."""
    return {
        LABEL_BASE: "true",
        LABEL_LANG: _LANGUAGE,
        LABEL_VERSION: VERSION,
        LABEL_SESSION_ID: session_id_string(),
    }