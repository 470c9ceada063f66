import threading
from typing import Callable

from models.session import PlotSession

_session_lock = threading.Lock()
_current_session = PlotSession()


def get_session() -> PlotSession:
    with _session_lock:
        return _current_session


def publish_session(session: PlotSession) -> PlotSession:
    """Swap in a fully built session; readers see either the old one or this one."""
    global _current_session
    with _session_lock:
        _current_session = session
    return session


def update_session(transition: Callable[[PlotSession], PlotSession]) -> PlotSession:
    """
    Read, transition and publish under one lock so concurrent updates cannot
    publish a session built from a stale one. If `transition` raises, the
    current session stays in place. `transition` must not touch the store.
    """
    global _current_session
    with _session_lock:
        _current_session = transition(_current_session)
        return _current_session


def reset_session() -> PlotSession:
    return publish_session(PlotSession())
