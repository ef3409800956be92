"""
Streamlit adapters for the router and session store.

Streamlit owns the URL path, so the tab path rides in the "tab" query
parameter. A browser reload starts a fresh Streamlit session, so tab
state is kept in a server-side cache keyed by a session token that also
lives in the URL ("sid").

Every new Streamlit session mints its own token and starts from a copy
of the slots stored under the token it arrived with. A reload therefore
keeps the tabs, and two browser tabs opened from the same URL never
write into each other's slots. The cache is bounded in size and age;
an evicted session simply starts empty on its next reload.
"""

import uuid
from typing import Optional

import streamlit as st


TAB_PARAM = "tab"
SESSION_PARAM = "sid"

# Seconds a session's slots survive in the cache, and how many are kept
SESSION_TTL = 6 * 60 * 60
MAX_SESSIONS = 1000


@st.cache_resource(ttl=SESSION_TTL, max_entries=MAX_SESSIONS, show_spinner=False)
def _session_slots(session_id: str) -> dict[str, str]:
    """Slots for one session token, shared across reruns of this process."""
    return {}


class StreamlitSessionStore:
    """SessionStore backed by the server-side cache, scoped by the sid token."""

    def __init__(self, session_param: str = SESSION_PARAM):
        self.session_param = session_param
        self.previous_session_id = st.query_params.get(session_param) or None
        self.session_id = uuid.uuid4().hex

        slots = _session_slots(self.session_id)
        if self.previous_session_id:
            slots.update(_session_slots(self.previous_session_id))
        st.query_params[session_param] = self.session_id

    def read(self, name: str) -> Optional[str]:
        return _session_slots(self.session_id).get(name)

    def write(self, name: str, value: str) -> None:
        _session_slots(self.session_id)[name] = value


class QueryParamsRouter:
    """Router that maps "/classroom/5a" to ?tab=classroom/5a."""

    def __init__(self, param: str = TAB_PARAM):
        self.param = param

    def current_path_segments(self) -> list[str]:
        path = st.query_params.get(self.param, "")
        return [s for s in path.split('/') if s]

    def push_path(self, path: str) -> None:
        value = path.strip('/')
        if value:
            st.query_params[self.param] = value
        elif self.param in st.query_params:
            del st.query_params[self.param]
