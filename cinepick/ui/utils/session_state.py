"""
Session state helpers for Streamlit.
"""

import streamlit as st

MAX_RECENTLY_VIEWED = 10


def get_current_user_id() -> int | None:
    """Get current user ID from session state."""
    return st.session_state.get("user_id")


def set_current_user(user_id: int, user_data: dict | None = None) -> None:
    """Set current user in session state."""
    st.session_state["user_id"] = user_id
    if user_data:
        st.session_state["user_data"] = user_data


def clear_current_user() -> None:
    """Sign out: clear the user and everything derived from them."""
    for key in ("user_id", "user_data", "recently_viewed"):
        if key in st.session_state:
            del st.session_state[key]


def get_recently_viewed() -> list[int]:
    """Movie IDs opened in this session, most recent first."""
    return list(st.session_state.get("recently_viewed", []))


def mark_viewed(movie_id: int) -> None:
    """Record that the user opened a movie's details."""
    viewed = [m for m in get_recently_viewed() if m != movie_id]
    st.session_state["recently_viewed"] = [movie_id] + viewed[:MAX_RECENTLY_VIEWED - 1]


def init_session_state() -> None:
    """Initialize session state keys if not present."""
    if "user_id" not in st.session_state:
        st.session_state["user_id"] = None
    if "user_data" not in st.session_state:
        st.session_state["user_data"] = None
    if "recently_viewed" not in st.session_state:
        st.session_state["recently_viewed"] = []
