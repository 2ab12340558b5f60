"""
Tests for the Streamlit session helpers (Streamlit's state replaced by a dict).
"""

from types import SimpleNamespace
from unittest.mock import patch

import pytest

from cinepick.ui.utils import session_state


@pytest.fixture
def state():
    fake_st = SimpleNamespace(session_state={})
    with patch.object(session_state, "st", fake_st):
        session_state.init_session_state()
        yield fake_st.session_state


class TestSessionState:
    """Tests for user and recently-viewed tracking."""

    def test_init(self, state):
        assert state == {"user_id": None, "user_data": None, "recently_viewed": []}

    def test_set_and_clear_user(self, state):
        session_state.set_current_user(5, {"email": "x@y.z"})
        session_state.mark_viewed(1)
        assert session_state.get_current_user_id() == 5

        session_state.clear_current_user()
        assert session_state.get_current_user_id() is None
        assert session_state.get_recently_viewed() == []

    def test_mark_viewed_most_recent_first(self, state):
        for movie_id in (1, 2, 3, 1):
            session_state.mark_viewed(movie_id)
        assert session_state.get_recently_viewed() == [1, 3, 2]

    def test_recently_viewed_capped(self, state):
        for movie_id in range(15):
            session_state.mark_viewed(movie_id)
        viewed = session_state.get_recently_viewed()
        assert len(viewed) == session_state.MAX_RECENTLY_VIEWED
        assert viewed[0] == 14
