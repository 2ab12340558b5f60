"""
Recommendations page - Picked for You, Trending and Because You Watched.
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[3]))

from cinepick.ui.utils.api_client import (
    add_rating,
    add_to_watchlist,
    get_because_you_watched,
    get_movie,
    get_recommendations,
    get_trending,
    get_user_ratings,
)
from cinepick.ui.utils.session_state import (
    get_current_user_id,
    get_recently_viewed,
    init_session_state,
    mark_viewed,
)
from cinepick.ui.components.movie_card import render_movie_grid

init_session_state()

st.title("🎯 Recommendations")

user_id = get_current_user_id()

if not user_id:
    st.warning("Please create your profile first.")
    if st.button("Create Profile"):
        st.switch_page("pages/1_user_profile.py")
    st.stop()


def handle_rate(uid: int, mid: int, rating: int) -> None:
    """Callback when user submits a rating."""
    add_rating(uid, mid, rating)


def handle_watchlist(mid: int) -> None:
    add_to_watchlist(user_id, mid)
    st.toast("Added to watchlist")


def handle_select(mid: int) -> None:
    mark_viewed(mid)
    st.rerun()


try:
    ratings = {r["movie_id"]: r["rating"] for r in get_user_ratings(user_id).get("ratings", [])}
    card_kwargs = dict(
        ratings=ratings,
        on_rate=handle_rate,
        on_watchlist=handle_watchlist,
        on_select=handle_select,
    )

    st.subheader("✨ Picked for You")
    recs = get_recommendations(user_id, recently_viewed=get_recently_viewed())["recommendations"]
    if recs:
        render_movie_grid(recs, key_prefix="for_you", **card_kwargs)
    else:
        st.info("Nothing new to recommend. Try adjusting your favorite genres.")

    st.subheader("🔥 Trending Now")
    render_movie_grid(get_trending(user_id)["recommendations"], key_prefix="trending", **card_kwargs)

    viewed = get_recently_viewed()
    if viewed:
        st.subheader("⚡ Because You Watched")
        similar = get_because_you_watched(user_id, viewed[0])["recommendations"]
        render_movie_grid(similar, key_prefix="similar", **card_kwargs)

        st.subheader("🕒 Recently Viewed")
        recent = [get_movie(mid) for mid in viewed]
        render_movie_grid(recent, key_prefix="recent", **card_kwargs)
except Exception as e:
    st.error(f"Failed to load recommendations: {e}")
    st.info("Make sure the API is running: uvicorn cinepick.api.main:app --host 0.0.0.0 --port 8000")
