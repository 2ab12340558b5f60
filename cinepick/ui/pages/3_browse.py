"""
Browse page - search the catalog by text, genre and minimum rating.
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[3]))

from cinepick.ui.utils.api_client import add_rating, add_to_watchlist, list_genres, search_movies
from cinepick.ui.utils.session_state import get_current_user_id, init_session_state, mark_viewed
from cinepick.ui.components.movie_card import render_movie_grid

init_session_state()
st.title("🔍 Browse Movies")

user_id = get_current_user_id()

try:
    genre_options = list_genres()
except Exception as e:
    st.error(f"Failed to load genres: {e}")
    genre_options = []

col1, col2, col3 = st.columns([3, 2, 1])
with col1:
    query = st.text_input("Search", placeholder="Title or description")
with col2:
    genres = st.multiselect("Genres", options=genre_options)
with col3:
    min_rating = st.selectbox("Min ★", options=[None, 1, 2, 3, 4], format_func=lambda x: "Any" if x is None else f"{x}+")

try:
    results = search_movies(q=query or None, genres=genres, min_rating=min_rating)
    st.caption(f"{results['total']} movies")
    render_movie_grid(
        results["movies"],
        key_prefix="browse",
        on_rate=add_rating if user_id else None,
        on_watchlist=(lambda mid: add_to_watchlist(user_id, mid)) if user_id else None,
        on_select=mark_viewed,
    )
except Exception as e:
    st.error(f"Search failed: {e}")
