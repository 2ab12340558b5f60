"""
User profile page - registration, preferred genres, ratings and watchlist.
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[3]))

from cinepick.ui.utils.api_client import (
    create_user,
    get_user,
    get_user_ratings,
    get_watchlist,
    list_genres,
    remove_from_watchlist,
    set_preferences,
    update_user,
)
from cinepick.ui.utils.session_state import (
    clear_current_user,
    get_current_user_id,
    init_session_state,
    set_current_user,
)
from cinepick.ui.components.user_form import render_user_form

init_session_state()
st.title("📋 My Profile")

try:
    genres = list_genres()
except Exception as e:
    st.error(f"Failed to load genres: {e}")
    genres = []

user_id = get_current_user_id()
editing_profile = st.session_state.get("editing_profile", False)

if user_id:
    try:
        user = get_user(user_id)

        if editing_profile:
            form_data = render_user_form(genres, initial_data=user, is_edit=True)
            if form_data:
                try:
                    preferred = form_data.pop("preferred_genres")
                    updated = update_user(user_id, **form_data)
                    updated["preferred_genres"] = set_preferences(user_id, preferred)["genres"]
                    set_current_user(user_id, updated)
                    st.session_state["editing_profile"] = False
                    st.success("Profile updated!")
                    st.rerun()
                except Exception as e:
                    st.error(f"Failed to update profile: {e}")
            if st.button("Cancel"):
                st.session_state["editing_profile"] = False
                st.rerun()
        else:
            st.subheader(user.get("name") or user["email"])
            st.caption(user["email"])
            prefs = user.get("preferred_genres", [])
            st.markdown("**Favorite genres:** " + (", ".join(prefs) if prefs else "none yet"))

            col1, col2 = st.columns(2)
            with col1:
                if st.button("Edit Profile"):
                    st.session_state["editing_profile"] = True
                    st.rerun()
            with col2:
                if st.button("Sign out"):
                    clear_current_user()
                    st.rerun()

            ratings = get_user_ratings(user_id).get("ratings", [])
            st.subheader("My Ratings")
            if ratings:
                for r in ratings[:20]:
                    title = r.get("title") or f"Movie #{r['movie_id']}"
                    st.write(f"{title}: {'★' * r['rating']}")
                if len(ratings) > 20:
                    st.caption(f"... and {len(ratings) - 20} more")
            else:
                st.info("No ratings yet. Go to Recommendations to rate movies!")

            st.subheader("My Watchlist")
            watchlist = get_watchlist(user_id).get("movies", [])
            if watchlist:
                for m in watchlist:
                    c1, c2 = st.columns([4, 1])
                    c1.write(m["title"])
                    if c2.button("Remove", key=f"wl_remove_{m['movie_id']}"):
                        remove_from_watchlist(user_id, m["movie_id"])
                        st.rerun()
            else:
                st.info("Your watchlist is empty.")

            st.divider()
            if st.button("Go to Recommendations"):
                st.switch_page("pages/2_recommendations.py")
    except Exception as e:
        st.error(f"Failed to load profile: {e}")
        user_id = None

if not user_id:
    form_data = render_user_form(genres)
    if form_data:
        try:
            user = create_user(
                email=form_data["email"],
                name=form_data.get("name"),
                preferred_genres=form_data["preferred_genres"],
            )
            set_current_user(user["user_id"], user)
            st.success("Profile created! Redirecting to recommendations...")
            st.balloons()
            st.switch_page("pages/2_recommendations.py")
        except Exception as e:
            st.error(f"Failed to create profile: {e}")
