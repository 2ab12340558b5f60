"""
User registration / preferences form component.
"""

import streamlit as st


def render_user_form(
    genres: list[str],
    initial_data: dict | None = None,
    is_edit: bool = False,
) -> dict | None:
    """
    Render user registration or edit form.

    Args:
        genres: Genres the user can pick as preferences
        initial_data: Pre-fill form with this data (email, name, preferred_genres)
        is_edit: If True, show "Update Profile" button; else "Create Profile"

    Returns:
        Form data dict if submitted, else None.
    """
    initial_data = initial_data or {}
    default_prefs = [g for g in initial_data.get("preferred_genres", []) if g in genres]

    with st.form("user_profile_form"):
        st.subheader("Update your profile" if is_edit else "Create your profile")
        email = st.text_input("Email", value=initial_data.get("email", ""), max_chars=255)
        name = st.text_input(
            "Name",
            value=initial_data.get("name") or "",
            placeholder="Your display name",
            max_chars=100,
        )
        preferred = st.multiselect("Favorite genres", options=genres, default=default_prefs)
        submitted = st.form_submit_button("Update Profile" if is_edit else "Create Profile")
        if submitted:
            return {
                "email": email.strip(),
                "name": name.strip() or None,
                "preferred_genres": preferred,
            }
    return None
