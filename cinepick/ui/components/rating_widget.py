"""
Star rating widget component.
"""

import streamlit as st


def render_rating_widget(
    movie_id: int,
    on_rate: callable,
    current_rating: int | None = None,
    key_prefix: str = "rate",
) -> None:
    """
    Render 5-star rating widget.

    Args:
        movie_id: Movie ID to rate
        on_rate: Callback(user_id, movie_id, rating) when user submits rating
        current_rating: User's existing rating (if any) to pre-fill; None shows "Rate me!"
        key_prefix: Prefix for widget keys
    """
    user_id = st.session_state.get("user_id")
    if not user_id:
        st.caption("Sign in to rate")
        return

    # 0 is the "Rate me!" placeholder
    options = [0, 1, 2, 3, 4, 5]

    def format_rating(x):
        return "Rate me!" if x == 0 else "★" * x

    default_index = current_rating if current_rating in options else 0

    rating = st.selectbox(
        "Your rating",
        options=options,
        index=default_index,
        format_func=format_rating,
        key=f"{key_prefix}_rate_{movie_id}",
    )
    if st.button("Submit", key=f"{key_prefix}_submit_rate_{movie_id}"):
        if rating == 0:
            st.error("Please select a rating (1-5)")
        else:
            try:
                on_rate(user_id, movie_id, int(rating))
                st.success("Rating saved!")
            except Exception as e:
                st.error(f"Failed to save rating: {e}")
