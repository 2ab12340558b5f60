"""
Movie display card component.
"""

import streamlit as st


def render_movie_card(
    movie: dict,
    key_prefix: str,
    user_rating: int | None = None,
    on_rate: callable = None,
    on_watchlist: callable = None,
    on_select: callable = None,
) -> None:
    """
    Render a movie card with optional rating, watchlist and details actions.

    Args:
        movie: Movie or recommendation item dict (movie_id, title, genres, rating, ...)
        key_prefix: Unique prefix for widget keys (a movie can appear in several lists)
        user_rating: User's existing rating, if any
        on_rate: Callback(user_id, movie_id, rating) when user rates
        on_watchlist: Callback(movie_id) for "Add to watchlist"
        on_select: Callback(movie_id) for "Because you watched this"
    """
    movie_id = movie["movie_id"]
    with st.container(border=True):
        if movie.get("image_url"):
            st.image(movie["image_url"], use_container_width=True)
        st.markdown(f"**{movie['title']}**")
        st.caption(f"{', '.join(movie.get('genres', []))} | ★ {movie.get('rating', 0):.1f}")
        if movie.get("description"):
            st.write(movie["description"])
        if movie.get("score") is not None:
            st.caption(f"Match score: {movie['score']:.2f}")

        if on_rate:
            from cinepick.ui.components.rating_widget import render_rating_widget
            render_rating_widget(movie_id, on_rate, current_rating=user_rating, key_prefix=key_prefix)

        col1, col2 = st.columns(2)
        with col1:
            if on_watchlist and st.button("➕ Watchlist", key=f"{key_prefix}_wl_{movie_id}"):
                on_watchlist(movie_id)
        with col2:
            if on_select and st.button("More like this", key=f"{key_prefix}_sel_{movie_id}"):
                on_select(movie_id)


def render_movie_grid(movies: list[dict], key_prefix: str, columns: int = 3, **card_kwargs) -> None:
    """Render movies as a grid of cards."""
    ratings = card_kwargs.pop("ratings", {})
    cols = st.columns(columns)
    for i, movie in enumerate(movies):
        with cols[i % columns]:
            render_movie_card(
                movie,
                key_prefix=key_prefix,
                user_rating=ratings.get(movie["movie_id"]),
                **card_kwargs,
            )
