"""
Movie display card component.
"""

import streamlit as st


def split_genres(genre: str | None) -> list[str]:
    """Comma-separated genre column to a list of trimmed tags."""
    if not genre:
        return []
    return [g.strip() for g in genre.split(",") if g.strip()]


def render_movie_card(movie: dict, actions: dict | None = None) -> None:
    """
    Render a movie card with optional action buttons.

    Args:
        movie: Movie as returned by the API
        actions: Button label -> callback(movie) shown beside the card
    """
    with st.container():
        col1, col2 = st.columns([3, 1])
        with col1:
            st.markdown(f"**{movie['title']}** ({movie['release_year']})")
            meta = []
            if movie.get("genre"):
                meta.append(", ".join(split_genres(movie["genre"])))
            if movie.get("duration_minutes"):
                meta.append(f"{movie['duration_minutes']} min")
            if movie.get("rating") is not None:
                meta.append(f"★ {movie['rating']:.1f}")
            if meta:
                st.caption(" | ".join(meta))
            if movie.get("description"):
                text = movie["description"]
                st.write(text if len(text) <= 200 else text[:200] + "...")
        with col2:
            for label, callback in (actions or {}).items():
                if st.button(label, key=f"{label}_{movie['id']}", use_container_width=True):
                    callback(movie)
        st.divider()
