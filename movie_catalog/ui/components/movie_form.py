"""
Movie create/edit form component.
"""

import streamlit as st


def render_movie_form(initial_data: dict | None = None, is_edit: bool = False) -> dict | None:
    """
    Render the movie form.

    Args:
        initial_data: Pre-fill form with this movie
        is_edit: If True, show "Update Movie" button; else "Add Movie"

    Returns:
        Form data dict if submitted, else None.
    """
    data = initial_data or {}

    with st.form("movie_form"):
        st.subheader("Edit movie" if is_edit else "Add a movie")
        title = st.text_input("Title", value=data.get("title", ""), max_chars=200)
        release_year = st.number_input(
            "Release year",
            min_value=1800,
            max_value=2026,
            value=data.get("release_year", 2000),
        )
        description = st.text_area("Description", value=data.get("description") or "", max_chars=1000)
        has_rating = st.checkbox("Rated", value=data.get("rating") is not None)
        rating = st.slider("Rating", min_value=1.0, max_value=10.0, value=float(data.get("rating") or 7.0), step=0.1)
        duration = st.number_input(
            "Duration (minutes, 0 if unknown)",
            min_value=0,
            value=data.get("duration_minutes") or 0,
        )
        genre = st.text_input(
            "Genres",
            value=data.get("genre") or "",
            placeholder="e.g. Drama, Sci-Fi",
            max_chars=100,
        )
        submitted = st.form_submit_button("Update Movie" if is_edit else "Add Movie")
        if submitted:
            if not title.strip():
                st.error("Title is required")
                return None
            return {
                "title": title.strip(),
                "release_year": int(release_year),
                "description": description.strip() or None,
                "rating": rating if has_rating else None,
                "duration_minutes": int(duration) or None,
                "genre": genre.strip() or None,
            }
    return None
