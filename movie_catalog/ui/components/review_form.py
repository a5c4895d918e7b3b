"""
Review create/edit form component.
"""

from datetime import date

import streamlit as st


def render_review_form(
    movies: list[dict],
    initial_data: dict | None = None,
    is_edit: bool = False,
    selected_movie_id: int | None = None,
) -> dict | None:
    """
    Render the review form.

    Args:
        movies: Movies offered in the picker (ignored when editing)
        initial_data: Pre-fill form with this review
        is_edit: If True the movie is fixed and the button reads "Update Review"
        selected_movie_id: Movie to preselect for a new review

    Returns:
        Form data dict if submitted, else None.
    """
    data = initial_data or {}
    movie_ids = [m["id"] for m in movies]
    titles = {m["id"]: m["title"] for m in movies}

    with st.form("review_form"):
        st.subheader("Edit review" if is_edit else "Write a review")
        movie_id = data.get("movie_id")
        if not is_edit:
            default = movie_ids.index(selected_movie_id) if selected_movie_id in movie_ids else 0
            movie_id = st.selectbox(
                "Movie",
                options=movie_ids,
                index=default,
                format_func=lambda mid: titles.get(mid, f"Movie #{mid}"),
            )
        rating = st.slider("Rating", min_value=1.0, max_value=10.0, value=float(data.get("rating", 7.0)), step=0.5)
        watch_date = st.date_input("Watched on", value=date.fromisoformat(data["watch_date"]) if data.get("watch_date") else date.today())
        comment = st.text_area("Comment", value=data.get("comment") or "", max_chars=1000)
        submitted = st.form_submit_button("Update Review" if is_edit else "Add Review")
        if submitted:
            return {
                "movie_id": movie_id,
                "rating": rating,
                "watch_date": watch_date,
                "comment": comment.strip() or None,
            }
    return None
