"""
Reviews page - list, write, edit, and delete reviews.
"""

from datetime import date

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[3]))

from movie_catalog.ui.utils.api_client import (
    list_movies,
    list_reviews,
    create_review,
    update_review,
    delete_review,
    error_message,
)
from movie_catalog.ui.utils.session_state import (
    init_session_state,
    flash,
    show_flash,
    get_selected_movie_id,
    select_movie,
)
from movie_catalog.ui.components.review_form import render_review_form

init_session_state()
st.title("📝 Reviews")
show_flash()

try:
    movies = list_movies()
except Exception as e:
    st.error(f"Failed to load movies: {error_message(e)}")
    st.stop()

if not movies:
    st.info("Add a movie before writing reviews.")
    st.stop()

titles = {m["id"]: m["title"] for m in movies}
filter_options = [None] + list(titles)
selected = get_selected_movie_id()
movie_filter = st.selectbox(
    "Show reviews for",
    options=filter_options,
    index=filter_options.index(selected) if selected in filter_options else 0,
    format_func=lambda mid: "All movies" if mid is None else titles.get(mid, f"Movie #{mid}"),
)

editing_id = st.session_state.get("editing_review_id")
reviews = list_reviews(movie_id=movie_filter)

if editing_id:
    review = next((r for r in reviews if r["id"] == editing_id), None)
    if review is None:
        st.session_state["editing_review_id"] = None
        st.rerun()
    form_data = render_review_form(movies, initial_data=review, is_edit=True)
    if form_data:
        try:
            update_review(editing_id, form_data["rating"], form_data["watch_date"], form_data["comment"])
            st.session_state["editing_review_id"] = None
            flash(f"Review for “{titles.get(review['movie_id'])}” updated")
            st.rerun()
        except Exception as e:
            st.error(f"Failed to update review: {error_message(e)}")
    if st.button("Cancel"):
        st.session_state["editing_review_id"] = None
        st.rerun()
else:
    form_data = render_review_form(movies, selected_movie_id=movie_filter)
    if form_data:
        try:
            create_review(
                form_data["movie_id"],
                form_data["rating"],
                form_data["watch_date"],
                form_data["comment"],
            )
            select_movie(movie_filter)
            flash(f"Review for “{titles.get(form_data['movie_id'])}” added")
            st.rerun()
        except Exception as e:
            st.error(f"Failed to add review: {error_message(e)}")

st.divider()
st.subheader(f"{len(reviews)} review(s)")

for r in reviews:
    col1, col2, col3 = st.columns([4, 1, 1])
    with col1:
        watched = date.fromisoformat(r["watch_date"]).strftime("%d %b %Y")
        st.markdown(f"**{titles.get(r['movie_id'], 'Unknown movie')}** · {r['rating']:.1f} ★ · {watched}")
        if r.get("comment"):
            st.caption(r["comment"])
    with col2:
        if st.button("Edit", key=f"edit_review_{r['id']}"):
            st.session_state["editing_review_id"] = r["id"]
            st.rerun()
    with col3:
        if st.button("Delete", key=f"delete_review_{r['id']}"):
            try:
                delete_review(r["id"])
                flash("Review deleted")
            except Exception as e:
                flash(error_message(e), kind="error")
            st.rerun()
