"""
Streamlit main app for the Movie Catalog.

Run: streamlit run movie_catalog/ui/app.py --server.port 8501
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from movie_catalog.ui.utils.api_client import (
    health_check,
    get_home,
    list_genres,
    delete_movie,
    quick_add,
    error_message,
)
from movie_catalog.ui.utils.session_state import init_session_state, flash, show_flash, select_movie
from movie_catalog.ui.components.movie_card import render_movie_card

st.set_page_config(
    page_title="Movie Catalog",
    page_icon="🎬",
    layout="wide",
    initial_sidebar_state="expanded",
)

init_session_state()

st.title("🎬 Movie Catalog")
st.markdown("Keep track of the movies you plan to watch, are watching, and have seen.")

try:
    health = health_check()
    if health.get("status") != "healthy":
        st.warning("API may not be fully ready")
except Exception as e:
    st.error(f"API not available: {e}")
    st.info("Start the API with: uvicorn movie_catalog.api.main:app --host 0.0.0.0 --port 8000")
    st.stop()

show_flash()


def edit_movie(movie: dict) -> None:
    st.session_state["editing_movie_id"] = movie["id"]
    st.switch_page("pages/1_movies.py")


def review_movie(movie: dict) -> None:
    select_movie(movie["id"])
    st.switch_page("pages/2_reviews.py")


def plan_movie(movie: dict) -> None:
    try:
        quick_add(movie["id"])
        flash(f"“{movie['title']}” added to your planned list")
    except Exception as e:
        flash(error_message(e), kind="error")
    st.rerun()


def remove_movie(movie: dict) -> None:
    try:
        delete_movie(movie["id"])
        flash(f"“{movie['title']}” deleted")
    except Exception as e:
        flash(error_message(e), kind="error")
    st.rerun()


col1, col2 = st.columns([2, 1])
with col1:
    query = st.text_input("Search by title", placeholder="e.g. matrix")
with col2:
    genre_choice = st.selectbox("Genre", options=["All genres"] + list_genres())

genre = None if genre_choice == "All genres" else genre_choice

try:
    home = get_home(query=query or None, genre=genre)
except Exception as e:
    st.error(f"Failed to load movies: {error_message(e)}")
    st.stop()

m1, m2, m3, m4 = st.columns(4)
m1.metric("Movies", home["movie_count"])
m2.metric("Completed", home["completed_count"])
m3.metric("Watching", home["watching_count"])
m4.metric("Planned", home["planned_count"])

st.divider()

if home["movies"]:
    for movie in home["movies"]:
        render_movie_card(movie, actions={
            "Edit": edit_movie,
            "Review": review_movie,
            "Plan to watch": plan_movie,
            "Delete": remove_movie,
        })
elif home.get("search_query") or home.get("selected_genre"):
    st.info("No movies match your search.")
else:
    st.info("The catalog is empty.")
    if st.button("Add a movie"):
        st.switch_page("pages/1_movies.py")
