"""
Movies page - add and edit catalog entries.
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[3]))

from movie_catalog.ui.utils.api_client import create_movie, get_movie, update_movie, error_message
from movie_catalog.ui.utils.session_state import init_session_state, flash, show_flash
from movie_catalog.ui.components.movie_form import render_movie_form

init_session_state()
st.title("🎞️ Movies")
show_flash()

movie_id = st.session_state.get("editing_movie_id")

if movie_id:
    try:
        movie = get_movie(movie_id)
    except Exception as e:
        st.error(f"Movie not found: {error_message(e)}")
        st.session_state["editing_movie_id"] = None
        st.stop()

    form_data = render_movie_form(initial_data=movie, is_edit=True)
    if form_data:
        try:
            updated = update_movie(movie_id, form_data)
            st.session_state["editing_movie_id"] = None
            flash(f"“{updated['title']}” updated")
            st.switch_page("app.py")
        except Exception as e:
            st.error(f"Failed to update movie: {error_message(e)}")
    if st.button("Cancel"):
        st.session_state["editing_movie_id"] = None
        st.rerun()
else:
    form_data = render_movie_form()
    if form_data:
        try:
            created = create_movie(form_data)
            flash(f"“{created['title']}” added")
            st.switch_page("app.py")
        except Exception as e:
            st.error(f"Failed to add movie: {error_message(e)}")
