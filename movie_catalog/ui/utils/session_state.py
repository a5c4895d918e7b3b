"""
Session state helpers for Streamlit.

Flash messages survive one st.rerun() so that an action can report its result
on the redrawn page.
"""

import streamlit as st


def init_session_state() -> None:
    """Initialize session state keys if not present."""
    if "flash" not in st.session_state:
        st.session_state["flash"] = None
    if "editing_movie_id" not in st.session_state:
        st.session_state["editing_movie_id"] = None
    if "editing_review_id" not in st.session_state:
        st.session_state["editing_review_id"] = None
    if "editing_entry_id" not in st.session_state:
        st.session_state["editing_entry_id"] = None
    if "selected_movie_id" not in st.session_state:
        st.session_state["selected_movie_id"] = None


def flash(message: str, kind: str = "success") -> None:
    """Queue a message for the next page render. kind is 'success' or 'error'."""
    st.session_state["flash"] = (kind, message)


def show_flash() -> None:
    """Render and clear the queued message, if any."""
    queued = st.session_state.get("flash")
    if not queued:
        return
    kind, message = queued
    if kind == "error":
        st.error(message)
    else:
        st.success(message)
    st.session_state["flash"] = None


def select_movie(movie_id: int | None) -> None:
    """Remember the movie a page should preselect in its forms."""
    st.session_state["selected_movie_id"] = movie_id


def get_selected_movie_id() -> int | None:
    return st.session_state.get("selected_movie_id")
