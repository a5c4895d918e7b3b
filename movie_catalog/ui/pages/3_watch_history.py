"""
Watch history page - track what you plan to watch, are watching, and finished.
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[3]))

from movie_catalog.ui.utils.api_client import (
    list_movies,
    list_watch_history,
    get_watch_stats,
    get_status_options,
    create_watch_entry,
    update_watch_entry,
    delete_watch_entry,
    change_status,
    error_message,
)
from movie_catalog.ui.utils.session_state import init_session_state, flash, show_flash, get_selected_movie_id
from movie_catalog.ui.components.watch_entry_form import render_watch_entry_form

init_session_state()
st.title("📺 Watch History")
show_flash()

try:
    movies = list_movies()
    entries = list_watch_history()
    stats = get_watch_stats()
    status_options = get_status_options()
except Exception as e:
    st.error(f"Failed to load watch history: {error_message(e)}")
    st.stop()

# Stats are keyed by internal token; show them under display labels
cols = st.columns(len(status_options))
for col, label in zip(cols, status_options):
    col.metric(label, stats.get(label.lower(), 0))

st.divider()

editing_id = st.session_state.get("editing_entry_id")

if not movies:
    st.info("Add a movie before tracking it.")
elif editing_id:
    entry = next((e for e in entries if e["id"] == editing_id), None)
    if entry is None:
        st.session_state["editing_entry_id"] = None
        st.rerun()
    form_data = render_watch_entry_form(movies, status_options, initial_data=entry, is_edit=True)
    if form_data:
        try:
            update_watch_entry(editing_id, **form_data)
            st.session_state["editing_entry_id"] = None
            flash(f"Watch entry for “{entry['movie_title']}” updated")
            st.rerun()
        except Exception as e:
            st.error(f"Failed to update entry: {error_message(e)}")
    if st.button("Cancel"):
        st.session_state["editing_entry_id"] = None
        st.rerun()
else:
    with st.expander("Add to watch history"):
        form_data = render_watch_entry_form(movies, status_options, selected_movie_id=get_selected_movie_id())
        if form_data:
            try:
                created = create_watch_entry(**form_data)
                flash(f"“{created['movie_title']}” added to watch history")
                st.rerun()
            except Exception as e:
                st.error(f"Failed to add entry: {error_message(e)}")

st.subheader(f"{len(entries)} entr{'y' if len(entries) == 1 else 'ies'}")

for entry in entries:
    col1, col2, col3, col4 = st.columns([4, 2, 1, 1])
    with col1:
        st.markdown(f"**{entry['movie_title']}** · {entry['status']}")
        dates = f"Added {entry['added_date']}"
        if entry.get("completed_date"):
            dates += f" · Finished {entry['completed_date']}"
        st.caption(dates)
    with col2:
        if entry["status"] == "Watching":
            target = st.selectbox(
                "Move to",
                options=[s for s in status_options if s != "Watching"],
                key=f"move_{entry['id']}",
                label_visibility="collapsed",
            )
            if st.button("Move", key=f"change_{entry['id']}"):
                try:
                    change_status(entry["movie_id"], target)
                    flash(f"“{entry['movie_title']}” moved to {target}")
                except Exception as e:
                    flash(error_message(e), kind="error")
                st.rerun()
    with col3:
        if st.button("Edit", key=f"edit_entry_{entry['id']}"):
            st.session_state["editing_entry_id"] = entry["id"]
            st.rerun()
    with col4:
        if st.button("Delete", key=f"delete_entry_{entry['id']}"):
            delete_watch_entry(entry["id"])
            flash(f"Watch entry for “{entry['movie_title']}” deleted")
            st.rerun()
