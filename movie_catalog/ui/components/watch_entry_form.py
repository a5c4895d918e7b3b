"""
Watch history create/edit form component.
"""

from datetime import date

import streamlit as st


def status_picker_options(status_options: list[str], current_status: str | None) -> list[str]:
    """Status choices for the picker, keeping a non-standard current status selectable."""
    if current_status and current_status not in status_options:
        return [current_status] + list(status_options)
    return list(status_options)


def render_watch_entry_form(
    movies: list[dict],
    status_options: list[str],
    initial_data: dict | None = None,
    is_edit: bool = False,
    selected_movie_id: int | None = None,
) -> dict | None:
    """
    Render the watch history form.

    Args:
        movies: Movies offered in the picker
        status_options: Display labels for the status picker
        initial_data: Pre-fill form with this entry
        is_edit: If True, show "Update Entry" button; else "Add to History"
        selected_movie_id: Movie to preselect for a new entry

    Returns:
        Form data dict if submitted, else None.
    """
    data = initial_data or {}
    movie_ids = [m["id"] for m in movies]
    titles = {m["id"]: m["title"] for m in movies}
    current_movie = data.get("movie_id", selected_movie_id)
    current_status = data.get("status", status_options[0])
    completed = data.get("completed_date")
    unknown_status = current_status not in status_options
    status_options = status_picker_options(status_options, current_status)

    with st.form("watch_entry_form"):
        st.subheader("Edit watch entry" if is_edit else "Add to watch history")
        if unknown_status:
            st.warning(f"Current status '{current_status}' is not one of the standard statuses.")
        movie_id = st.selectbox(
            "Movie",
            options=movie_ids,
            index=movie_ids.index(current_movie) if current_movie in movie_ids else 0,
            format_func=lambda mid: titles.get(mid, f"Movie #{mid}"),
        )
        status = st.selectbox(
            "Status",
            options=status_options,
            index=status_options.index(current_status) if current_status in status_options else 0,
        )
        added_date = st.date_input(
            "Added on",
            value=date.fromisoformat(data["added_date"]) if data.get("added_date") else date.today(),
        )
        has_completed = st.checkbox("Finished", value=completed is not None)
        completed_date = st.date_input(
            "Finished on",
            value=date.fromisoformat(completed) if completed else date.today(),
        )
        submitted = st.form_submit_button("Update Entry" if is_edit else "Add to History")
        if submitted:
            return {
                "movie_id": movie_id,
                "status": status,
                "added_date": added_date,
                "completed_date": completed_date if has_completed else None,
            }
    return None
