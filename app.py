"""Streamlit UI for roommate_match with previews and validation."""
from __future__ import annotations

# Add src to sys.path so roommate_match can be found without installing
import sys
import os
import io
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

import pandas as pd
import streamlit as st
import streamlit.components.v1 as components

from roommate_match.csv_loader import parse_lines, read_lines
from roommate_match.errors import InputError, ParseErrors
from roommate_match.mind_map import generate_preference_mind_map
from roommate_match.report import matches_frame, render_outcome, summarize, unmatched_frame
from roommate_match.solver import match_roommates

# -----------------------------
# Helpers
# -----------------------------

def uploadedfile_to_lines(uploaded_file) -> list[str]:
    """Read a Streamlit UploadedFile or file-like object into raw lines."""
    uploaded_file.seek(0)
    return read_lines(io.BytesIO(uploaded_file.read()))


def records_to_df(records) -> pd.DataFrame:
    """Tabulate parsed people, one column per preference rank."""
    width = max((len(r.preferences) for r in records), default=0)
    rows = []
    for r in records:
        row = {"name": r.name}
        for i in range(width):
            row[f"choice {i + 1}"] = r.choice(i) or ""
        rows.append(row)
    return pd.DataFrame(rows)


def show_input_error(e: InputError) -> None:
    if isinstance(e, ParseErrors):
        st.error("Input validation error: " + "; ".join(str(err) for err in e.errors))
    else:
        st.error(f"Input validation error: {e}")

# -----------------------------
# Sidebar options
# -----------------------------

st.sidebar.header("Parsing Options")
delimiter = st.sidebar.text_input(
    "Field delimiter",
    value=",",
    max_chars=1,
    help="Character separating the name and each preference on a line.",
)
skip_blank = st.sidebar.checkbox(
    "Ignore blank lines",
    value=False,
    help="Skip empty lines instead of rejecting the file.",
)
collect_errors = st.sidebar.checkbox(
    "Report every malformed line",
    value=True,
    help="List all bad lines at once instead of stopping at the first.",
)
max_rank = st.sidebar.number_input(
    "Choices to draw per person",
    min_value=1,
    max_value=10,
    value=1,
    help="Show each person's top N choices in the preference graph.",
)

# -----------------------------
# Main UI and previews
# -----------------------------

st.title("Roommate Match")

_prefs_file = st.file_uploader("Preferences file", type=["csv", "txt"])

records = None
if _prefs_file is not None:
    try:
        records = parse_lines(
            uploadedfile_to_lines(_prefs_file),
            delimiter=delimiter or ",",
            collect_errors=collect_errors,
            skip_blank=skip_blank,
        )
    except InputError as e:
        show_input_error(e)
    else:
        st.subheader("Preferences preview")
        st.dataframe(records_to_df(records), use_container_width=True)

# -----------------------------
# Run button
# -----------------------------

run_disabled = records is None
run_clicked = st.button("Match roommates", disabled=run_disabled, key="run_matcher_button")

# -----------------------------
# Match
# -----------------------------

if run_clicked and not run_disabled:
    try:
        outcome = match_roommates(records)
    except InputError as e:
        show_input_error(e)
        st.stop()

    counts = summarize(outcome)
    st.caption(
        f"{counts['people']} people, {counts['matched_pairs']} pairs, "
        f"{counts['unmatched']} unmatched"
    )

    result_df = matches_frame(outcome)
    st.subheader("Matches")
    st.dataframe(result_df, use_container_width=True)

    leftover_df = unmatched_frame(outcome)
    st.subheader("Unmatched")
    st.dataframe(leftover_df, use_container_width=True)

    # Download
    st.download_button(
        "Download matches as CSV",
        result_df.to_csv(index=False).encode("utf-8"),
        file_name="matches.csv",
    )
    st.download_button(
        "Download report",
        render_outcome(outcome).encode("utf-8"),
        file_name="report.txt",
    )

    # Preference graph
    st.subheader("Preference Graph")
    html = generate_preference_mind_map(records, outcome, max_rank=int(max_rank))
    components.html(html, height=600, scrolling=True)
