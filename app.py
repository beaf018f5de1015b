#!/usr/bin/env python3
"""
Streamlit app for the MIR4 Excel Splitter
Splits a localization workbook into one workbook per language and offers a ZIP download
"""

import logging
import threading

import streamlit as st

from mir4_splitter import (
    LANGUAGES,
    SplitterError,
    archive_name,
    create_zip_archive,
    split_workbook,
)
from mir4_splitter.detect import MODE_DESCRIPTIONS, MODE_DISPLAY_NAMES

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def reset_run_state(upload_key: str) -> None:
    """Forget any finished archive and stop the run a new upload supersedes."""
    previous_event = st.session_state.get("cancel_event")
    if previous_event is not None:
        previous_event.set()

    st.session_state["cancel_event"] = threading.Event()
    st.session_state["upload_key"] = upload_key
    st.session_state["zip_bytes"] = None
    st.session_state["zip_name"] = None
    st.session_state["result"] = None


def run_split(uploaded_file, mode: str) -> None:
    """Split the uploaded file and keep the archive in session state."""
    progress_bar = st.progress(0)
    status_text = st.empty()

    def update_progress(percent: int, completed: bool) -> None:
        progress_bar.progress(percent)
        status_text.text("✅ Split complete" if completed else f"⏳ Processing... {percent}%")

    try:
        result = split_workbook(
            uploaded_file.getvalue(),
            uploaded_file.name,
            mode,
            progress_callback=update_progress,
            cancel_event=st.session_state["cancel_event"]
        )
    except SplitterError as e:
        logger.error(f"Split of {uploaded_file.name} failed: {e}")
        st.error(f"❌ Could not process the file: {e}")
        return

    st.session_state["result"] = result
    if result["archive"]:
        st.session_state["zip_bytes"] = create_zip_archive(result["archive"])
        st.session_state["zip_name"] = archive_name(mode)


def main():
    st.set_page_config(
        page_title="MIR4 Excel Splitter",
        page_icon="🧙",
        layout="centered"
    )

    st.title("🧙 MIR4 Excel Splitter")

    mode = st.radio(
        "Mode",
        options=list(MODE_DISPLAY_NAMES),
        format_func=MODE_DISPLAY_NAMES.get,
        horizontal=True
    )
    st.caption(MODE_DESCRIPTIONS[mode])

    uploaded_file = st.file_uploader(
        "📂 Choose a file or drag and drop it here",
        type=['xlsx', 'xls']
    )

    if uploaded_file is None:
        st.info(f"👆 Upload a workbook with columns for: {', '.join(LANGUAGES)}")
        return

    upload_key = f"{uploaded_file.file_id}:{mode}"
    if st.session_state.get("upload_key") != upload_key:
        reset_run_state(upload_key)
        run_split(uploaded_file, mode)

    result = st.session_state.get("result")
    if result is None:
        return

    if st.session_state.get("zip_bytes"):
        st.success(f"🎉 Split complete: {result['files_created']} files. Download below.")
        for entry in result["manifest_entries"]:
            st.write(f"📄 {entry['filename']}")

        st.download_button(
            label="📦 Download ZIP",
            data=st.session_state["zip_bytes"],
            file_name=st.session_state["zip_name"],
            mime="application/zip",
            type="primary"
        )
    else:
        st.warning("⚠️ No language columns matched the header row. Check the column names.")


if __name__ == "__main__":
    main()
