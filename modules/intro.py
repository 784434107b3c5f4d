#!/usr/bin/env python3
"""Introduction view."""

from __future__ import annotations

import streamlit as st

from app_state import AppState
from reference_data import INTRO_TEXT


def render(state: AppState) -> None:
    st.title("📋 說明")
    for paragraph in INTRO_TEXT.split("\n\n"):
        st.markdown(paragraph.replace("\n", "  \n"))

    st.markdown("---")
    st.button("開始填寫 ▶", key="intro_start", type="primary", on_click=state.flow.start)
