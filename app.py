#!/usr/bin/env python3
"""Streamlit Workplace Health Promotion Self-Assessment."""

from __future__ import annotations

from typing import Dict

import streamlit as st

from app_state import AppState, View
from config import get_settings
from logging_config import get_logger
from modules.basic_info import render as render_basic_info
from modules.intro import render as render_intro
from modules.page_scripts import TOP_ANCHOR, anchor, emit, scroll_script
from modules.questionnaire import render as render_questionnaire
from modules.result import render as render_result

logger = get_logger(__name__)

st.set_page_config(
    page_title=get_settings().page_title,
    layout="wide",
    initial_sidebar_state="collapsed",
)

TAB_LABELS: Dict[View, str] = {
    View.INTRO: "📄 說明",
    View.BASIC_INFO: "🗂️ 基本資料",
    View.QUESTIONNAIRE: "✅ 問卷",
    View.RESULT: "📊 結果",
}

RENDERERS = {
    View.INTRO: render_intro,
    View.BASIC_INFO: render_basic_info,
    View.QUESTIONNAIRE: render_questionnaire,
    View.RESULT: render_result,
}


def get_app_state() -> AppState:
    if "app_state" not in st.session_state:
        st.session_state["app_state"] = AppState()
        logger.info("new assessment session")
    return st.session_state["app_state"]


def tab_bar(state: AppState) -> None:
    columns = st.columns(len(TAB_LABELS))
    for column, (view, label) in zip(columns, TAB_LABELS.items()):
        with column:
            st.button(
                label,
                key=f"tab_{view.value}",
                type="primary" if state.flow.active is view else "secondary",
                use_container_width=True,
                on_click=state.flow.jump,
                args=(view,),
            )


def unified_app() -> None:
    state = get_app_state()

    anchor(TOP_ANCHOR)
    st.markdown(f"## {get_settings().page_title}")
    tab_bar(state)
    st.markdown("---")

    if state.flow.notice is not None:
        st.error(f"**{state.flow.notice.title}**：{state.flow.notice.message}")

    active = state.flow.active
    RENDERERS[active](state)

    # Anchors of the active view exist only once it has rendered.
    request = state.flow.render_complete(active)
    if request is not None:
        emit(scroll_script(request))


if __name__ == "__main__":
    unified_app()
