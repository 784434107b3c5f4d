#!/usr/bin/env python3
"""Scripts run against the parent page after a view renders: scrolling and printing."""

from __future__ import annotations

import streamlit as st

from app_state import ScrollRequest

TOP_ANCHOR = "page-top"


def question_anchor(question_id: int) -> str:
    return f"q-{question_id}"


def anchor(element_id: str) -> None:
    st.markdown(f'<div id="{element_id}"></div>', unsafe_allow_html=True)


def scroll_script(request: ScrollRequest) -> str:
    if request.question_id is None:
        element_id, block = TOP_ANCHOR, "start"
    else:
        element_id, block = question_anchor(request.question_id), "center"
    return (
        f'<script data-request="{request.nonce}">\n'
        f'const el = window.parent.document.getElementById("{element_id}");\n'
        f'if (el) {{ el.scrollIntoView({{behavior: "smooth", block: "{block}"}}); }}\n'
        "</script>"
    )


def print_script(nonce: int) -> str:
    return f'<script data-request="{nonce}">window.parent.print();</script>'


def emit(script: str) -> None:
    st.iframe(script, height=1)
