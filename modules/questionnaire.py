#!/usr/bin/env python3
"""Questionnaire view: yes/no answers per part and submit."""

from __future__ import annotations

from typing import Optional

import streamlit as st

from app_state import AppState
from modules.page_scripts import anchor, question_anchor
from reference_data import Category, Question, questions_for_part
from scoring_engine import Answer

ANSWER_OPTIONS = ["是", "否"]
ANSWER_BY_LABEL = {"是": Answer.YES, "否": Answer.NO}
LABEL_BY_ANSWER = {Answer.YES: "是", Answer.NO: "否"}


def part_header(category: Category) -> str:
    return f"{category.title} ({category.points} 分)"


def _on_answer_change(state: AppState, question_id: int, key: str) -> None:
    label = st.session_state[key]
    if label in ANSWER_BY_LABEL:
        state.answer(question_id, ANSWER_BY_LABEL[label])


def _render_question(state: AppState, q: Question) -> None:
    anchor(question_anchor(q.id))
    st.markdown(f"**{q.id}. {q.text}**")
    st.caption(f"配分: {q.points}")
    if q.note:
        st.markdown("ℹ️ " + "  \n".join(f":red[{line}]" for line in q.note.splitlines()))

    current = state.answers.get_answer(q.id)
    label: Optional[str] = LABEL_BY_ANSWER.get(current)
    key = f"answer_{q.id}"
    st.radio(
        f"第{q.id}題作答",
        ANSWER_OPTIONS,
        index=None if label is None else ANSWER_OPTIONS.index(label),
        horizontal=True,
        key=key,
        label_visibility="collapsed",
        on_change=_on_answer_change,
        args=(state, q.id, key),
    )


def render(state: AppState) -> None:
    st.title("✅ 問卷")
    answered = state.answers.answered_count(state.questions)
    st.progress(answered / len(state.questions) if state.questions else 0.0, text=f"已作答 {answered} / {len(state.questions)} 題")

    for category in state.categories:
        with st.container(border=True):
            st.subheader(part_header(category))
            if category.description:
                st.info(f"**擴大關懷：員工眷屬與社區**\n\n{category.description}")
                st.markdown("**活動範例參考：**")
                st.markdown("\n".join(f"- {example}" for example in category.examples))
            for q in questions_for_part(category.id, state.questions):
                _render_question(state, q)
                st.divider()

    back_col, submit_col = st.columns(2)
    with back_col:
        st.button("◀ 上一步", key="questionnaire_back", on_click=state.flow.back, use_container_width=True)
    with submit_col:
        st.button("送出計算", key="questionnaire_submit", type="primary", on_click=state.submit, use_container_width=True)
