#!/usr/bin/env python3
"""Result view: total score, radar chart, breakdown table, evaluation and suggestions."""

from __future__ import annotations

import re
from typing import List

import pandas as pd
import plotly.express as px
import streamlit as st

from app_state import AppState
from modules.page_scripts import emit, print_script
from reference_data import SUGGESTIONS
from scoring_engine import CategoryResult


def short_title(title: str) -> str:
    return re.sub(r"^[一二三四五]、", "", title)


def breakdown_frame(results: List[CategoryResult]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "構面": short_title(r.title),
                "得分/配分": f"{r.score} / {r.total_points}",
                "得分率": f"{r.percentage:.0f}%",
            }
            for r in results
        ]
    )


def radar_chart(results: List[CategoryResult]) -> None:
    df = pd.DataFrame(
        [{"構面": short_title(r.title), "得分率": r.percentage} for r in results]
    )
    fig = px.line_polar(df, r="得分率", theta="構面", line_close=True, range_r=[0, 100])
    fig.update_traces(
        fill="toself",
        line_color="#16a34a",
        fillcolor="rgba(74, 222, 128, 0.6)",
        hovertemplate="%{theta}: %{r:.1f}%<extra>得分率</extra>",
    )
    fig.update_layout(height=380, margin={"l": 40, "r": 40, "t": 20, "b": 20})
    st.plotly_chart(fig, use_container_width=True)


def render(state: AppState) -> None:
    summary = state.results()
    unit_name = state.basic_info.info.unit_name.strip() or "貴單位"

    st.title(f"🏢 {unit_name}")
    st.markdown("職場健康促進表現評估結果")
    st.metric("總得分", f"{summary.total_score} / 100")
    st.markdown("---")

    chart_col, table_col = st.columns(2)
    with chart_col:
        st.subheader("五大構面表現")
        radar_chart(summary.categories)
    with table_col:
        st.subheader("得分明細")
        st.dataframe(breakdown_frame(summary.categories), use_container_width=True, hide_index=True)

    st.markdown("---")
    st.subheader(summary.band.title)
    st.markdown(summary.band.content.replace("\n", "  \n"))
    st.markdown("---")

    st.subheader("🛡️ 各項議題詳細建議")
    columns = st.columns(2)
    for idx, item in enumerate(SUGGESTIONS):
        with columns[idx % 2]:
            with st.container(border=True):
                st.markdown(f"#### {item.icon} {item.title}")
                st.markdown(item.content.replace("\n", "  \n"))

    st.markdown("---")
    st.button("🖨️ 列印 / 存為 PDF", key="result_print", on_click=state.flow.request_print)

    print_nonce = state.flow.take_print_request()
    if print_nonce is not None:
        emit(print_script(print_nonce))
