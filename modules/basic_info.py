#!/usr/bin/env python3
"""Basic information view."""

from __future__ import annotations

from typing import List, Optional

import streamlit as st

from app_state import AppState
from reference_data import (
    HOSPITAL_UNIT_TYPE,
    INDUSTRIES,
    OTHER_UNIT_TYPE,
    OWNERSHIP_TYPES,
    SCHOOL_UNIT_TYPE,
    TAIWAN_CITIES,
    UNIT_TYPES,
)


def _widget_key(name: str) -> str:
    return f"basic_{name}"


def _on_field_change(state: AppState, name: str, key: str) -> None:
    state.update_basic_info(name, st.session_state[key])


def _on_city_change(state: AppState) -> None:
    state.update_basic_info("city", st.session_state[_widget_key("city")] or "")


def _index_of(options: List[str], value: str) -> Optional[int]:
    return options.index(value) if value in options else None


def _text_input(state: AppState, label: str, name: str, placeholder: str = "") -> None:
    key = _widget_key(name)
    st.text_input(
        label,
        value=getattr(state.basic_info.info, name),
        placeholder=placeholder,
        key=key,
        on_change=_on_field_change,
        args=(state, name, key),
    )


def _select(state: AppState, label: str, name: str, options: List[str], placeholder: str, key: Optional[str] = None) -> None:
    key = key or _widget_key(name)
    st.selectbox(
        label,
        options,
        index=_index_of(options, getattr(state.basic_info.info, name)),
        placeholder=placeholder,
        key=key,
        on_change=_on_field_change,
        args=(state, name, key),
    )


def render(state: AppState) -> None:
    info = state.basic_info.info
    st.title("🗂️ 基本資料")

    col1, col2 = st.columns(2)
    with col1:
        _text_input(state, "1. 單位名稱", "unit_name", "請輸入公司/單位全名")
    with col2:
        _text_input(state, "2. 統一編號", "tax_id", "8碼統編")

    st.markdown("**3. 單位地址**")
    city_col, district_col = st.columns(2)
    cities = list(TAIWAN_CITIES.keys())
    with city_col:
        st.selectbox(
            "縣市",
            cities,
            index=_index_of(cities, info.city),
            placeholder="請選擇縣市",
            key=_widget_key("city"),
            on_change=_on_city_change,
            args=(state,),
        )
    with district_col:
        # District options depend on the city, so the widget is keyed per city.
        _select(
            state,
            "區鄉鎮",
            "district",
            state.basic_info.districts(),
            "請選擇區鄉鎮",
            key=f"{_widget_key('district')}_{info.city or 'none'}",
        )

    _select(state, "4. 單位類別", "unit_type", UNIT_TYPES, "請選擇單位類別")
    if info.unit_type == SCHOOL_UNIT_TYPE:
        _select(state, "學校類別", "school_type", OWNERSHIP_TYPES, "類別")
    elif info.unit_type == HOSPITAL_UNIT_TYPE:
        _select(state, "醫療院所類別", "hospital_type", OWNERSHIP_TYPES, "類別")
    elif info.unit_type == OTHER_UNIT_TYPE:
        _text_input(state, "其他類別說明", "unit_type_other", "請說明")

    _select(state, "5. 行業別", "industry", INDUSTRIES, "請選擇行業別")

    st.markdown("**6. 員工人數**")
    male_col, female_col = st.columns(2)
    for column, label, name in ((male_col, "男性", "employees_male"), (female_col, "女性", "employees_female")):
        key = _widget_key(name)
        with column:
            st.number_input(
                label,
                min_value=0,
                step=1,
                value=getattr(info, name),
                key=key,
                on_change=_on_field_change,
                args=(state, name, key),
            )

    st.text_input(
        f"7. 單位規模 (系統自動計算，共 {state.basic_info.total_employees} 人)",
        value=info.scale,
        disabled=True,
    )

    st.markdown("**聯絡人資料**")
    contact_fields = [
        ("8. 姓名", "contact_name"),
        ("9. 部門", "contact_dept"),
        ("10. 職稱", "contact_title"),
        ("11. 電話", "contact_phone"),
        ("12. E-mail", "contact_email"),
    ]
    columns = st.columns(2)
    for idx, (label, name) in enumerate(contact_fields):
        with columns[idx % 2]:
            _text_input(state, label, name)

    st.markdown("---")
    st.button("下一步：填寫問卷 ▶", key="basic_next", type="primary", on_click=state.flow.next)
