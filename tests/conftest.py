"""Pytest configuration and fixtures."""

import os

import pytest

# Settings are cached on first import, so the environment is set at collection time.
os.environ.setdefault("HEALTH_SURVEY_ENV", "test")

from app_state import AppState  # noqa: E402
from reference_data import QUESTIONS  # noqa: E402
from scoring_engine import Answer  # noqa: E402


@pytest.fixture
def state() -> AppState:
    return AppState()


@pytest.fixture
def all_yes() -> dict:
    return {q.id: Answer.YES for q in QUESTIONS}


@pytest.fixture
def all_no() -> dict:
    return {q.id: Answer.NO for q in QUESTIONS}


@pytest.fixture
def completed_state(state: AppState) -> AppState:
    """A state on the questionnaire view with a unit name and every question answered."""
    state.basic_info.set_field("unit_name", "健康科技股份有限公司")
    for q in state.questions:
        state.answer(q.id, Answer.YES)
    state.flow.jump("questionnaire")
    return state
