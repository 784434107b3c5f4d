#!/usr/bin/env python3
"""Session state for the self-assessment: answer and basic-info stores plus view flow."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from logging_config import get_logger, log_with_context
from reference_data import (
    CATEGORIES,
    EVALUATION_BANDS,
    QUESTIONS,
    TAIWAN_CITIES,
    Category,
    EvaluationBand,
    Question,
)
from scoring_engine import (
    Answer,
    AnswerValue,
    CategoryResult,
    Incomplete,
    calculate_results,
    coerce_count,
    derive_scale,
    evaluate,
    normalize_answer,
    validate_submission,
)

logger = get_logger(__name__)

EMPLOYEE_COUNT_FIELDS = ("employees_male", "employees_female")
DERIVED_FIELDS = ("scale",)


class View(str, Enum):
    INTRO = "intro"
    BASIC_INFO = "basic_info"
    QUESTIONNAIRE = "questionnaire"
    RESULT = "result"


@dataclass
class BasicInfo:
    unit_name: str = ""
    tax_id: str = ""
    city: str = ""
    district: str = ""
    unit_type: str = ""
    unit_type_other: str = ""
    school_type: str = ""
    hospital_type: str = ""
    industry: str = ""
    employees_male: int = 0
    employees_female: int = 0
    scale: str = field(default_factory=lambda: derive_scale(0, 0).value)
    contact_name: str = ""
    contact_dept: str = ""
    contact_title: str = ""
    contact_phone: str = ""
    contact_email: str = ""


@dataclass(frozen=True)
class Notice:
    title: str
    message: str


@dataclass(frozen=True)
class ScrollRequest:
    """Where the page should scroll once a view has rendered.

    ``question_id`` of None means the top of the page. ``nonce`` differs for
    every request so repeated requests produce distinct markup.
    """

    nonce: int
    question_id: Optional[int] = None


@dataclass
class ResultSummary:
    categories: List[CategoryResult]
    total_score: float
    band: EvaluationBand


class AnswerStore:
    def __init__(self) -> None:
        self._answers: Dict[int, Answer] = {}

    def set_answer(self, question_id: int, value: AnswerValue) -> None:
        answer = normalize_answer(value)
        if answer is Answer.UNANSWERED:
            raise ValueError("An answer can only be replaced by another selection, not cleared.")
        self._answers[int(question_id)] = answer

    def get_answer(self, question_id: int) -> Answer:
        return self._answers.get(int(question_id), Answer.UNANSWERED)

    def as_dict(self) -> Dict[int, Answer]:
        return dict(self._answers)

    def answered_count(self, questions: Sequence[Question]) -> int:
        return sum(1 for q in questions if self.get_answer(q.id) is not Answer.UNANSWERED)


class BasicInfoStore:
    def __init__(self) -> None:
        self.info = BasicInfo()
        self._field_names = {f.name for f in fields(BasicInfo)}

    def set_field(self, name: str, value: object) -> None:
        if name not in self._field_names:
            raise ValueError(f"Unknown basic info field: {name}")
        if name in DERIVED_FIELDS:
            raise ValueError(f"{name} is derived from the employee counts and cannot be set.")
        if name == "city":
            self.set_city(value)
            return
        if name in EMPLOYEE_COUNT_FIELDS:
            setattr(self.info, name, coerce_count(value))
            self.info.scale = derive_scale(self.info.employees_male, self.info.employees_female).value
            return
        setattr(self.info, name, "" if value is None else str(value))

    def set_city(self, value: object) -> None:
        self.info.city = "" if value is None else str(value)
        self.info.district = ""

    def districts(self) -> List[str]:
        return list(TAIWAN_CITIES.get(self.info.city, []))

    @property
    def total_employees(self) -> int:
        return self.info.employees_male + self.info.employees_female


class FlowController:
    """Active-view state machine.

    Button actions move along the linear path; tab jumps go anywhere without
    validation. Submission is gated by the validator outcome it is given.
    """

    _LINEAR_TRANSITIONS: Dict[Tuple[View, str], View] = {
        (View.INTRO, "start"): View.BASIC_INFO,
        (View.BASIC_INFO, "next"): View.QUESTIONNAIRE,
        (View.QUESTIONNAIRE, "back"): View.BASIC_INFO,
    }

    def __init__(self) -> None:
        self.active = View.INTRO
        self.notice: Optional[Notice] = None
        self._pending_focus: Optional[int] = None
        self._pending_print = False
        self._last_rendered: Optional[View] = None
        self._nonce = 0

    def _next_nonce(self) -> int:
        self._nonce += 1
        return self._nonce

    def _move(self, target: View, reason: str) -> None:
        log_with_context(
            logger, logging.DEBUG, "view transition", source=self.active.value, target=target.value, reason=reason
        )
        self.active = target
        self.notice = None
        self._pending_focus = None

    def _follow(self, action: str) -> None:
        target = self._LINEAR_TRANSITIONS.get((self.active, action))
        if target is None:
            raise ValueError(f"Action '{action}' is not available from the {self.active.value} view.")
        self._move(target, action)

    def start(self) -> None:
        self._follow("start")

    def next(self) -> None:
        self._follow("next")

    def back(self) -> None:
        self._follow("back")

    def jump(self, view: View) -> None:
        self._move(View(view), "tab")

    def submit(self, outcome: Optional[Incomplete]) -> None:
        if self.active is not View.QUESTIONNAIRE:
            raise ValueError(f"Action 'submit' is not available from the {self.active.value} view.")
        if outcome is None:
            self._move(View.RESULT, "submit")
            return
        self._move(View(outcome.stage.value), "incomplete")
        self.notice = Notice(title=outcome.title, message=outcome.message)
        self._pending_focus = outcome.question_id

    def dismiss_notice(self) -> None:
        self.notice = None

    def render_complete(self, view: View) -> Optional[ScrollRequest]:
        """Post-render hook, called once the active view is fully on the page.

        A pending question focus is handed over exactly once. Otherwise the
        first render of a view that differs from the previously rendered one
        asks for the top of the page.
        """
        if view is not self.active:
            return None
        target, self._pending_focus = self._pending_focus, None
        view_changed = self._last_rendered is not None and view is not self._last_rendered
        self._last_rendered = view
        if target is not None:
            return ScrollRequest(nonce=self._next_nonce(), question_id=target)
        if view_changed:
            return ScrollRequest(nonce=self._next_nonce())
        return None

    def request_print(self) -> None:
        self._pending_print = True

    def take_print_request(self) -> Optional[int]:
        """Consume a pending print request; returns its nonce, or None."""
        if not self._pending_print:
            return None
        self._pending_print = False
        return self._next_nonce()


@dataclass
class AppState:
    questions: Tuple[Question, ...] = QUESTIONS
    categories: Tuple[Category, ...] = CATEGORIES
    bands: Tuple[EvaluationBand, ...] = EVALUATION_BANDS
    basic_info: BasicInfoStore = field(default_factory=BasicInfoStore)
    answers: AnswerStore = field(default_factory=AnswerStore)
    flow: FlowController = field(default_factory=FlowController)

    def answer(self, question_id: int, value: AnswerValue) -> None:
        if question_id not in {q.id for q in self.questions}:
            log_with_context(logger, logging.WARNING, "answer for unknown question ignored", question_id=question_id)
        self.answers.set_answer(question_id, value)
        self.flow.dismiss_notice()

    def update_basic_info(self, name: str, value: object) -> None:
        self.basic_info.set_field(name, value)
        self.flow.dismiss_notice()

    def submit(self) -> Optional[Incomplete]:
        outcome = validate_submission(self.basic_info.info, self.answers.as_dict(), self.questions)
        self.flow.submit(outcome)
        if outcome is not None:
            log_with_context(
                logger,
                logging.INFO,
                "submission incomplete",
                stage=outcome.stage.value,
                question_id=outcome.question_id,
            )
            return outcome

        summary = self.results()
        log_with_context(
            logger, logging.INFO, "submission scored", total_score=summary.total_score, band=summary.band.title
        )
        return None

    def results(self) -> ResultSummary:
        categories, total_score = calculate_results(self.answers.as_dict(), self.questions, self.categories)
        return ResultSummary(categories=categories, total_score=total_score, band=evaluate(total_score, self.bands))
