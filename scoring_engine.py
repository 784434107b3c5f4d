#!/usr/bin/env python3
"""Pure scoring, validation and evaluation logic for the self-assessment."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import math
from typing import List, Mapping, Optional, Sequence, Tuple, Union

from reference_data import Category, EvaluationBand, Question, category_ordinal

LARGE_SCALE_THRESHOLD = 300
MEDIUM_SCALE_THRESHOLD = 100


class Answer(str, Enum):
    UNANSWERED = "unanswered"
    YES = "yes"
    NO = "no"


class Scale(str, Enum):
    LARGE = "大型職場"
    MEDIUM = "中型職場"
    SMALL = "小型職場"


class Stage(str, Enum):
    BASIC_INFO = "basic_info"
    QUESTIONNAIRE = "questionnaire"


AnswerValue = Union[Answer, bool, None]


@dataclass
class CategoryResult:
    part_id: int
    title: str
    score: float
    total_points: float
    percentage: float


@dataclass(frozen=True)
class Incomplete:
    stage: Stage
    title: str
    message: str
    question_id: Optional[int] = None
    part_id: Optional[int] = None
    part_ordinal: Optional[str] = None


def normalize_answer(value: AnswerValue) -> Answer:
    if value is None:
        return Answer.UNANSWERED
    if isinstance(value, Answer):
        return value
    if isinstance(value, bool):
        return Answer.YES if value else Answer.NO
    raise ValueError(f"Unsupported answer value: {value!r}")


def coerce_count(value: object) -> int:
    """Coerce an employee-count input to a non-negative int; invalid input is 0."""
    if value is None or isinstance(value, bool):
        return 0
    try:
        number = float(str(value).strip())
    except ValueError:
        return 0
    if math.isnan(number) or math.isinf(number):
        return 0
    return max(0, int(number))


def derive_scale(employees_male: object, employees_female: object) -> Scale:
    total = coerce_count(employees_male) + coerce_count(employees_female)
    if total >= LARGE_SCALE_THRESHOLD:
        return Scale.LARGE
    if total >= MEDIUM_SCALE_THRESHOLD:
        return Scale.MEDIUM
    return Scale.SMALL


def validate_submission(
    basic_info,
    answers: Mapping[int, AnswerValue],
    questions: Sequence[Question],
) -> Optional[Incomplete]:
    """Return the first unmet requirement, or None when submission may proceed.

    The unit name is checked before any question. Questions are checked in
    catalog order, so the earliest unanswered catalog entry is reported even
    when later ones are also missing.
    """
    if not (basic_info.unit_name or "").strip():
        return Incomplete(stage=Stage.BASIC_INFO, title="資料未完成", message="請填寫單位名稱。")

    for q in questions:
        if normalize_answer(answers.get(q.id)) is Answer.UNANSWERED:
            ordinal = category_ordinal(q.part_id)
            return Incomplete(
                stage=Stage.QUESTIONNAIRE,
                title="問卷未完成",
                message=f"第{ordinal}大題的第{q.id}題未完成",
                question_id=q.id,
                part_id=q.part_id,
                part_ordinal=ordinal,
            )
    return None


def calculate_results(
    answers: Mapping[int, AnswerValue],
    questions: Sequence[Question],
    categories: Sequence[Category],
) -> Tuple[List[CategoryResult], float]:
    results: List[CategoryResult] = []
    total_score = 0

    for category in categories:
        part_questions = [q for q in questions if q.part_id == category.id]
        total_points = sum(q.points for q in part_questions)
        earned = sum(
            q.points for q in part_questions if normalize_answer(answers.get(q.id)) is Answer.YES
        )
        percentage = 0.0 if total_points == 0 else earned / total_points * 100
        results.append(
            CategoryResult(
                part_id=category.id,
                title=category.title,
                score=earned,
                total_points=total_points,
                percentage=percentage,
            )
        )
        total_score += earned

    return results, total_score


def evaluate(total_score: float, bands: Sequence[EvaluationBand]) -> EvaluationBand:
    for band in bands:
        if band.contains(total_score):
            return band
    return bands[0]
