"""Tests for the session stores, the flow controller and the application aggregate."""

import pytest

from app_state import AnswerStore, BasicInfoStore, FlowController, View
from reference_data import EVALUATION_BANDS
from scoring_engine import Answer, Incomplete, Scale, Stage


# ──────────────────────────────────────────────────────────────────────
# TestAnswerStore
# ──────────────────────────────────────────────────────────────────────


class TestAnswerStore:
    def test_initially_unanswered(self):
        store = AnswerStore()
        assert store.get_answer(1) is Answer.UNANSWERED
        assert store.as_dict() == {}

    def test_set_and_overwrite(self):
        store = AnswerStore()
        store.set_answer(3, Answer.YES)
        assert store.get_answer(3) is Answer.YES
        store.set_answer(3, Answer.NO)
        assert store.get_answer(3) is Answer.NO

    def test_bool_values_map_to_answers(self):
        store = AnswerStore()
        store.set_answer(1, True)
        store.set_answer(2, False)
        assert store.as_dict() == {1: Answer.YES, 2: Answer.NO}

    def test_cannot_clear_an_answer(self):
        store = AnswerStore()
        store.set_answer(1, Answer.YES)
        with pytest.raises(ValueError):
            store.set_answer(1, Answer.UNANSWERED)
        with pytest.raises(ValueError):
            store.set_answer(1, None)
        assert store.get_answer(1) is Answer.YES

    def test_unknown_ids_are_stored(self):
        store = AnswerStore()
        store.set_answer(999, Answer.YES)
        assert store.get_answer(999) is Answer.YES

    def test_snapshot_is_detached(self):
        store = AnswerStore()
        snapshot = store.as_dict()
        store.set_answer(1, Answer.YES)
        assert snapshot == {}


# ──────────────────────────────────────────────────────────────────────
# TestBasicInfoStore
# ──────────────────────────────────────────────────────────────────────


class TestBasicInfoStore:
    def test_initial_scale_matches_zero_employees(self):
        store = BasicInfoStore()
        assert store.info.scale == Scale.SMALL.value

    @pytest.mark.parametrize(
        "male,female,expected",
        [(150, 200, Scale.LARGE), (50, 40, Scale.SMALL), (60, 60, Scale.MEDIUM)],
    )
    def test_scale_recomputed_on_count_change(self, male, female, expected):
        store = BasicInfoStore()
        store.set_field("employees_male", male)
        store.set_field("employees_female", female)
        assert store.info.scale == expected.value
        assert store.total_employees == male + female

    def test_scale_follows_decreasing_counts(self):
        store = BasicInfoStore()
        store.set_field("employees_male", 400)
        assert store.info.scale == Scale.LARGE.value
        store.set_field("employees_male", 10)
        assert store.info.scale == Scale.SMALL.value

    def test_counts_are_coerced(self):
        store = BasicInfoStore()
        store.set_field("employees_male", "abc")
        store.set_field("employees_female", -3)
        assert store.info.employees_male == 0
        assert store.info.employees_female == 0
        store.set_field("employees_female", "120")
        assert store.info.employees_female == 120
        assert store.info.scale == Scale.MEDIUM.value

    def test_city_change_clears_district(self):
        store = BasicInfoStore()
        store.set_city("臺北市")
        store.set_field("district", "大安區")
        store.set_city("高雄市")
        assert store.info.city == "高雄市"
        assert store.info.district == ""

    def test_setting_same_city_still_clears_district(self):
        store = BasicInfoStore()
        store.set_city("臺中市")
        store.set_field("district", "西屯區")
        store.set_field("city", "臺中市")
        assert store.info.district == ""

    def test_districts_follow_city(self):
        store = BasicInfoStore()
        assert store.districts() == []
        store.set_city("新竹市")
        assert store.districts() == ["東區", "北區", "香山區"]

    def test_scale_cannot_be_set_directly(self):
        store = BasicInfoStore()
        with pytest.raises(ValueError):
            store.set_field("scale", Scale.LARGE.value)

    def test_unknown_field_rejected(self):
        store = BasicInfoStore()
        with pytest.raises(ValueError):
            store.set_field("ceo_name", "x")

    def test_text_fields_are_stored_as_strings(self):
        store = BasicInfoStore()
        store.set_field("unit_name", "健康科技")
        store.set_field("industry", None)
        assert store.info.unit_name == "健康科技"
        assert store.info.industry == ""


# ──────────────────────────────────────────────────────────────────────
# TestFlowController
# ──────────────────────────────────────────────────────────────────────


class TestFlowController:
    def test_initial_view_is_intro(self):
        assert FlowController().active is View.INTRO

    def test_linear_path(self):
        flow = FlowController()
        flow.start()
        assert flow.active is View.BASIC_INFO
        flow.next()
        assert flow.active is View.QUESTIONNAIRE
        flow.back()
        assert flow.active is View.BASIC_INFO

    @pytest.mark.parametrize("action", ["next", "back"])
    def test_linear_actions_outside_source_view_rejected(self, action):
        flow = FlowController()
        with pytest.raises(ValueError):
            getattr(flow, action)()
        assert flow.active is View.INTRO

    @pytest.mark.parametrize("view", list(View))
    def test_jump_always_allowed(self, view):
        flow = FlowController()
        flow.jump(view)
        assert flow.active is view

    def test_jump_accepts_view_values(self):
        flow = FlowController()
        flow.jump("result")
        assert flow.active is View.RESULT

    def test_submit_ok_moves_to_result(self):
        flow = FlowController()
        flow.jump(View.QUESTIONNAIRE)
        flow.submit(None)
        assert flow.active is View.RESULT
        assert flow.notice is None

    def test_submit_incomplete_basic_info(self):
        flow = FlowController()
        flow.jump(View.QUESTIONNAIRE)
        flow.submit(Incomplete(stage=Stage.BASIC_INFO, title="資料未完成", message="請填寫單位名稱。"))
        assert flow.active is View.BASIC_INFO
        assert flow.notice.message == "請填寫單位名稱。"
        assert flow.render_complete(View.BASIC_INFO) is None

    def test_submit_incomplete_question_sets_focus_after_render(self):
        flow = FlowController()
        flow.jump(View.QUESTIONNAIRE)
        flow.submit(
            Incomplete(
                stage=Stage.QUESTIONNAIRE,
                title="問卷未完成",
                message="第一大題的第7題未完成",
                question_id=7,
                part_id=1,
                part_ordinal="一",
            )
        )
        assert flow.active is View.QUESTIONNAIRE
        assert flow.notice.title == "問卷未完成"
        # A render of another view does not consume the target.
        assert flow.render_complete(View.RESULT) is None
        assert flow.render_complete(View.QUESTIONNAIRE).question_id == 7
        assert flow.render_complete(View.QUESTIONNAIRE) is None

    def test_submit_only_from_questionnaire(self):
        flow = FlowController()
        with pytest.raises(ValueError):
            flow.submit(None)

    def test_transition_clears_notice_and_focus(self):
        flow = FlowController()
        flow.jump(View.QUESTIONNAIRE)
        flow.submit(Incomplete(stage=Stage.QUESTIONNAIRE, title="t", message="m", question_id=3))
        flow.jump(View.INTRO)
        assert flow.notice is None
        flow.jump(View.QUESTIONNAIRE)
        assert flow.render_complete(View.QUESTIONNAIRE) is None

    def test_print_request_is_one_shot(self):
        flow = FlowController()
        assert flow.take_print_request() is None
        flow.request_print()
        first = flow.take_print_request()
        assert first is not None
        assert flow.take_print_request() is None
        flow.request_print()
        assert flow.take_print_request() != first

    def test_view_change_scrolls_to_top_after_render(self):
        flow = FlowController()
        assert flow.render_complete(View.INTRO) is None
        flow.start()
        request = flow.render_complete(View.BASIC_INFO)
        assert request.question_id is None
        # Reruns of the same view keep the scroll position.
        assert flow.render_complete(View.BASIC_INFO) is None

    def test_question_focus_replaces_scroll_to_top(self):
        flow = FlowController()
        flow.render_complete(View.INTRO)
        flow.jump(View.QUESTIONNAIRE)
        flow.submit(Incomplete(stage=Stage.QUESTIONNAIRE, title="t", message="m", question_id=5))
        assert flow.render_complete(View.QUESTIONNAIRE).question_id == 5
        assert flow.render_complete(View.QUESTIONNAIRE) is None

    def test_repeated_focus_requests_are_distinct(self):
        flow = FlowController()
        flow.jump(View.QUESTIONNAIRE)
        outcome = Incomplete(stage=Stage.QUESTIONNAIRE, title="t", message="m", question_id=5)
        flow.submit(outcome)
        first = flow.render_complete(View.QUESTIONNAIRE)
        flow.submit(outcome)
        second = flow.render_complete(View.QUESTIONNAIRE)
        assert first.question_id == second.question_id == 5
        assert first != second


# ──────────────────────────────────────────────────────────────────────
# TestAppState
# ──────────────────────────────────────────────────────────────────────


class TestAppState:
    def test_submit_complete(self, completed_state):
        assert completed_state.submit() is None
        assert completed_state.flow.active is View.RESULT
        summary = completed_state.results()
        assert summary.total_score == 100
        assert summary.band is EVALUATION_BANDS[-1]

    def test_submit_without_name_goes_to_basic_info(self, completed_state):
        completed_state.basic_info.set_field("unit_name", "  ")
        outcome = completed_state.submit()
        assert outcome.stage is Stage.BASIC_INFO
        assert completed_state.flow.active is View.BASIC_INFO
        assert completed_state.flow.notice.title == "資料未完成"
        # Entered answers survive the redirect.
        assert completed_state.answers.get_answer(1) is Answer.YES

    def test_submit_with_missing_answer_goes_to_questionnaire(self, state):
        state.basic_info.set_field("unit_name", "測試單位")
        for q in state.questions:
            if q.id not in (7, 20):
                state.answer(q.id, Answer.NO)
        state.flow.jump(View.QUESTIONNAIRE)
        outcome = state.submit()
        assert outcome.question_id == 7
        assert state.flow.active is View.QUESTIONNAIRE
        assert state.flow.notice.message == "第一大題的第7題未完成"
        assert state.flow.render_complete(View.QUESTIONNAIRE).question_id == 7

    def test_results_follow_answer_changes(self, completed_state):
        assert completed_state.results().total_score == 100
        completed_state.answer(13, Answer.NO)
        summary = completed_state.results()
        assert summary.total_score == 96
        assert summary.categories[2].score == 34

    def test_all_no_selects_lowest_band(self, state):
        for q in state.questions:
            state.answer(q.id, Answer.NO)
        summary = state.results()
        assert summary.total_score == 0
        assert summary.band is EVALUATION_BANDS[0]

    def test_unknown_question_answer_is_ignored(self, completed_state):
        completed_state.answer(999, Answer.YES)
        assert completed_state.answers.get_answer(999) is Answer.YES
        assert completed_state.results().total_score == 100

    def test_answering_dismisses_validation_notice(self, state):
        state.basic_info.set_field("unit_name", "測試單位")
        state.flow.jump(View.QUESTIONNAIRE)
        state.submit()
        assert state.flow.notice.message == "第一大題的第1題未完成"
        state.answer(1, Answer.YES)
        assert state.flow.notice is None
        assert state.flow.active is View.QUESTIONNAIRE

    def test_basic_info_edit_dismisses_validation_notice(self, completed_state):
        completed_state.basic_info.set_field("unit_name", "")
        completed_state.submit()
        assert completed_state.flow.notice.title == "資料未完成"
        completed_state.update_basic_info("unit_name", "健康科技股份有限公司")
        assert completed_state.basic_info.info.unit_name == "健康科技股份有限公司"
        assert completed_state.flow.notice is None
