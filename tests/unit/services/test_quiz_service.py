"""
Unit Tests for QuizService.

Tests quiz generation, grading and the assessment history:
- Exactly N well-formed questions or DataCorrupt
- Score recomputed from the answers
- Improvement tip only when something was wrong; tip failure is not fatal
- History is append-only and oldest first
"""

import pytest

from src.common.error_handling import (
    DataCorrupt,
    GenerationFailed,
    OnboardingRequired,
    Unauthorized,
)
from src.common.types import QuizQuestion
from src.services import QuizService, compute_score, grade_answers
from tests.helpers.fakes import FakeGenerator, quiz_json, quiz_question


# ===== FIXTURES =====


@pytest.fixture
def make_service(gateway, clock):
    def _make(generator=None, question_count=10):
        return QuizService(gateway, generator, clock=clock, question_count=question_count)
    return _make


@pytest.fixture
def questions():
    return [QuizQuestion.model_validate(quiz_question(i + 1)) for i in range(4)]


# ===== TESTS: Grading =====


class TestGrading:

    def test_grade_marks_each_answer(self, questions):
        answers = ["Hash map", "Linked list", None, "Hash map"]

        results = grade_answers(questions, answers)

        assert [r.is_correct for r in results] == [True, False, False, True]
        assert results[2].user_answer is None
        assert compute_score(results) == 0.5

    def test_grade_length_mismatch(self, questions):
        with pytest.raises(ValueError):
            grade_answers(questions, ["Hash map"])

    def test_empty_quiz_scores_zero(self):
        assert compute_score([]) == 0.0


# ===== TESTS: generate_quiz =====


class TestGenerateQuiz:

    def test_returns_exactly_n_questions(self, make_service, onboarded_user):
        generator = FakeGenerator(quiz_json(10))

        questions = make_service(generator).generate_quiz(onboarded_user.subject_id)

        assert len(questions) == 10
        assert all(q.correct_answer in q.options for q in questions)
        assert "software engineering" in generator.prompts[0]
        assert "Python, SQL" in generator.prompts[0]

    def test_wrong_question_count_is_data_corrupt(self, make_service, onboarded_user):
        with pytest.raises(DataCorrupt, match="expected 10 questions, got 9"):
            make_service(FakeGenerator(quiz_json(9))).generate_quiz(onboarded_user.subject_id)

    def test_unparseable_quiz_is_data_corrupt(self, make_service, onboarded_user):
        with pytest.raises(DataCorrupt):
            make_service(FakeGenerator("Here are some questions: 1) ...")).generate_quiz(
                onboarded_user.subject_id
            )

    def test_requires_onboarding(self, make_service, new_user):
        generator = FakeGenerator(quiz_json(10))
        with pytest.raises(OnboardingRequired):
            make_service(generator).generate_quiz(new_user.subject_id)
        assert generator.calls == 0

    def test_generate_does_not_persist(self, make_service, gateway, onboarded_user):
        make_service(FakeGenerator(quiz_json(10))).generate_quiz(onboarded_user.subject_id)
        assert gateway.assessments.rows == []


# ===== TESTS: save_result =====


class TestSaveResult:

    def test_perfect_score_has_no_tip(self, make_service, clock, onboarded_user, questions):
        generator = FakeGenerator("unused")

        assessment = make_service(generator).save_result(
            onboarded_user.subject_id, questions, ["Hash map"] * 4
        )

        assert assessment.quiz_score == 1.0
        assert assessment.improvement_tip is None
        assert assessment.category == "Technical"
        assert assessment.created_at == clock()
        assert generator.calls == 0

    def test_wrong_answers_get_tip(self, make_service, onboarded_user, questions):
        generator = FakeGenerator("  Review hashing and amortised complexity.  ")

        assessment = make_service(generator).save_result(
            onboarded_user.subject_id, questions, ["Hash map", "Linked list", "Hash map", "Hash map"]
        )

        assert assessment.quiz_score == 0.75
        assert assessment.improvement_tip == "Review hashing and amortised complexity."
        assert "Linked list" in generator.prompts[0]

    def test_tip_failure_still_stores_assessment(self, make_service, gateway, onboarded_user, questions):
        service = make_service(FakeGenerator(GenerationFailed("upstream 500")))

        assessment = service.save_result(onboarded_user.subject_id, questions, [None] * 4)

        assert assessment.quiz_score == 0.0
        assert assessment.improvement_tip is None
        assert len(gateway.assessments.rows) == 1

    def test_submitted_score_is_recomputed(self, make_service, onboarded_user, questions):
        assessment = make_service(FakeGenerator("tip")).save_result(
            onboarded_user.subject_id, questions, ["Hash map", None, None, None], score=1.0
        )
        assert assessment.quiz_score == 0.25

    def test_requires_caller(self, make_service, questions):
        with pytest.raises(Unauthorized):
            make_service().save_result(None, questions, ["Hash map"] * 4)


# ===== TESTS: list_assessments =====


class TestListAssessments:

    def test_empty_history(self, make_service, onboarded_user):
        assert make_service().list_assessments(onboarded_user.subject_id) == []

    def test_oldest_first(self, make_service, clock, onboarded_user, questions):
        service = make_service(FakeGenerator("tip"))
        first = service.save_result(onboarded_user.subject_id, questions, ["Hash map"] * 4)
        clock.advance(hours=1)
        second = service.save_result(onboarded_user.subject_id, questions, [None] * 4)

        history = service.list_assessments(onboarded_user.subject_id)

        assert [a.id for a in history] == [first.id, second.id]

    def test_saving_again_leaves_earlier_records_untouched(
        self, make_service, clock, onboarded_user, questions
    ):
        service = make_service(FakeGenerator("tip"))
        first = service.save_result(onboarded_user.subject_id, questions, ["Hash map"] * 4)
        stored_first = first.model_dump()

        clock.advance(hours=1)
        service.save_result(onboarded_user.subject_id, questions[:2], [None, None])

        earlier = service.list_assessments(onboarded_user.subject_id)[0]
        assert earlier.model_dump() == stored_first
        assert earlier.quiz_score == stored_first["quiz_score"]
        assert [q.model_dump() for q in earlier.questions] == stored_first["questions"]

    def test_history_is_per_user(self, make_service, gateway, onboarded_user, new_user, questions):
        service = make_service()
        service.save_result(onboarded_user.subject_id, questions, ["Hash map"] * 4)

        assert service.list_assessments(new_user.subject_id) == []
