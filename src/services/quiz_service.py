"""
Quiz Service.

Interview practice in three stateless operations:
- generate_quiz: N multiple-choice questions for the caller's industry.
- save_result: grade the caller's answers and append one assessment.
- list_assessments: the caller's history, oldest first.

Nothing is persisted between generate_quiz and save_result; the caller
sends the questions back together with the answers.

Scoring: the score is recomputed here as correct / N. A caller-supplied
score that disagrees is logged and replaced, never stored.
"""

from typing import List, Optional, Sequence

from src.common.config import Config
from src.common.error_handling import DataCorrupt, safe_execute
from src.common.logger import get_logger
from src.common.types import Assessment, QuestionResult, QuizPayload, QuizQuestion
from src.services.operation_base import OperationService
from src.services.prompts import build_improvement_tip_prompt, build_quiz_prompt

logger = get_logger(__name__, layer="quiz")

ASSESSMENT_CATEGORY = "Technical"
# Tolerance when comparing a caller's score with the recomputed one
SCORE_TOLERANCE = 1e-6


def grade_answers(
    questions: Sequence[QuizQuestion],
    answers: Sequence[Optional[str]],
) -> List[QuestionResult]:
    """
    Pair each question with the caller's answer.

    Args:
        questions: Questions as generated
        answers: One answer per question (None for unanswered)

    Returns:
        One QuestionResult per question, in order

    Raises:
        ValueError: If the two sequences differ in length
    """
    if len(questions) != len(answers):
        raise ValueError(
            f"Got {len(answers)} answers for {len(questions)} questions"
        )
    return [
        QuestionResult(
            question=q.question,
            options=list(q.options),
            correct_answer=q.correct_answer,
            user_answer=a,
            is_correct=a == q.correct_answer,
            explanation=q.explanation,
        )
        for q, a in zip(questions, answers)
    ]


def compute_score(results: Sequence[QuestionResult]) -> float:
    """Fraction of correct answers (0.0 for an empty quiz)."""
    if not results:
        return 0.0
    return sum(1 for r in results if r.is_correct) / len(results)


class QuizService(OperationService):
    """Generate interview quizzes and keep the caller's results."""

    operation_name: str = "quiz"

    def __init__(self, *args, question_count: Optional[int] = None, **kwargs):
        """
        Initialize the service.

        Args:
            question_count: Questions per quiz (defaults to Config.QUIZ_QUESTION_COUNT)
            *args, **kwargs: Forwarded to OperationService
        """
        super().__init__(*args, **kwargs)
        self.question_count = question_count or Config.QUIZ_QUESTION_COUNT

    def generate_quiz(self, subject_id: Optional[str]) -> List[QuizQuestion]:
        """
        Generate exactly question_count questions for the caller's industry.

        Raises:
            Unauthorized, UserNotFound, OnboardingRequired: Caller resolution
            GenerationFailed, RateLimited, MalformedResponse: Upstream errors
            DataCorrupt: Response was not the expected quiz shape or size
        """
        user = self.resolve_user(subject_id)
        industry = self.require_industry(user)
        prompt = build_quiz_prompt(
            industry,
            skills=user.skills,
            count=self.question_count,
            option_count=Config.QUIZ_OPTION_COUNT,
        )

        with self.timed_execution() as timer:
            text = self.generator.generate(prompt)
            payload = self.parse_generated(text, QuizPayload, "quiz")

        if len(payload.questions) != self.question_count:
            raise DataCorrupt(
                "quiz",
                f"expected {self.question_count} questions, got {len(payload.questions)}",
            )

        logger.bind(user.subject_id).info(
            f"Generated {len(payload.questions)} questions for {industry!r} in {timer.duration_ms}ms"
        )
        return payload.questions

    def save_result(
        self,
        subject_id: Optional[str],
        questions: Sequence[QuizQuestion],
        answers: Sequence[Optional[str]],
        score: Optional[float] = None,
    ) -> Assessment:
        """
        Grade the answers and append one assessment to the caller's history.

        When any answer is wrong, one extra generation call produces an
        improvement tip; if that call fails the assessment is stored without one.

        Args:
            subject_id: Verified caller
            questions: The questions the caller was shown
            answers: The caller's answers, one per question
            score: Score the caller computed, if any (checked, not trusted)

        Returns:
            The stored Assessment

        Raises:
            Unauthorized, UserNotFound: Caller resolution
            ValueError: answers and questions differ in length
            StoreUnavailable: Store unreachable
        """
        user = self.resolve_user(subject_id)
        log = logger.bind(user.subject_id)

        results = grade_answers(questions, answers)
        quiz_score = compute_score(results)
        if score is not None and abs(score - quiz_score) > SCORE_TOLERANCE:
            log.warning(
                f"Submitted score {score:.3f} does not match answers ({quiz_score:.3f}); "
                "storing recomputed score"
            )

        wrong = [r for r in results if not r.is_correct]
        improvement_tip = None
        if wrong and user.industry:
            improvement_tip = safe_execute(
                self._improvement_tip,
                user.industry,
                wrong,
                operation_name="improvement tip",
                logger=log.logger,
            )

        record = {
            "quiz_score": quiz_score,
            "questions": [r.model_dump() for r in results],
            "category": ASSESSMENT_CATEGORY,
            "improvement_tip": improvement_tip,
            "created_at": self.now(),
        }
        assessment = self._gateway.assessments.append_assessment(user.id, record)
        log.info(f"Saved assessment {assessment.id} ({len(results) - len(wrong)}/{len(results)} correct)")
        return assessment

    def list_assessments(self, subject_id: Optional[str]) -> List[Assessment]:
        """Get the caller's assessments, oldest first."""
        user = self.resolve_user(subject_id)
        return self._gateway.assessments.list_assessments(user.id)

    def _improvement_tip(self, industry: str, wrong: List[QuestionResult]) -> str:
        """Ask the generator for study advice based on the wrong answers."""
        return self.generator.generate(build_improvement_tip_prompt(industry, wrong)).strip()
