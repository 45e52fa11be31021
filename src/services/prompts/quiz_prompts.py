"""
Prompts for Interview Quiz Generation and Feedback.

- QUIZ_PROMPT: N multiple-choice technical questions for the user's industry
- IMPROVEMENT_TIP_PROMPT: short study advice from the questions answered wrong
"""

from typing import List, Optional, Sequence

from src.common.types import QuestionResult


# ============================================================================
# QUIZ GENERATION PROMPT
# ============================================================================

QUIZ_PROMPT = """Generate {count} technical interview questions for a {industry} professional{skills_clause}.

Each question should be multiple choice with exactly {option_count} distinct options.
Exactly one option is correct; correct_answer must repeat that option's text verbatim.

Return the response in ONLY this JSON format without any additional text:
{{
  "questions": [
    {{
      "question": "string",
      "options": ["string", "string", "string", "string"],
      "correct_answer": "string",
      "explanation": "string"
    }}
  ]
}}"""


def build_quiz_prompt(
    industry: str,
    skills: Optional[Sequence[str]] = None,
    count: int = 10,
    option_count: int = 4,
) -> str:
    """
    Build the quiz prompt.

    Args:
        industry: User's industry label
        skills: User's skills, used to focus the questions
        count: Number of questions to request
        option_count: Options per question

    Returns:
        Prompt text
    """
    skills_clause = f" with expertise in {', '.join(skills)}" if skills else ""
    return QUIZ_PROMPT.format(
        count=count,
        industry=industry,
        skills_clause=skills_clause,
        option_count=option_count,
    )


# ============================================================================
# IMPROVEMENT TIP PROMPT
# ============================================================================

IMPROVEMENT_TIP_PROMPT = """The user got the following {industry} technical interview questions wrong:

{wrong_answers}

Based on these mistakes, provide a concise, specific improvement tip.
Focus on the knowledge gaps revealed by these wrong answers.
Keep the response under 2 sentences and make it encouraging.
Don't explicitly mention the mistakes, instead focus on what to learn/practice."""


def build_improvement_tip_prompt(industry: str, wrong: List[QuestionResult]) -> str:
    """
    Build the improvement-tip prompt from the incorrectly answered questions.

    Args:
        industry: User's industry label
        wrong: Results whose is_correct is False

    Returns:
        Prompt text
    """
    wrong_answers = "\n\n".join(
        f'Question: "{r.question}"\n'
        f'Correct Answer: "{r.correct_answer}"\n'
        f'User Answer: "{r.user_answer or "(no answer)"}"'
        for r in wrong
    )
    return IMPROVEMENT_TIP_PROMPT.format(industry=industry, wrong_answers=wrong_answers)
