"""
Prompts for the career coach workflows.

Each prompt module provides the template and builder for one workflow:
- insight_prompts: Per-industry market report
- resume_prompts: Resume fragment improvement
- quiz_prompts: Interview quiz and improvement tip
"""

from src.services.prompts.insight_prompts import build_industry_insight_prompt
from src.services.prompts.quiz_prompts import build_improvement_tip_prompt, build_quiz_prompt
from src.services.prompts.resume_prompts import build_resume_improvement_prompt

__all__ = [
    "build_industry_insight_prompt",
    "build_resume_improvement_prompt",
    "build_quiz_prompt",
    "build_improvement_tip_prompt",
]
