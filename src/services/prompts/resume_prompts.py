"""
Prompts for Resume Text Improvement.

Deterministic template: the same (text, section, industry) always yields the
same prompt, so callers and tests can assert on its content.
"""

from typing import Optional


RESUME_IMPROVEMENT_PROMPT = """As an expert resume writer, improve the following {section_label} description for a {industry} professional.
Make it more impactful, quantifiable, and aligned with industry standards.

Current content: "{current_text}"

Requirements:
1. Use action verbs
2. Include metrics and results where possible
3. Highlight relevant technical skills
4. Keep it concise but detailed
5. Focus on achievements over responsibilities
6. Use industry-specific keywords
7. NEVER invent employers, titles, numbers or skills that are not implied by the current content

Format the response as a single paragraph without any additional text or explanations."""


def build_resume_improvement_prompt(
    current_text: str,
    section_label: str,
    industry: Optional[str] = None,
) -> str:
    """
    Build the improvement prompt for one resume fragment.

    Args:
        current_text: The user's current text for the section
        section_label: Section the text belongs to (e.g. "work-experience")
        industry: The user's industry, when known

    Returns:
        Prompt text embedding both the text and the section label
    """
    return RESUME_IMPROVEMENT_PROMPT.format(
        current_text=current_text,
        section_label=section_label,
        industry=industry or "general",
    )
