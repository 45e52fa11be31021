"""
Prompts for Industry Insight Generation.

One fixed-shape prompt per industry. The generator must answer with a single
JSON object whose keys match IndustryInsightPayload; anything else is
rejected as corrupt.
"""


# ============================================================================
# INDUSTRY INSIGHT PROMPT
# ============================================================================

INDUSTRY_INSIGHT_PROMPT = """Analyze the current state of the {industry} industry and provide insights in ONLY the following JSON format without any additional notes or explanations:

{{
  "salary_ranges": [
    {{"role": "string", "min": number, "max": number, "median": number, "location": "string"}}
  ],
  "growth_rate": number,
  "demand_level": "High" | "Medium" | "Low",
  "top_skills": ["skill1", "skill2"],
  "market_outlook": "Positive" | "Neutral" | "Negative",
  "key_trends": ["trend1", "trend2"],
  "recommended_skills": ["skill1", "skill2"]
}}

=== RULES ===
1. Return ONLY the JSON. No markdown fences, no commentary.
2. Include at least 5 common roles in salary_ranges; amounts are yearly, in USD, with min <= median <= max.
3. growth_rate is a percentage (e.g. 7.5 for 7.5%).
4. Include at least 5 entries each in top_skills, key_trends and recommended_skills."""


def build_industry_insight_prompt(industry: str) -> str:
    """
    Build the insight prompt for an industry.

    Args:
        industry: Industry label (e.g. "tech-software-development")

    Returns:
        Prompt text
    """
    return INDUSTRY_INSIGHT_PROMPT.format(industry=industry)
