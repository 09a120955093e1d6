"""LLM prompt templates for national priority suggestion.

The model is asked for a bare JSON array of priority codes; anything else
in the reply is ignored by the parser.
"""

PRIORITY_SUGGESTION_PROMPT = """Analyze this Moroccan innovation:
PROBLEM: {problem}
SOLUTION: {solution}
CATEGORY: {category}

Based on Morocco's national strategies (Digital Morocco 2030, Green Plan, Vision 2030, Youth Employment, Women Entrepreneurship, Rural Development, Healthcare Improvement), return ONLY the relevant priority codes as a JSON array.

Valid codes:
{codes}

Examples:
- "AI platform for rural farmers" → ["digital_morocco", "green_morocco", "rural_development"]
- "Telemedicine app for youth" → ["digital_morocco", "healthcare_improvement", "youth_employment"]
- "E-commerce for women artisans" → ["women_entrepreneurship", "digital_morocco", "youth_employment"]

Return ONLY the JSON array, no explanation, no extra text."""


def build_priority_prompt(problem: str, solution: str, category: str, codes: list[str]) -> str:
    """Format the priority suggestion prompt for one idea."""
    code_lines = "\n".join(f'- "{code}"' for code in codes)
    return PRIORITY_SUGGESTION_PROMPT.format(
        problem=problem,
        solution=solution,
        category=category,
        codes=code_lines,
    )
