"""Prompt templates for wellness suggestions."""
from __future__ import annotations

from typing import Dict, List, Optional

SYSTEM_PROMPT = (
    "You are a professional wellness coach and mental health advocate. "
    "Provide helpful, evidence-based suggestions that are safe and appropriate. "
    "Never provide medical advice or diagnose conditions."
)

RESPONSE_SHAPE = """{
  "suggestions": [
    {
      "text": "specific actionable suggestion",
      "type": "activity|mindfulness|exercise|social|professional"
    }
  ]
}"""

GUIDELINES = """Focus on:
- Immediate, practical actions they can take today
- Evidence-based wellness techniques
- Personalized recommendations based on their mood and stress levels
- Positive, encouraging tone
- Suggestions that take 5-30 minutes to complete

Keep suggestions concise (1-2 sentences each)."""


def build_user_prompt(
    mood_score: int,
    stress_level: int,
    journal_text: Optional[str] = None,
    age: Optional[int] = None,
    gender: Optional[str] = None,
) -> str:
    lines = [
        "As a wellness coach, provide 3-4 personalized, actionable wellness suggestions for someone with:",
        f"- Mood score: {mood_score}/5 (1=very low, 5=excellent)",
        f"- Stress level: {stress_level}/10 (1=very relaxed, 10=very stressed)",
    ]
    if age:
        lines.append(f"- Age: {age}")
    if gender:
        lines.append(f"- Gender: {gender}")
    if journal_text:
        lines.append(f'- Journal entry: "{journal_text}"')

    return "\n".join(lines) + (
        "\n\nProvide suggestions in the following JSON format:\n"
        f"{RESPONSE_SHAPE}\n\n{GUIDELINES}"
    )


def build_messages(**kwargs) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_user_prompt(**kwargs)},
    ]
