"""Human-readable labels for mood scores and stress levels."""
from __future__ import annotations

MOOD_LABELS = {
    5: "Excellent",
    4: "Good",
    3: "Okay",
    2: "Low",
    1: "Very Low",
}


def mood_label(score: int) -> str:
    return MOOD_LABELS.get(score, "Unknown")


def stress_label(level: int) -> str:
    if level <= 2:
        return "Very Relaxed"
    if level <= 4:
        return "Calm"
    if level <= 6:
        return "Moderate"
    if level <= 8:
        return "Stressed"
    return "Very Stressed"


def stress_band(level: int) -> str:
    """Coarse low / medium / high band used for colouring charts."""
    if level <= 3:
        return "low"
    if level <= 6:
        return "medium"
    return "high"
