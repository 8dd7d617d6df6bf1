"""Rule-based quick tips shown next to today's check-in."""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import List

MAX_TIPS = 3


@dataclass
class QuickTip:
    title: str
    description: str
    action: str

    def to_dict(self) -> dict:
        return asdict(self)


def quick_tips(mood: int, stress_level: int) -> List[QuickTip]:
    tips: List[QuickTip] = []

    if mood <= 2:
        tips.append(QuickTip(
            "Practice Self-Compassion",
            "Be kind to yourself today. You're doing your best.",
            "Try a gentle breathing exercise",
        ))
        tips.append(QuickTip(
            "Listen to Uplifting Music",
            "Music can help shift your mood naturally.",
            "Play your favorite upbeat songs",
        ))
    elif mood >= 4:
        tips.append(QuickTip(
            "Share Your Joy",
            "Your positive energy can inspire others.",
            "Connect with a friend or loved one",
        ))

    if stress_level >= 7:
        tips.append(QuickTip(
            "Take a Mental Break",
            "High stress detected. Time to pause and reset.",
            "Try a 5-minute meditation",
        ))
        tips.append(QuickTip(
            "Progressive Muscle Relaxation",
            "Release physical tension to calm your mind.",
            "Tense and relax each muscle group",
        ))
    elif stress_level <= 3:
        tips.append(QuickTip(
            "Maintain Your Balance",
            "You're in a great mental space. Keep it going!",
            "Practice gratitude for 2 minutes",
        ))

    if mood <= 3 and stress_level >= 6:
        tips.append(QuickTip(
            "Gentle Movement",
            "Light exercise can improve both mood and stress.",
            "Take a 10-minute walk outside",
        ))

    return tips[:MAX_TIPS]
