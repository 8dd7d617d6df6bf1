"""Breathing exercise timer.

A session counts down once per second from one of three presets while cycling
through a fixed 4 s inhale / 4 s hold / 6 s exhale pattern.  The timer is pure
state; something else (see ``services.breathing.runner``) calls ``tick()``.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List


class BreathPhase(str, Enum):
    INHALE = "inhale"
    HOLD = "hold"
    EXHALE = "exhale"


INHALE_SECONDS = 4
HOLD_SECONDS = 4
EXHALE_SECONDS = 6
CYCLE_SECONDS = INHALE_SECONDS + HOLD_SECONDS + EXHALE_SECONDS

PRESETS: Dict[int, str] = {
    60: "1 Minute",
    180: "3 Minutes",
    300: "5 Minutes",
}
DEFAULT_DURATION = 180

INSTRUCTIONS = {
    BreathPhase.INHALE: "Breathe In",
    BreathPhase.HOLD: "Hold",
    BreathPhase.EXHALE: "Breathe Out",
}


class InvalidPresetError(ValueError):
    """Raised for a session length that is not one of PRESETS."""


def phase_at(elapsed_seconds: int) -> BreathPhase:
    position = elapsed_seconds % CYCLE_SECONDS
    if position < INHALE_SECONDS:
        return BreathPhase.INHALE
    if position < INHALE_SECONDS + HOLD_SECONDS:
        return BreathPhase.HOLD
    return BreathPhase.EXHALE


def format_clock(seconds: int) -> str:
    """Render seconds as ``m:ss``."""
    return f"{seconds // 60}:{seconds % 60:02d}"


def validate_preset(duration: int) -> int:
    if duration not in PRESETS:
        raise InvalidPresetError(f"Unsupported session length {duration}s; choose one of {sorted(PRESETS)}")
    return duration


@dataclass
class TimerSnapshot:
    selected_duration: int
    remaining: int
    active: bool
    phase: BreathPhase
    instruction: str
    display: str

    def to_dict(self) -> dict:
        return {
            "selected_duration": self.selected_duration,
            "remaining": self.remaining,
            "active": self.active,
            "phase": self.phase.value,
            "instruction": self.instruction,
            "display": self.display,
        }


@dataclass
class BreathingTimer:
    """Transient countdown state for one breathing session."""
    selected_duration: int = DEFAULT_DURATION
    remaining: int = DEFAULT_DURATION
    active: bool = False
    phase: BreathPhase = BreathPhase.INHALE

    @classmethod
    def for_duration(cls, duration: int) -> "BreathingTimer":
        validate_preset(duration)
        return cls(selected_duration=duration, remaining=duration)

    @property
    def elapsed(self) -> int:
        return self.selected_duration - self.remaining

    @property
    def finished(self) -> bool:
        return self.remaining == 0

    def start(self) -> None:
        """Resume, or begin a fresh session if the last one ran out."""
        if self.remaining == 0:
            self.remaining = self.selected_duration
            self.phase = BreathPhase.INHALE
        self.active = True

    def pause(self) -> None:
        self.active = False

    def reset(self) -> None:
        self.active = False
        self.remaining = self.selected_duration
        self.phase = BreathPhase.INHALE

    def can_select_duration(self) -> bool:
        return not self.active and self.remaining == self.selected_duration

    def select_duration(self, duration: int) -> bool:
        """Switch preset; only honoured while stopped at full time.

        Returns whether the selection was applied.
        """
        validate_preset(duration)
        if not self.can_select_duration():
            return False
        self.selected_duration = duration
        self.remaining = duration
        return True

    def tick(self) -> bool:
        """Advance one second.  Returns False when nothing happened."""
        if not self.active or self.remaining <= 0:
            return False

        # phase is taken from the elapsed time before this second is consumed
        self.phase = phase_at(self.elapsed)
        self.remaining -= 1

        if self.remaining == 0:
            self.active = False
            self.phase = BreathPhase.INHALE
        return True

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            selected_duration=self.selected_duration,
            remaining=self.remaining,
            active=self.active,
            phase=self.phase,
            instruction=INSTRUCTIONS[self.phase],
            display=format_clock(self.remaining),
        )


def preset_catalog() -> List[dict]:
    return [{"name": name, "duration": duration} for duration, name in PRESETS.items()]


def pattern_description() -> dict:
    return {
        "inhale": INHALE_SECONDS,
        "hold": HOLD_SECONDS,
        "exhale": EXHALE_SECONDS,
        "cycle": CYCLE_SECONDS,
    }
