# -*- coding: utf-8 -*-
"""Rotating affirmations shown beside the weight chart."""

from __future__ import annotations

from typing import Optional

from .config import settings

AFFIRMATIONS = (
    "Every healthy choice you make is an investment in your future self.",
    "Progress, not perfection, is the goal.",
    "Your body is capable of amazing things.",
    "Small steps lead to big changes.",
    "You are stronger than you think.",
    "Consistency beats perfection every time.",
    "Your health journey is unique and valuable.",
    "Every day is a new opportunity to care for yourself.",
    "You deserve to feel strong and confident.",
    "Trust the process and celebrate small wins.",
)


def affirmation_at(tick: int) -> str:
    return AFFIRMATIONS[tick % len(AFFIRMATIONS)]


class AffirmationRotator:
    """Maps elapsed seconds to the affirmation currently on screen."""

    def __init__(self, interval: Optional[float] = None) -> None:
        self.interval = interval if interval is not None else settings.affirmation_interval
        if self.interval <= 0:
            raise ValueError("interval must be positive")

    def current(self, elapsed: float) -> str:
        return affirmation_at(int(max(elapsed, 0.0) // self.interval))
