"""
passcraft.score

Coarse 0-10 strength score. Only the password length and the policy's
enabled classes count; the characters themselves are never inspected.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from .policy import GenerationPolicy

MAX_SCORE = 10
VARIETY_WEIGHT = 1.5


@dataclass(frozen=True)
class StrengthResult:
    score: int
    label: str
    color_tier: str


def length_points(length: int) -> int:
    if length >= 12:
        return 4
    if length >= 8:
        return 2
    if length >= 6:
        return 1
    return 0


def round_half_up(value: float) -> int:
    # 2.5 -> 3, 5.5 -> 6 (built-in round() would give 2 and 6)
    return int(math.floor(value + 0.5))


def calculate_strength(password: str, policy: GenerationPolicy) -> int:
    raw = length_points(len(password)) + policy.variety() * VARIETY_WEIGHT
    return max(0, min(MAX_SCORE, round_half_up(raw)))


def strength_info(strength: int) -> Tuple[str, str]:
    """Return (label, color tier) for a 0-10 score."""
    if strength <= 3:
        return "Weak", "red"
    elif strength <= 6:
        return "Medium", "yellow"
    else:
        return "Strong", "green"


def score(password: str, policy: GenerationPolicy) -> StrengthResult:
    strength = calculate_strength(password, policy)
    label, tier = strength_info(strength)
    return StrengthResult(score=strength, label=label, color_tier=tier)
