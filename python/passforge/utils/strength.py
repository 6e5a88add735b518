"""
Heuristic password strength scoring.

The score is the sum of three sub-scores:

- length: 1 (under 8), 2 (8-11), 3 (12-15), 4 (16 and more)
- variety: one point per character class present (lowercase, uppercase,
  digits, anything else)
- repetition: 1, 2 or 3 depending on the share of distinct characters

The total (0-11) maps onto five ordered strength levels.
"""

from enum import Enum
from typing import List, NamedTuple, Tuple


class StrengthLevel(Enum):
    """Qualitative rating with its display symbol."""

    VERY_WEAK = ("Very weak", "💀")
    WEAK = ("Weak", "⚠️")
    MEDIUM = ("Medium", "⚡")
    STRONG = ("Strong", "🛡️")
    VERY_STRONG = ("Very strong", "🔒")

    def __init__(self, label: str, symbol: str):
        self.label = label
        self.symbol = symbol

    @classmethod
    def from_score(cls, score: int) -> "StrengthLevel":
        if score <= 4:
            return cls.VERY_WEAK
        if score <= 6:
            return cls.WEAK
        if score <= 8:
            return cls.MEDIUM
        if score <= 10:
            return cls.STRONG
        return cls.VERY_STRONG


class EvaluationResult(NamedTuple):
    """Outcome of :func:`evaluate_strength`."""
    score: int
    strength: StrengthLevel
    feedback: Tuple[str, ...]
    length_score: int
    variety_score: int
    repetition_score: int


MAX_SCORE = 11

LENGTH_FEEDBACK = {
    1: "🔴 Too short (less than 8 characters)",
    2: "🟡 Medium length (8-11 characters)",
    3: "🟢 Good length (12-15 characters)",
    4: "🟢 Excellent length (16+ characters)",
}

VARIETY_FEEDBACK = {
    1: "🔴 Only one type of characters",
    2: "🟡 Two types of characters",
    3: "🟢 Three types of characters",
    4: "🟢 All types of characters",
}

REPETITION_FEEDBACK = {
    1: "🔴 Many repeated characters",
    2: "🟡 Some characters repeat",
    3: "🟢 Few repetitions",
}


def _length_score(password: str) -> int:
    length = len(password)
    if length < 8:
        return 1
    if length < 12:
        return 2
    if length < 16:
        return 3
    return 4


def _variety_score(password: str) -> int:
    has_lower = any('a' <= c <= 'z' for c in password)
    has_upper = any('A' <= c <= 'Z' for c in password)
    has_digit = any('0' <= c <= '9' for c in password)
    has_other = any(not ('a' <= c <= 'z' or 'A' <= c <= 'Z' or '0' <= c <= '9')
                    for c in password)
    return [has_lower, has_upper, has_digit, has_other].count(True)


def repetition_ratio(password: str) -> float:
    """Distinct characters divided by length; 0.0 for an empty string."""
    if not password:
        return 0.0
    return len(set(password)) / len(password)


def _repetition_score(password: str) -> int:
    ratio = repetition_ratio(password)
    if ratio < 0.5:
        return 1
    if ratio < 0.8:
        return 2
    return 3


def evaluate_strength(password: str) -> EvaluationResult:
    """
    Score a password.

    Args:
        password: Password to evaluate; callers reject empty input themselves

    Returns:
        EvaluationResult with the total score, rating and feedback lines
        ordered as length, variety, repetition
    """
    length_score = _length_score(password)
    variety_score = _variety_score(password)
    repetition_score = _repetition_score(password)

    feedback: List[str] = [LENGTH_FEEDBACK[length_score]]
    # A variety score of 0 has no feedback line
    if variety_score:
        feedback.append(VARIETY_FEEDBACK[variety_score])
    feedback.append(REPETITION_FEEDBACK[repetition_score])

    score = length_score + variety_score + repetition_score
    return EvaluationResult(
        score=score,
        strength=StrengthLevel.from_score(score),
        feedback=tuple(feedback),
        length_score=length_score,
        variety_score=variety_score,
        repetition_score=repetition_score,
    )
