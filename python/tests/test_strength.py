"""
Unit tests for password strength evaluation.
"""

import pytest

from passforge.utils.password_generator import PasswordGenerator
from passforge.utils.randomness import HmacDrbg
from passforge.utils.strength import (
    LENGTH_FEEDBACK,
    REPETITION_FEEDBACK,
    VARIETY_FEEDBACK,
    StrengthLevel,
    evaluate_strength,
    repetition_ratio,
)


class TestSubScores:
    """Test each sub-score in isolation."""

    @pytest.mark.parametrize("length,expected", [
        (1, 1), (7, 1), (8, 2), (11, 2), (12, 3), (15, 3), (16, 4), (64, 4),
    ])
    def test_length_buckets(self, length, expected):
        """Test length bucket boundaries."""
        password = "".join(chr(0x21 + i % 90) for i in range(length))
        assert evaluate_strength(password).length_score == expected

    @pytest.mark.parametrize("password,expected", [
        ("abcdefgh", 1),
        ("ABCDEFGH", 1),
        ("12345678", 1),
        ("!@#$%^&*", 1),
        ("abcdEFGH", 2),
        ("abcdEF12", 3),
        ("abEF12!@", 4),
        ("    ", 1),  # whitespace counts as another character
        ("пароль", 1),
    ])
    def test_variety(self, password, expected):
        """Test character class counting."""
        assert evaluate_strength(password).variety_score == expected

    @pytest.mark.parametrize("password,expected", [
        ("aaaa", 1),     # 0.25
        ("aaab", 2),     # 0.5
        ("aabbc", 2),    # 0.6
        ("abcdd", 3),    # 0.8
        ("abcdef", 3),   # 1.0
    ])
    def test_repetition_buckets(self, password, expected):
        """Test repetition ratio boundaries."""
        assert evaluate_strength(password).repetition_score == expected

    def test_repetition_ratio_empty(self):
        """Test the ratio of an empty string is 0 rather than a division error."""
        assert repetition_ratio("") == 0.0
        assert repetition_ratio("ab") == 1.0


class TestEvaluateStrength:
    """Test the composite score and rating."""

    def test_repeated_single_letter(self):
        """Test a length 8 password of one repeated letter."""
        result = evaluate_strength("aaaaaaaa")

        assert result.length_score == 2
        assert result.variety_score == 1
        assert result.repetition_score == 1
        assert result.score == 4
        assert result.strength is StrengthLevel.VERY_WEAK

    def test_mixed_twelve_characters(self):
        """Test a varied 12 character password rates strong."""
        result = evaluate_strength("aB3$fG7!jK2@")

        assert result.length_score == 3
        assert result.variety_score == 4
        assert result.repetition_score == 3
        assert result.score == 10
        assert result.strength is StrengthLevel.STRONG

    def test_maximum_score(self):
        """Test a long varied password reaches the top rating."""
        result = evaluate_strength("aB3$fG7!jK2@nM8%")
        assert result.score == 11
        assert result.strength is StrengthLevel.VERY_STRONG

    def test_empty_password(self):
        """Test the empty string is scored without special casing."""
        result = evaluate_strength("")

        assert result.length_score == 1
        assert result.variety_score == 0
        assert result.repetition_score == 1
        assert result.score == 2
        assert result.strength is StrengthLevel.VERY_WEAK
        # No variety line when no class is present
        assert result.feedback == (LENGTH_FEEDBACK[1], REPETITION_FEEDBACK[1])

    def test_feedback_order(self):
        """Test feedback lines are ordered length, variety, repetition."""
        result = evaluate_strength("abcdEFGH")
        assert result.feedback == (LENGTH_FEEDBACK[2], VARIETY_FEEDBACK[2], REPETITION_FEEDBACK[3])

    @pytest.mark.parametrize("score,level", [
        (0, StrengthLevel.VERY_WEAK),
        (4, StrengthLevel.VERY_WEAK),
        (5, StrengthLevel.WEAK),
        (6, StrengthLevel.WEAK),
        (7, StrengthLevel.MEDIUM),
        (8, StrengthLevel.MEDIUM),
        (9, StrengthLevel.STRONG),
        (10, StrengthLevel.STRONG),
        (11, StrengthLevel.VERY_STRONG),
        (12, StrengthLevel.VERY_STRONG),
    ])
    def test_rating_buckets(self, score, level):
        """Test score to rating mapping."""
        assert StrengthLevel.from_score(score) is level

    def test_rating_examples(self):
        """Test one password per intermediate rating."""
        assert evaluate_strength("abcdefgh").strength is StrengthLevel.WEAK   # 2+1+3
        assert evaluate_strength("abcdefgH").strength is StrengthLevel.MEDIUM  # 2+2+3

    def test_levels_have_labels(self):
        """Test every level carries a label and a symbol."""
        labels = [level.label for level in StrengthLevel]
        assert labels == ["Very weak", "Weak", "Medium", "Strong", "Very strong"]
        assert all(level.symbol for level in StrengthLevel)

    def test_permutation_invariance(self):
        """Test shuffling the characters never changes the score."""
        shuffler = PasswordGenerator(rng=HmacDrbg("permutations"))
        for password in ["aB3$fG7!jK2@", "aaaaaaaa", "Passw0rd!!", "xyzzy 42"]:
            expected = evaluate_strength(password)
            chars = list(password)
            for _ in range(10):
                shuffler._shuffle(chars)
                assert evaluate_strength("".join(chars)) == expected


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
