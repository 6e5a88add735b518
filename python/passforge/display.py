"""
Text rendering shared by the command line and the interactive menu.
"""

from typing import List

from .utils.strength import MAX_SCORE, EvaluationResult

RULE_WIDTH = 50

EXAMPLES = """
💡 PASSWORD EXAMPLES
═══════════════════

🔹 Simple (letters and digits only):
   AbC123XyZ789

🔹 Medium (some special characters):
   MyP@ssw0rd2024!

🔹 Complex (all character types):
   X7#mK9$nR2@vL4&

🔹 Very complex (long and varied):
   aB3$fG7!jK2@nM8%qR5^tY9*

🔹 Readable (no look-alike characters):
   BigHouse23!Jump

💡 Recommendations:
• At least 12 characters for everyday accounts
• At least 16 characters for important accounts
• Use every character type
• Avoid dictionary words and personal data
• Use a unique password for every service
"""


def boxed(password: str) -> str:
    """Draw a frame around a password."""
    bar = "─" * (len(password) + 2)
    return f"┌{bar}┐\n│ {password} │\n└{bar}┘"


def rating_line(evaluation: EvaluationResult) -> str:
    """Rating symbol, label and score on one line."""
    strength = evaluation.strength
    return f"{strength.symbol} {strength.label} ({evaluation.score}/{MAX_SCORE} points)"


def analysis_lines(evaluation: EvaluationResult) -> List[str]:
    """Rating followed by the indented feedback items."""
    return [rating_line(evaluation)] + [f"   {item}" for item in evaluation.feedback]


def numbered(index: int, password: str, evaluation: EvaluationResult) -> str:
    """Line of a batch listing: right-aligned index, password, rating symbol."""
    return f"{index}.".rjust(3) + f" {password} {evaluation.strength.symbol}"


def status_icon(enabled: bool) -> str:
    """On/off marker for a settings line."""
    return "✅ on" if enabled else "❌ off"
