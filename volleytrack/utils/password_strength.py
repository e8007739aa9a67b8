"""Password strength scoring for sign-up forms.

Scores 0-4 from length, character variety and a couple of penalties for
guessable shapes. No state, no I/O.
"""
import re
from dataclasses import dataclass

LOWERCASE = re.compile(r"[a-z]")
UPPERCASE = re.compile(r"[A-Z]")
DIGIT = re.compile(r"[0-9]")
SPECIAL = re.compile(r"""[!@#$%^&*()_+\-=\[\]{};':"\\|,.<>/?]""")

COMMON_PATTERNS = [
    re.compile(r"^12345"),
    re.compile(r"^password", re.IGNORECASE),
    re.compile(r"^qwerty", re.IGNORECASE),
    re.compile(r"^admin", re.IGNORECASE),
    re.compile(r"^letmein", re.IGNORECASE),
    re.compile(r"^welcome", re.IGNORECASE),
    re.compile(r"^monkey", re.IGNORECASE),
    re.compile(r"^dragon", re.IGNORECASE),
    re.compile(r"^master", re.IGNORECASE),
    re.compile(r"^123456789"),
    re.compile(r"(.)\1{2,}"),  # aaa, 111
]

_LETTERS = "abcdefghijklmnopqrstuvwxyz"
_DIGITS = "0123456789"
SEQUENCES = [seq[i:i + 3] for seq in (_LETTERS, _DIGITS) for i in range(len(seq) - 2)]
SEQUENTIAL = re.compile("|".join(SEQUENCES), re.IGNORECASE)

AVOID_COMMON = "Avoid common patterns"
AVOID_SEQUENTIAL = "Avoid sequential characters"

# score -> (label, text color, bar color)
LEVELS = {
    0: ("Weak", "text-red-700", "bg-red-500"),
    1: ("Weak", "text-red-700", "bg-red-500"),
    2: ("Fair", "text-orange-700", "bg-orange-500"),
    3: ("Good", "text-yellow-700", "bg-yellow-500"),
    4: ("Strong", "text-green-700", "bg-green-500"),
}

MAX_SCORE = 4


@dataclass(frozen=True)
class PasswordStrength:
    score: int = 0
    label: str = ""
    color: str = ""
    bg_color: str = ""
    feedback: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "label": self.label,
            "color": self.color,
            "bgColor": self.bg_color,
            "feedback": list(self.feedback),
        }


def evaluate_password_strength(password: str) -> PasswordStrength:
    if not password:
        return PasswordStrength()

    score = 0
    feedback = []

    if len(password) >= 8:
        score += 1
    else:
        feedback.append("Use at least 8 characters")
    if len(password) >= 12:
        score += 1

    has_lower = bool(LOWERCASE.search(password))
    has_upper = bool(UPPERCASE.search(password))
    if has_lower and has_upper:
        score += 1
    elif not has_lower and not has_upper:
        feedback.append("Add both uppercase and lowercase letters")
    elif not has_lower:
        feedback.append("Add lowercase letters")
    else:
        feedback.append("Add uppercase letters")

    if DIGIT.search(password):
        score += 1
    else:
        feedback.append("Add numbers")

    if SPECIAL.search(password):
        score += 1
    else:
        feedback.append("Add special characters (!@#$%^&*)")

    if any(pattern.search(password) for pattern in COMMON_PATTERNS):
        score = max(0, score - 2)
        feedback.insert(0, AVOID_COMMON)

    if SEQUENTIAL.search(password):
        score = max(0, score - 1)
        if AVOID_COMMON not in feedback:
            feedback.insert(0, AVOID_SEQUENTIAL)

    score = min(MAX_SCORE, score)
    label, color, bg_color = LEVELS[score]
    return PasswordStrength(score=score, label=label, color=color, bg_color=bg_color, feedback=tuple(feedback))
