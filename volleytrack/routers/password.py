from fastapi import APIRouter

from volleytrack.schemas import PasswordCheck, PasswordStrengthResponse
from volleytrack.utils.password_strength import evaluate_password_strength

router = APIRouter(prefix="/api", tags=["password"])


@router.post("/password-strength", response_model=PasswordStrengthResponse)
async def password_strength(payload: PasswordCheck):
    """Score a candidate password for the sign-up form meter."""
    strength = evaluate_password_strength(payload.password)
    return PasswordStrengthResponse(
        score=strength.score,
        label=strength.label,
        color=strength.color,
        bg_color=strength.bg_color,
        feedback=list(strength.feedback),
    )
