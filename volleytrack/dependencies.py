"""Request-scoped helpers shared by the routers."""
import logging
from typing import Optional

from fastapi import Header

from volleytrack.errors import RequestValidationFailed, UnauthorizedError
from volleytrack.validators.common import ValidationResult

logger = logging.getLogger(__name__)


async def current_user_id(x_user_id: Optional[str] = Header(None)) -> str:
    """Identity of the caller, set by the gateway in front of this service."""
    if not x_user_id or not x_user_id.strip():
        raise UnauthorizedError("User not authenticated")
    return x_user_id.strip()


def require_valid(result: ValidationResult):
    """Return the normalized value or raise a 400 carrying every field error."""
    if not result.ok:
        logger.warning(f"Rejected request: {[error.to_dict() for error in result.errors]}")
        raise RequestValidationFailed.from_result(result)
    return result.value
