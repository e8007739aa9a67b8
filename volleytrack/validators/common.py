"""Building blocks shared by the request validators.

A validator never raises: it parses raw input with a pydantic model, then runs
post-parse predicates, and hands back a ``ValidationResult`` carrying either the
normalized model or every ``FieldError`` found in that pass.
"""
import re
from dataclasses import dataclass, field
from datetime import date
from typing import Annotated, Any, Callable, Generic, Optional, TypeVar

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictInt,
    StringConstraints,
    ValidationError,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")

# Index matches DayOfWeek: 0 = Sunday
DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

NOT_AN_OBJECT_TYPES = {"model_type", "model_attributes_type", "dict_type"}


class RequestModel(BaseModel):
    """Base for request payloads: camelCase on the wire, unknown keys ignored."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


@dataclass(frozen=True)
class FieldError:
    field: Optional[str]  # dotted wire path, None for request-level messages
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


M = TypeVar("M", bound=BaseModel)


@dataclass
class ValidationResult(Generic[M]):
    value: Optional[M] = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def message(self) -> str:
        """First error message, used as the headline of a rejection."""
        return self.errors[0].message if self.errors else ""


Check = Callable[[Any], list[FieldError]]


def today() -> date:
    """Current local calendar date (local midnight)."""
    return date.today()


def parse_iso_date(value: Any) -> Optional[date]:
    """Return the date for a literal ``YYYY-MM-DD`` string, else None."""
    if not isinstance(value, str) or not ISO_DATE_PATTERN.fullmatch(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def is_today_or_later(value: date) -> bool:
    return value >= today()


def _iso_date(value: Any) -> date:
    parsed = parse_iso_date(value)
    if parsed is None:
        raise PydanticCustomError("iso_date", "Must be ISO 8601 date (YYYY-MM-DD)")
    return parsed


def _distinct_days(days: list[int]) -> list[int]:
    if len(set(days)) != len(days):
        raise PydanticCustomError("distinct_days", "Training days must not repeat")
    return sorted(days)


def trimmed(max_length: int, min_length: int = 1):
    return Annotated[str, StringConstraints(strip_whitespace=True, min_length=min_length, max_length=max_length)]


def strict_int(ge: int, le: Optional[int] = None):
    return Annotated[StrictInt, Field(ge=ge, le=le)]


IsoDate = Annotated[date, BeforeValidator(_iso_date)]
DayOfWeek = strict_int(0, 6)
SelectedDays = Annotated[list[DayOfWeek], Field(min_length=1), AfterValidator(_distinct_days)]
NonEmptyId = trimmed(255)
IdList = Annotated[list[NonEmptyId], Field(min_length=1)]


def require_any_field(value: BaseModel) -> list[FieldError]:
    """Partial updates must carry at least one field; null counts as absent."""
    if value.model_dump(exclude_none=True):
        return []
    return [FieldError(None, "At least one field must be provided")]


def _field_errors(model: type[BaseModel], exc: ValidationError) -> list[FieldError]:
    overrides = getattr(model, "error_messages", {})
    errors = []
    for item in exc.errors():
        loc = [str(part) for part in item["loc"]]
        if not loc and item["type"] in NOT_AN_OBJECT_TYPES:
            errors.append(FieldError(None, "Request body must be a JSON object"))
            continue
        key = (loc[0] if loc else None, item["type"])
        errors.append(FieldError(".".join(loc) or None, overrides.get(key, item["msg"])))
    return errors


def run_validation(model: type[M], data: Any, *checks: Check) -> ValidationResult[M]:
    """Parse ``data`` with ``model``; if the fields hold, run ``checks`` on the value."""
    try:
        value = model.model_validate(data)
    except ValidationError as exc:
        return ValidationResult(errors=_field_errors(model, exc))

    errors = [error for check in checks for error in check(value)]
    if errors:
        return ValidationResult(errors=errors)
    return ValidationResult(value=value)
