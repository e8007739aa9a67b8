"""Request validators for workout plans and the 3-step creation wizard.

The wizard runs category -> commitment -> exercises. Each step is checked on
its own so a client can collect a plan across three requests; ordering of the
steps is up to the caller.
"""
from typing import Any, ClassVar, Optional

from pydantic import Field

from volleytrack.validators.common import (
    FieldError,
    IdList,
    IsoDate,
    NonEmptyId,
    RequestModel,
    SelectedDays,
    ValidationResult,
    is_today_or_later,
    run_validation,
    strict_int,
)

NumberOfWeeks = strict_int(1, 12)


def start_date_not_in_past(value: Any) -> list[FieldError]:
    if is_today_or_later(value.start_date):
        return []
    return [FieldError("startDate", "Start date must be today or in the future")]


class CreateWorkoutPlanRequest(RequestModel):
    category_id: NonEmptyId
    start_date: IsoDate
    number_of_weeks: NumberOfWeeks
    selected_days: SelectedDays
    selected_exercise_ids: IdList

    error_messages: ClassVar[dict] = {
        ("categoryId", "string_too_short"): "Category ID is required",
        ("numberOfWeeks", "greater_than_equal"): "Must be at least 1 week",
        ("numberOfWeeks", "less_than_equal"): "Cannot exceed 12 weeks",
        ("selectedDays", "too_short"): "At least one training day required",
        ("selectedExerciseIds", "too_short"): "At least one exercise required",
    }


class ListWorkoutPlansQuery(RequestModel):
    category_id: Optional[str] = None
    limit: int = Field(50, ge=1, le=1000)
    offset: int = Field(0, ge=0)


class WizardStep1(RequestModel):
    """Category selection."""
    selected_category_id: NonEmptyId


class WizardStep2(RequestModel):
    """Commitment: when to start, for how long, on which days."""
    start_date: IsoDate
    number_of_weeks: NumberOfWeeks
    selected_days: SelectedDays


class WizardStep3(RequestModel):
    """Exercise selection."""
    selected_exercise_ids: IdList


def validate_create_workout_plan(data: Any) -> ValidationResult[CreateWorkoutPlanRequest]:
    return run_validation(CreateWorkoutPlanRequest, data, start_date_not_in_past)


def validate_list_workout_plans_query(data: Any) -> ValidationResult[ListWorkoutPlansQuery]:
    return run_validation(ListWorkoutPlansQuery, data)


def validate_wizard_step1(data: Any) -> ValidationResult[WizardStep1]:
    return run_validation(WizardStep1, data)


def validate_wizard_step2(data: Any) -> ValidationResult[WizardStep2]:
    return run_validation(WizardStep2, data, start_date_not_in_past)


def validate_wizard_step3(data: Any) -> ValidationResult[WizardStep3]:
    return run_validation(WizardStep3, data)


def validate_wizard_step(step: int, data: Any) -> ValidationResult:
    validators = {1: validate_wizard_step1, 2: validate_wizard_step2, 3: validate_wizard_step3}
    if not isinstance(step, int) or isinstance(step, bool) or step not in validators:
        return ValidationResult(errors=[FieldError("step", "Wizard step must be 1, 2 or 3")])
    return validators[step](data)


def assemble_workout_plan(
    step1: WizardStep1, step2: WizardStep2, step3: WizardStep3
) -> CreateWorkoutPlanRequest:
    """Combine three already-validated steps into a plan request."""
    return CreateWorkoutPlanRequest.model_construct(
        category_id=step1.selected_category_id,
        start_date=step2.start_date,
        number_of_weeks=step2.number_of_weeks,
        selected_days=list(step2.selected_days),
        selected_exercise_ids=list(step3.selected_exercise_ids),
    )


def total_sessions(number_of_weeks: int, selected_days: list[int]) -> int:
    return number_of_weeks * len(selected_days)

