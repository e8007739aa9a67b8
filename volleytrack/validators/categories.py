"""Request validators for the workout categories admin API."""
from typing import Any, Literal, Optional

from pydantic import Field

from volleytrack.validators.common import (
    IdList,
    NonEmptyId,
    RequestModel,
    ValidationResult,
    require_any_field,
    run_validation,
    strict_int,
    trimmed,
)

Difficulty = Literal["easy", "medium", "challenging"]
DIFFICULTIES = ("easy", "medium", "challenging")

Name = trimmed(100)
FocusArea = trimmed(100)
KeyObjective = trimmed(500)
Sets = strict_int(1, 10)
Repetitions = trimmed(50)
Description = trimmed(500, min_length=0)


class CreateCategoryRequest(RequestModel):
    name: Name
    focus_area: FocusArea
    key_objective: KeyObjective


class UpdateCategoryRequest(RequestModel):
    name: Optional[Name] = None
    focus_area: Optional[FocusArea] = None
    key_objective: Optional[KeyObjective] = None


class CreateExerciseRequest(RequestModel):
    name: Name
    sets: Sets
    repetitions: Repetitions
    difficulty: Difficulty
    description: Optional[Description] = None


class UpdateExerciseRequest(RequestModel):
    name: Optional[Name] = None
    sets: Optional[Sets] = None
    repetitions: Optional[Repetitions] = None
    difficulty: Optional[Difficulty] = None
    description: Optional[Description] = None


class DuplicateExerciseRequest(RequestModel):
    target_category_id: NonEmptyId


class ReorderExercisesRequest(RequestModel):
    # Position in the list becomes the exercise's order; duplicates are left
    # for the caller to reject.
    exercise_ids: IdList


class ListCategoriesQuery(RequestModel):
    query: Optional[str] = None
    limit: int = Field(50, ge=1, le=1000)
    offset: int = Field(0, ge=0)


def validate_create_category(data: Any) -> ValidationResult[CreateCategoryRequest]:
    return run_validation(CreateCategoryRequest, data)


def validate_update_category(data: Any) -> ValidationResult[UpdateCategoryRequest]:
    return run_validation(UpdateCategoryRequest, data, require_any_field)


def validate_create_exercise(data: Any) -> ValidationResult[CreateExerciseRequest]:
    return run_validation(CreateExerciseRequest, data)


def validate_update_exercise(data: Any) -> ValidationResult[UpdateExerciseRequest]:
    return run_validation(UpdateExerciseRequest, data, require_any_field)


def validate_duplicate_exercise(data: Any) -> ValidationResult[DuplicateExerciseRequest]:
    return run_validation(DuplicateExerciseRequest, data)


def validate_reorder_exercises(data: Any) -> ValidationResult[ReorderExercisesRequest]:
    return run_validation(ReorderExercisesRequest, data)


def validate_list_categories_query(data: Any) -> ValidationResult[ListCategoriesQuery]:
    """Query-string values arrive as text; limit/offset are coerced to ints."""
    return run_validation(ListCategoriesQuery, data)
