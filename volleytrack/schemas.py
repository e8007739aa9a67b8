from datetime import date, datetime, timezone
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


def _iso_utc(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


Timestamp = Annotated[datetime, PlainSerializer(_iso_utc, return_type=str)]


class ResponseModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ExerciseResponse(ResponseModel):
    id: str
    name: str
    sets: int
    repetitions: str
    difficulty: str
    description: Optional[str] = None
    order: int


class CategoryResponse(ResponseModel):
    id: str
    name: str
    focus_area: str
    key_objective: str
    exercises: list[ExerciseResponse]
    created_at: Timestamp
    updated_at: Timestamp


class CategorySummary(ResponseModel):
    id: str
    name: str
    focus_area: str
    key_objective: str
    exercise_count: int
    created_at: Timestamp
    updated_at: Timestamp


class CategoryListResponse(ResponseModel):
    categories: list[CategorySummary]
    total: int
    offset: int
    limit: int


class ReorderExercisesResponse(ResponseModel):
    exercises: list[ExerciseResponse]


class PlanExercise(ResponseModel):
    """Exercise as seen from a plan: no position, category owns that."""
    id: str
    name: str
    sets: int
    repetitions: str
    difficulty: str
    description: Optional[str] = None


class WorkoutPlanResponse(ResponseModel):
    id: str
    user_id: str
    category_id: str
    start_date: date
    number_of_weeks: int
    selected_days: list[int]
    selected_exercise_ids: list[str]
    total_sessions: int
    created_at: Timestamp


class WorkoutPlanDetail(WorkoutPlanResponse):
    category_name: str
    exercises: list[PlanExercise]


class WorkoutPlanSummary(ResponseModel):
    id: str
    category_id: str
    category_name: str
    start_date: date
    number_of_weeks: int
    selected_days: list[int]
    exercise_count: int
    total_sessions: int
    created_at: Timestamp


class WorkoutPlanListResponse(ResponseModel):
    plans: list[WorkoutPlanSummary]
    total: int
    offset: int
    limit: int


class PasswordCheck(BaseModel):
    password: str = ""


class PasswordStrengthResponse(ResponseModel):
    score: int
    label: str
    color: str
    bg_color: str
    feedback: list[str]


class ErrorDetail(BaseModel):
    field: Optional[str]
    message: str


class ErrorResponse(ResponseModel):
    error: str
    message: str
    status_code: int
    timestamp: Timestamp
    details: list[ErrorDetail] = []
