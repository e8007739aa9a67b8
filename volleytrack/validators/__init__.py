"""Request validators for categories, exercises and workout plans."""

from .common import FieldError, ValidationResult
from .categories import (
    validate_create_category,
    validate_update_category,
    validate_create_exercise,
    validate_update_exercise,
    validate_duplicate_exercise,
    validate_reorder_exercises,
    validate_list_categories_query,
)
from .workout_plans import (
    validate_create_workout_plan,
    validate_list_workout_plans_query,
    validate_wizard_step1,
    validate_wizard_step2,
    validate_wizard_step3,
    validate_wizard_step,
    assemble_workout_plan,
)

__all__ = [
    "FieldError",
    "ValidationResult",
    "validate_create_category",
    "validate_update_category",
    "validate_create_exercise",
    "validate_update_exercise",
    "validate_duplicate_exercise",
    "validate_reorder_exercises",
    "validate_list_categories_query",
    "validate_create_workout_plan",
    "validate_list_workout_plans_query",
    "validate_wizard_step1",
    "validate_wizard_step2",
    "validate_wizard_step3",
    "validate_wizard_step",
    "assemble_workout_plan",
]
