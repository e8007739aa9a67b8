"""Workout categories and the exercises they own."""
import logging

from sqlalchemy import select, func, or_
from sqlalchemy.ext.asyncio import AsyncSession

from volleytrack.errors import ConflictError, NotFoundError
from volleytrack.models import Exercise, WorkoutCategory, utcnow
from volleytrack.schemas import CategoryListResponse, CategorySummary
from volleytrack.validators.categories import (
    CreateCategoryRequest,
    CreateExerciseRequest,
    DuplicateExerciseRequest,
    ListCategoriesQuery,
    ReorderExercisesRequest,
    UpdateCategoryRequest,
    UpdateExerciseRequest,
)

logger = logging.getLogger(__name__)


def _summary(category: WorkoutCategory) -> CategorySummary:
    return CategorySummary(
        id=category.id,
        name=category.name,
        focus_area=category.focus_area,
        key_objective=category.key_objective,
        exercise_count=len(category.exercises),
        created_at=category.created_at,
        updated_at=category.updated_at,
    )


def _find_exercise(category: WorkoutCategory, exercise_id: str) -> Exercise:
    for exercise in category.exercises:
        if exercise.id == exercise_id:
            return exercise
    raise NotFoundError("Exercise not found")


async def list_categories(session: AsyncSession, query: ListCategoriesQuery) -> CategoryListResponse:
    """Search by name or focus area (case-insensitive), newest first."""
    stmt = select(WorkoutCategory)
    if query.query:
        stmt = stmt.where(or_(
            WorkoutCategory.name.icontains(query.query, autoescape=True),
            WorkoutCategory.focus_area.icontains(query.query, autoescape=True),
        ))

    total = await session.scalar(select(func.count()).select_from(stmt.subquery()))

    result = await session.execute(
        stmt.order_by(WorkoutCategory.created_at.desc()).offset(query.offset).limit(query.limit)
    )
    categories = result.scalars().all()

    return CategoryListResponse(
        categories=[_summary(category) for category in categories],
        total=total or 0,
        offset=query.offset,
        limit=query.limit,
    )


async def create_category(session: AsyncSession, data: CreateCategoryRequest) -> WorkoutCategory:
    now = utcnow()
    category = WorkoutCategory(
        name=data.name,
        focus_area=data.focus_area,
        key_objective=data.key_objective,
        exercises=[],
        created_at=now,
        updated_at=now,
    )
    session.add(category)
    await session.commit()
    logger.info(f"Created category {category.id} ({category.name})")
    return category


async def get_category(session: AsyncSession, category_id: str) -> WorkoutCategory:
    category = await session.get(WorkoutCategory, category_id)
    if category is None:
        raise NotFoundError("Category not found")
    return category


async def update_category(session: AsyncSession, category_id: str, data: UpdateCategoryRequest) -> WorkoutCategory:
    category = await get_category(session, category_id)
    for name, value in data.model_dump(exclude_none=True).items():
        setattr(category, name, value)
    category.updated_at = utcnow()
    await session.commit()
    return category


async def delete_category(session: AsyncSession, category_id: str) -> None:
    """Delete a category together with its exercises. Plans keep their reference."""
    category = await get_category(session, category_id)
    await session.delete(category)
    await session.commit()
    logger.info(f"Deleted category {category_id}")


async def add_exercise(session: AsyncSession, category_id: str, data: CreateExerciseRequest) -> Exercise:
    category = await get_category(session, category_id)
    exercise = Exercise(
        name=data.name,
        sets=data.sets,
        repetitions=data.repetitions,
        difficulty=data.difficulty,
        description=data.description,
        order=len(category.exercises),
    )
    category.exercises.append(exercise)
    category.updated_at = utcnow()
    await session.commit()
    return exercise


async def update_exercise(
    session: AsyncSession, category_id: str, exercise_id: str, data: UpdateExerciseRequest
) -> Exercise:
    category = await get_category(session, category_id)
    exercise = _find_exercise(category, exercise_id)
    for name, value in data.model_dump(exclude_none=True).items():
        setattr(exercise, name, value)
    category.updated_at = utcnow()
    await session.commit()
    return exercise


async def delete_exercise(session: AsyncSession, category_id: str, exercise_id: str) -> None:
    """Remove an exercise and close the gap it leaves in the ordering."""
    category = await get_category(session, category_id)
    exercise = _find_exercise(category, exercise_id)
    category.exercises.remove(exercise)
    for index, remaining in enumerate(category.exercises):
        remaining.order = index
    category.updated_at = utcnow()
    await session.commit()


async def duplicate_exercise(
    session: AsyncSession, category_id: str, exercise_id: str, data: DuplicateExerciseRequest
) -> Exercise:
    """Copy an exercise to the end of the target category.

    A copy within the same category gets " (Copy)" appended to its name.
    """
    source = await get_category(session, category_id)
    target = await get_category(session, data.target_category_id)
    original = _find_exercise(source, exercise_id)

    same_category = source.id == target.id
    copy = Exercise(
        name=f"{original.name} (Copy)" if same_category else original.name,
        sets=original.sets,
        repetitions=original.repetitions,
        difficulty=original.difficulty,
        description=original.description,
        order=len(target.exercises),
    )
    target.exercises.append(copy)
    target.updated_at = utcnow()
    await session.commit()
    return copy


async def reorder_exercises(
    session: AsyncSession, category_id: str, data: ReorderExercisesRequest
) -> list[Exercise]:
    """Apply a full ordering; the list must name every exercise exactly once."""
    category = await get_category(session, category_id)
    ids = data.exercise_ids

    if len(ids) != len(category.exercises):
        raise ConflictError("Must provide all exercise IDs")
    if len(set(ids)) != len(ids):
        raise ConflictError("Duplicate exercise IDs")

    by_id = {exercise.id: exercise for exercise in category.exercises}
    if any(exercise_id not in by_id for exercise_id in ids):
        raise ConflictError("Invalid exercise ID")

    for index, exercise_id in enumerate(ids):
        by_id[exercise_id].order = index
    category.exercises = [by_id[exercise_id] for exercise_id in ids]
    category.updated_at = utcnow()
    await session.commit()
    return category.exercises
