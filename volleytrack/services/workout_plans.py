"""Workout plans created through the wizard."""
import logging

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from volleytrack.errors import ForbiddenError, NotFoundError
from volleytrack.models import WorkoutCategory, WorkoutPlan, utcnow
from volleytrack.schemas import (
    PlanExercise,
    WorkoutPlanDetail,
    WorkoutPlanListResponse,
    WorkoutPlanResponse,
    WorkoutPlanSummary,
)
from volleytrack.validators.workout_plans import CreateWorkoutPlanRequest, ListWorkoutPlansQuery, total_sessions

logger = logging.getLogger(__name__)

UNKNOWN_CATEGORY = "Unknown Category"


def _plan_fields(plan: WorkoutPlan) -> dict:
    return {
        "id": plan.id,
        "user_id": plan.user_id,
        "category_id": plan.category_id,
        "start_date": plan.start_date,
        "number_of_weeks": plan.number_of_weeks,
        "selected_days": plan.selected_days,
        "selected_exercise_ids": plan.selected_exercise_ids,
        "total_sessions": total_sessions(plan.number_of_weeks, plan.selected_days),
        "created_at": plan.created_at,
    }


async def _owned_plan(session: AsyncSession, user_id: str, plan_id: str, action: str) -> WorkoutPlan:
    plan = await session.get(WorkoutPlan, plan_id)
    if plan is None:
        raise NotFoundError("Workout plan not found")
    if plan.user_id != user_id:
        raise ForbiddenError(f"You do not have permission to {action} this workout plan")
    return plan


async def create_workout_plan(
    session: AsyncSession, user_id: str, data: CreateWorkoutPlanRequest
) -> WorkoutPlanResponse:
    category = await session.get(WorkoutCategory, data.category_id)
    if category is None:
        raise NotFoundError("Category not found")

    category_exercise_ids = {exercise.id for exercise in category.exercises}
    for exercise_id in data.selected_exercise_ids:
        if exercise_id not in category_exercise_ids:
            raise NotFoundError(f"Exercise {exercise_id} does not belong to category")

    plan = WorkoutPlan(
        user_id=user_id,
        category_id=data.category_id,
        start_date=data.start_date,
        number_of_weeks=data.number_of_weeks,
        selected_days=list(data.selected_days),
        selected_exercise_ids=list(data.selected_exercise_ids),
        created_at=utcnow(),
    )
    session.add(plan)
    await session.commit()
    logger.info(f"User {user_id} created workout plan {plan.id} for category {category.id}")
    return WorkoutPlanResponse(**_plan_fields(plan))


async def get_workout_plan(session: AsyncSession, user_id: str, plan_id: str) -> WorkoutPlanDetail:
    """Plan with its category name and selected exercises resolved.

    A deleted category reads as "Unknown Category"; deleted exercises are skipped.
    """
    plan = await _owned_plan(session, user_id, plan_id, "access")

    category_name = UNKNOWN_CATEGORY
    exercises = []
    category = await session.get(WorkoutCategory, plan.category_id)
    if category is not None:
        category_name = category.name
        by_id = {exercise.id: exercise for exercise in category.exercises}
        exercises = [
            PlanExercise.model_validate(by_id[exercise_id])
            for exercise_id in plan.selected_exercise_ids
            if exercise_id in by_id
        ]

    return WorkoutPlanDetail(**_plan_fields(plan), category_name=category_name, exercises=exercises)


async def list_workout_plans(
    session: AsyncSession, user_id: str, query: ListWorkoutPlansQuery
) -> WorkoutPlanListResponse:
    stmt = select(WorkoutPlan).where(WorkoutPlan.user_id == user_id)
    if query.category_id:
        stmt = stmt.where(WorkoutPlan.category_id == query.category_id)

    total = await session.scalar(select(func.count()).select_from(stmt.subquery()))

    result = await session.execute(
        stmt.order_by(WorkoutPlan.created_at.desc()).offset(query.offset).limit(query.limit)
    )
    plans = result.scalars().all()

    category_ids = {plan.category_id for plan in plans}
    names = {}
    if category_ids:
        rows = await session.execute(
            select(WorkoutCategory.id, WorkoutCategory.name).where(WorkoutCategory.id.in_(category_ids))
        )
        names = dict(rows.all())

    summaries = [
        WorkoutPlanSummary(
            id=plan.id,
            category_id=plan.category_id,
            category_name=names.get(plan.category_id, UNKNOWN_CATEGORY),
            start_date=plan.start_date,
            number_of_weeks=plan.number_of_weeks,
            selected_days=plan.selected_days,
            exercise_count=len(plan.selected_exercise_ids),
            total_sessions=total_sessions(plan.number_of_weeks, plan.selected_days),
            created_at=plan.created_at,
        )
        for plan in plans
    ]
    return WorkoutPlanListResponse(plans=summaries, total=total or 0, offset=query.offset, limit=query.limit)


async def delete_workout_plan(session: AsyncSession, user_id: str, plan_id: str) -> None:
    plan = await _owned_plan(session, user_id, plan_id, "delete")
    await session.delete(plan)
    await session.commit()
    logger.info(f"User {user_id} deleted workout plan {plan_id}")
