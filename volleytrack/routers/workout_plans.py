from typing import Any

from fastapi import APIRouter, Body, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from volleytrack.database import get_db
from volleytrack.dependencies import current_user_id, require_valid
from volleytrack.events import FUNNEL, log_event
from volleytrack.schemas import WorkoutPlanDetail, WorkoutPlanListResponse, WorkoutPlanResponse
from volleytrack.services import workout_plans as service
from volleytrack.validators.workout_plans import (
    validate_create_workout_plan,
    validate_list_workout_plans_query,
    validate_wizard_step,
)

router = APIRouter(prefix="/api/workout-plans", tags=["workout-plans"])


@router.post("", response_model=WorkoutPlanResponse, status_code=status.HTTP_201_CREATED)
async def create_workout_plan(
    payload: Any = Body(None),
    user_id: str = Depends(current_user_id),
    session: AsyncSession = Depends(get_db),
):
    data = require_valid(validate_create_workout_plan(payload))
    plan = await service.create_workout_plan(session, user_id, data)
    await log_event(session, FUNNEL, "workout_plan_created", {
        "plan_id": plan.id,
        "category_id": plan.category_id,
        "total_sessions": plan.total_sessions,
    })
    return plan


@router.get("", response_model=WorkoutPlanListResponse)
async def list_workout_plans(
    request: Request,
    user_id: str = Depends(current_user_id),
    session: AsyncSession = Depends(get_db),
):
    query = require_valid(validate_list_workout_plans_query(dict(request.query_params)))
    return await service.list_workout_plans(session, user_id, query)


@router.post("/wizard/steps/{step}")
async def validate_wizard_step_payload(
    step: int,
    payload: Any = Body(None),
    user_id: str = Depends(current_user_id),
):
    """Check one wizard step in isolation and echo back its normalized form."""
    value = require_valid(validate_wizard_step(step, payload))
    return {"step": step, "data": value.model_dump(mode="json", by_alias=True)}


@router.get("/{plan_id}", response_model=WorkoutPlanDetail, response_model_exclude_none=True)
async def get_workout_plan(
    plan_id: str,
    user_id: str = Depends(current_user_id),
    session: AsyncSession = Depends(get_db),
):
    return await service.get_workout_plan(session, user_id, plan_id)


@router.delete("/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_workout_plan(
    plan_id: str,
    user_id: str = Depends(current_user_id),
    session: AsyncSession = Depends(get_db),
):
    await service.delete_workout_plan(session, user_id, plan_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
