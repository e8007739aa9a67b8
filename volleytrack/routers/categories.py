from typing import Any

from fastapi import APIRouter, Body, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from volleytrack.database import get_db
from volleytrack.dependencies import require_valid
from volleytrack.events import FEATURE, log_event
from volleytrack.schemas import CategoryListResponse, CategoryResponse, ExerciseResponse, ReorderExercisesResponse
from volleytrack.services import categories as service
from volleytrack.validators.categories import (
    validate_create_category,
    validate_create_exercise,
    validate_duplicate_exercise,
    validate_list_categories_query,
    validate_reorder_exercises,
    validate_update_category,
    validate_update_exercise,
)

router = APIRouter(prefix="/api/admin/workout-categories", tags=["workout-categories"])


@router.get("", response_model=CategoryListResponse)
async def list_categories(request: Request, session: AsyncSession = Depends(get_db)):
    """List categories, optionally filtered by ?query= on name or focus area."""
    query = require_valid(validate_list_categories_query(dict(request.query_params)))
    return await service.list_categories(session, query)


@router.post(
    "", response_model=CategoryResponse, response_model_exclude_none=True, status_code=status.HTTP_201_CREATED
)
async def create_category(payload: Any = Body(None), session: AsyncSession = Depends(get_db)):
    data = require_valid(validate_create_category(payload))
    category = await service.create_category(session, data)
    await log_event(session, FEATURE, "category_created", {"category_id": category.id})
    return category


@router.get("/{category_id}", response_model=CategoryResponse, response_model_exclude_none=True)
async def get_category(category_id: str, session: AsyncSession = Depends(get_db)):
    return await service.get_category(session, category_id)


@router.put("/{category_id}", response_model=CategoryResponse, response_model_exclude_none=True)
async def update_category(category_id: str, payload: Any = Body(None), session: AsyncSession = Depends(get_db)):
    data = require_valid(validate_update_category(payload))
    return await service.update_category(session, category_id, data)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(category_id: str, session: AsyncSession = Depends(get_db)):
    await service.delete_category(session, category_id)
    await log_event(session, FEATURE, "category_deleted", {"category_id": category_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{category_id}/exercises",
    response_model=ExerciseResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def add_exercise(category_id: str, payload: Any = Body(None), session: AsyncSession = Depends(get_db)):
    data = require_valid(validate_create_exercise(payload))
    exercise = await service.add_exercise(session, category_id, data)
    await log_event(session, FEATURE, "exercise_created", {"category_id": category_id, "exercise_id": exercise.id})
    return exercise


# Declared before /{exercise_id} so "reorder" is not taken for an id
@router.put(
    "/{category_id}/exercises/reorder", response_model=ReorderExercisesResponse, response_model_exclude_none=True
)
async def reorder_exercises(category_id: str, payload: Any = Body(None), session: AsyncSession = Depends(get_db)):
    data = require_valid(validate_reorder_exercises(payload))
    exercises = await service.reorder_exercises(session, category_id, data)
    return ReorderExercisesResponse(exercises=[ExerciseResponse.model_validate(e) for e in exercises])


@router.put(
    "/{category_id}/exercises/{exercise_id}", response_model=ExerciseResponse, response_model_exclude_none=True
)
async def update_exercise(
    category_id: str, exercise_id: str, payload: Any = Body(None), session: AsyncSession = Depends(get_db)
):
    data = require_valid(validate_update_exercise(payload))
    return await service.update_exercise(session, category_id, exercise_id, data)


@router.delete("/{category_id}/exercises/{exercise_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_exercise(category_id: str, exercise_id: str, session: AsyncSession = Depends(get_db)):
    await service.delete_exercise(session, category_id, exercise_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{category_id}/exercises/{exercise_id}/duplicate",
    response_model=ExerciseResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def duplicate_exercise(
    category_id: str, exercise_id: str, payload: Any = Body(None), session: AsyncSession = Depends(get_db)
):
    """Copy an exercise within its category or into another one."""
    data = require_valid(validate_duplicate_exercise(payload))
    return await service.duplicate_exercise(session, category_id, exercise_id, data)
