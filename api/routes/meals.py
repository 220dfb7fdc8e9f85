"""Meal log routes, every one scoped to the caller's session"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from api.dependencies import get_auth_context, get_meal_ledger
from api.responses import ERROR_RESPONSES
from domain.mappers import MealMapper
from domain.schemas.meal_schemas import (
    MealDetailResponse,
    MealListResponse,
    MealMetricsResponse,
    MealUpdateResponse,
)
from services import AuthorizationContext, MealLedger

router = APIRouter(prefix="/meals", tags=["Meals"], responses=ERROR_RESPONSES)


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_meal(
    payload: Any = Body(None),
    ctx: AuthorizationContext = Depends(get_auth_context),
    ledger: MealLedger = Depends(get_meal_ledger),
):
    """
    Log a meal for the current session.

    Body: {"name": str, "description": str, "is_on_diet": bool,
    "created_at": optional ISO8601 timestamp}
    """
    ledger.create_meal(ctx, payload)
    return Response(status_code=status.HTTP_201_CREATED)


@router.get("", response_model=MealListResponse)
def list_meals(
    ctx: AuthorizationContext = Depends(get_auth_context),
    ledger: MealLedger = Depends(get_meal_ledger),
):
    """All meals of the current session, oldest first. 404 when there are none."""
    return MealMapper.to_list_response(ledger.list_meals(ctx))


@router.get("/metrics", response_model=MealMetricsResponse)
def get_metrics(
    ctx: AuthorizationContext = Depends(get_auth_context),
    ledger: MealLedger = Depends(get_meal_ledger),
):
    """Meal totals and the current on-diet streak"""
    return MealMetricsResponse(metrics=ledger.get_metrics(ctx))


@router.get("/{meal_id}", response_model=MealDetailResponse)
def get_meal(
    meal_id: str,
    ctx: AuthorizationContext = Depends(get_auth_context),
    ledger: MealLedger = Depends(get_meal_ledger),
):
    return MealDetailResponse(meal=MealMapper.to_response(ledger.get_meal(ctx, meal_id)))


@router.put("/{meal_id}", response_model=MealUpdateResponse)
def update_meal(
    meal_id: str,
    payload: Any = Body(None),
    ctx: AuthorizationContext = Depends(get_auth_context),
    ledger: MealLedger = Depends(get_meal_ledger),
):
    """Replace name, description and is_on_diet of a meal"""
    return MealUpdateResponse(data=ledger.update_meal(ctx, meal_id, payload))


@router.delete("/{meal_id}", status_code=status.HTTP_201_CREATED, response_class=Response)
def delete_meal(
    meal_id: str,
    ctx: AuthorizationContext = Depends(get_auth_context),
    ledger: MealLedger = Depends(get_meal_ledger),
):
    ledger.delete_meal(ctx, meal_id)
    return Response(status_code=status.HTTP_201_CREATED)
