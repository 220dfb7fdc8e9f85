"""Aggregate counts and on-diet streak over an ordered meal history."""

from typing import Iterable, Sequence

from domain.schemas.meal_schemas import MealMetrics


def compute_streak(meals: Iterable) -> int:
    """
    Length of the most recent run of consecutive on-diet meals.

    Meals are scanned in the order given; an off-diet meal resets the running
    count but keeps the last completed run. With oldest-first input the
    result is the current streak.
    """
    run = 0
    last_run = 0
    for meal in meals:
        if meal.is_on_diet:
            run += 1
            last_run = run
        else:
            run = 0
    return last_run


def compute_metrics(meals: Sequence) -> MealMetrics:
    total = len(meals)
    diet_count = sum(1 for m in meals if m.is_on_diet)
    return MealMetrics(
        total=total,
        diet_count=diet_count,
        not_diet_count=total - diet_count,
        streak=compute_streak(meals),
    )
