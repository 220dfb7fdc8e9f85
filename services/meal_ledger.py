from datetime import datetime, timezone
from typing import Any, List, Mapping, Type, TypeVar
from uuid import UUID
import logging

from pydantic import BaseModel, ValidationError

from domain.models import Meal
from domain.schemas.meal_schemas import MealCreate, MealMetrics, MealUpdate
from repositories import MealRepository
from services.access_guard import AuthorizationContext
from services.streak import compute_metrics
from app.exceptions import NotFoundError, ServiceValidationError

logger = logging.getLogger("dietlog.meals")

SchemaType = TypeVar("SchemaType", bound=BaseModel)

MEAL_NOT_FOUND = "This user has no such meal or it does not exist."
NO_MEALS = "This user has no meals or does not exist."


def _validate(schema: Type[SchemaType], payload: Any) -> SchemaType:
    if not isinstance(payload, Mapping):
        raise ServiceValidationError("Request body must be a JSON object")
    try:
        return schema.model_validate(dict(payload))
    except ValidationError as e:
        fields = {
            ".".join(str(p) for p in err["loc"]) or "body": err["msg"]
            for err in e.errors()
        }
        raise ServiceValidationError(
            "Invalid meal payload", details=fields, code="INVALID_MEAL"
        ) from e


def _as_utc_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class MealLedger:
    """Meal CRUD and metrics, always scoped to the caller's owner id"""

    def __init__(self, meals: MealRepository):
        self.meals = meals

    # ------------------------------------------------------------------
    # Input validation
    # ------------------------------------------------------------------

    @staticmethod
    def validate_create(payload: Any) -> MealCreate:
        """Check a create payload; raises ServiceValidationError"""
        return _validate(MealCreate, payload)

    @staticmethod
    def validate_update(payload: Any) -> MealUpdate:
        """Check an update payload; raises ServiceValidationError"""
        return _validate(MealUpdate, payload)

    @staticmethod
    def parse_meal_id(raw: Any) -> str:
        """
        Normalize a meal id to its canonical UUID string.

        Raises:
            ServiceValidationError: if raw is not a well-formed UUID
        """
        if isinstance(raw, UUID):
            return str(raw)
        try:
            return str(UUID(str(raw)))
        except (TypeError, ValueError, AttributeError):
            raise ServiceValidationError(
                f"Invalid meal id: {raw!r}", code="INVALID_MEAL_ID"
            )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def create_meal(self, ctx: AuthorizationContext, payload: Any) -> str:
        """Log a new meal for the caller and return its generated id"""
        data = self.validate_create(payload)
        meal = self.meals.create_meal(
            owner_id=ctx.owner_id,
            name=data.name,
            description=data.description,
            is_on_diet=data.is_on_diet,
            created_at=_as_utc_naive(data.created_at) if data.created_at else None,
        )
        logger.info(f"meal_created meal_id={meal.id} on_diet={meal.is_on_diet}")
        return meal.id

    def list_meals(self, ctx: AuthorizationContext) -> List[Meal]:
        """All of the caller's meals, oldest first; NotFoundError if none"""
        meals = self.meals.list_by_owner(ctx.owner_id)
        if not meals:
            raise NotFoundError(NO_MEALS)
        return meals

    def get_meal(self, ctx: AuthorizationContext, meal_id: Any) -> Meal:
        meal_id = self.parse_meal_id(meal_id)
        meal = self.meals.get_owned(meal_id, ctx.owner_id)
        if meal is None:
            logger.warning(f"meal_not_found meal_id={meal_id}")
            raise NotFoundError(MEAL_NOT_FOUND)
        return meal

    def update_meal(self, ctx: AuthorizationContext, meal_id: Any, payload: Any) -> MealUpdate:
        """
        Overwrite name, description and is_on_diet of an owned meal.

        The meal must exist under the caller before the write is issued.

        Returns:
            MealUpdate snapshot of the fields written

        Raises:
            ServiceValidationError: malformed id or payload
            NotFoundError: no such meal under the caller
        """
        meal_id = self.parse_meal_id(meal_id)
        data = self.validate_update(payload)

        if self.meals.get_owned(meal_id, ctx.owner_id) is None:
            logger.warning(f"meal_not_found meal_id={meal_id}")
            raise NotFoundError(MEAL_NOT_FOUND)

        self.meals.update_owned(meal_id, ctx.owner_id, data.model_dump())
        logger.info(f"meal_updated meal_id={meal_id} on_diet={data.is_on_diet}")
        return data

    def delete_meal(self, ctx: AuthorizationContext, meal_id: Any) -> None:
        meal_id = self.parse_meal_id(meal_id)
        if self.meals.delete_owned(meal_id, ctx.owner_id) == 0:
            logger.warning(f"meal_not_found meal_id={meal_id}")
            raise NotFoundError(MEAL_NOT_FOUND)
        logger.info(f"meal_deleted meal_id={meal_id}")

    def get_metrics(self, ctx: AuthorizationContext) -> MealMetrics:
        """Totals and current on-diet streak; all zeros for an empty log"""
        return compute_metrics(self.meals.list_by_owner(ctx.owner_id))
