"""Pydantic models for food item request and response payloads."""

from datetime import datetime

from pydantic import AwareDatetime, BaseModel, ConfigDict

from grocery_tracker.domain.models import FoodItem, Nutrition


class NutritionPayload(BaseModel):
    """Nutrition facts payload; values must already have the right JSON type."""

    model_config = ConfigDict(extra="forbid", strict=True)

    calories: int
    protein: float
    carbohydrates: float
    fat: float
    fiber: float

    @classmethod
    def from_domain(cls, nutrition: Nutrition) -> "NutritionPayload":
        return cls.model_validate(nutrition, from_attributes=True)

    def to_domain(self) -> Nutrition:
        return Nutrition(
            calories=self.calories,
            protein=self.protein,
            carbohydrates=self.carbohydrates,
            fat=self.fat,
            fiber=self.fiber,
        )


class FoodCreateRequest(BaseModel):
    """Body of a food creation request.

    Unknown fields are rejected and no type coercion happens: numbers must be
    JSON numbers and ``expiration`` must be an ISO 8601 date-time string with
    a UTC offset.
    """

    model_config = ConfigDict(extra="forbid", strict=True)

    name: str
    description: str
    ingredients: list[str]
    expiration: AwareDatetime
    nutrition: NutritionPayload


class FoodIdResponse(BaseModel):
    """Id assigned to a newly created food item."""

    id: int


class FoodItemResponse(BaseModel):
    """Food item as returned by the API."""

    id: int
    name: str
    description: str
    ingredients: list[str]
    expiration: datetime
    nutrition: NutritionPayload

    @classmethod
    def from_domain(cls, food: FoodItem) -> "FoodItemResponse":
        return cls(
            id=food.id,
            name=food.name,
            description=food.description,
            ingredients=list(food.ingredients),
            expiration=food.expiration,
            nutrition=NutritionPayload.from_domain(food.nutrition),
        )

    @classmethod
    def from_domain_list(cls, foods: list[FoodItem]) -> list["FoodItemResponse"]:
        return [cls.from_domain(food) for food in foods]
