"""Domain models for the grocery tracker."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Nutrition:
    """Nutrition facts for a food item."""

    calories: int
    protein: float
    carbohydrates: float
    fat: float
    fiber: float


@dataclass(frozen=True)
class FoodItem:
    """Represents a food item held by the grocery store."""

    id: int
    name: str
    description: str
    ingredients: tuple[str, ...]
    expiration: datetime
    nutrition: Nutrition

    def has_ingredient(self, ingredient: str) -> bool:
        """Return true when the ingredient list contains an exact match."""
        return ingredient in self.ingredients

    def expires_on(self, year: int, month: int, day: int) -> bool:
        """Compare the calendar date of the expiration, ignoring time of day."""
        expiration = self.expiration.date()
        return (expiration.year, expiration.month, expiration.day) == (
            year,
            month,
            day,
        )
