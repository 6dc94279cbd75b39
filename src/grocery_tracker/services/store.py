"""In-memory store for food items identifiable by numeric id."""

import logging
import threading
from collections.abc import Iterable
from datetime import datetime

from grocery_tracker.domain.models import FoodItem, Nutrition

logger = logging.getLogger(__name__)

MAX_FOOD_ID = 2**63 - 1


class FoodNotFoundError(LookupError):
    """Raised when no food item exists for the requested id."""

    def __init__(self, food_id: int) -> None:
        super().__init__(f"food with id={food_id} not found")
        self.food_id = food_id


class StoreExhaustedError(RuntimeError):
    """Raised when the store has no identifiers left to assign."""


class GroceryItemStore:
    """In-memory database of food items.

    Every method holds the store lock for its full duration, so methods are
    safe to call from concurrent request handlers. Ids start at zero, are
    never reused, and keep increasing after deletions.
    """

    def __init__(self, max_id: int = MAX_FOOD_ID) -> None:
        self._lock = threading.Lock()
        self._foods: dict[int, FoodItem] = {}
        self._next_id = 0
        self._max_id = max_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._foods)

    def create(  # noqa: PLR0913
        self,
        name: str,
        description: str,
        ingredients: Iterable[str],
        expiration: datetime,
        nutrition: Nutrition,
    ) -> int:
        """Store a new food item and return its assigned id."""
        with self._lock:
            if self._next_id > self._max_id:
                raise StoreExhaustedError(
                    f"no food ids left to assign (max id is {self._max_id})"
                )
            food = FoodItem(
                id=self._next_id,
                name=name,
                description=description,
                ingredients=tuple(ingredients),
                expiration=expiration,
                nutrition=nutrition,
            )
            self._foods[food.id] = food
            self._next_id += 1
        logger.debug("Created food item", extra={"food_id": food.id})
        return food.id

    def get(self, food_id: int) -> FoodItem:
        """Return the food item with the given id."""
        with self._lock:
            food = self._foods.get(food_id)
        if food is None:
            raise FoodNotFoundError(food_id)
        return food

    def delete(self, food_id: int) -> None:
        """Delete the food item with the given id."""
        with self._lock:
            if food_id not in self._foods:
                raise FoodNotFoundError(food_id)
            del self._foods[food_id]

    def delete_all(self) -> None:
        """Delete every food item; ids keep counting from where they were."""
        with self._lock:
            self._foods = {}

    def list_all(self) -> list[FoodItem]:
        """Return all food items, in arbitrary order."""
        with self._lock:
            return list(self._foods.values())

    def find_by_ingredient(self, ingredient: str) -> list[FoodItem]:
        """Return food items listing the exact ingredient, in arbitrary order."""
        with self._lock:
            return [
                food for food in self._foods.values() if food.has_ingredient(ingredient)
            ]

    def find_by_expiration_date(
        self, year: int, month: int, day: int
    ) -> list[FoodItem]:
        """Return food items expiring on the given calendar date."""
        with self._lock:
            return [
                food
                for food in self._foods.values()
                if food.expires_on(year, month, day)
            ]
