"""MongoDB implementation of meal repository.

Provides persistent storage for Meal aggregates.
Uses MongoBaseRepository for common patterns.
"""

from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional

from bson.decimal128 import Decimal128
from pymongo import ASCENDING

from domain.meal.core.entities.meal import Meal
from domain.meal.core.value_objects.calories import Calories
from domain.meal.core.value_objects.dining_time import DiningTime
from domain.meal.core.value_objects.meal_id import MealId
from domain.meal.core.value_objects.menu import Menu
from domain.shared.value_objects.money import Money
from infrastructure.persistence.mongodb.base import MongoBaseRepository

_NATIVE_ORDER = [("_id", ASCENDING)]


class MongoMealRepository(MongoBaseRepository[Meal]):
    """
    MongoDB implementation of meal repository.

    Document Schema:
    {
        "_id": 12,                       # MealId (counters sequence)
        "date": "2024-01-15",
        "dining_time": "LUNCH",
        "place": "Student Cafeteria",
        "place_lower": "student cafeteria",
        "price": {"amount": Decimal128("5000"), "currency": "KRW"},
        "calories": 650,
        "menu": ["rice", "kimchi stew"],
        "created_at": ISODate(...),
        "updated_at": ISODate(...)
    }

    Indexes:
    - (date, dining_time): date-scoped queries
    - place_lower: case-insensitive place lookup
    """

    @property
    def collection_name(self) -> str:
        """MongoDB collection name."""
        return "meals"

    def ensure_indexes(self) -> None:
        self._collection.create_index([("date", ASCENDING), ("dining_time", ASCENDING)])
        self._collection.create_index("place_lower")

    # ============================================================
    # Document Mapping (Domain <-> MongoDB)
    # ============================================================

    def to_document(self, entity: Meal) -> Dict[str, Any]:
        meal = entity
        if meal.id is None:
            raise ValueError("Cannot map a meal without id")

        return {
            "_id": meal.id.value,
            "date": self.date_to_str(meal.date),
            "dining_time": meal.dining_time.value,
            "place": meal.place,
            "place_lower": meal.place.lower(),
            "price": {
                "amount": Decimal128(meal.price.amount),
                "currency": meal.price.currency,
            },
            "calories": meal.calories.value,
            "menu": list(meal.menu.items),
            "created_at": meal.created_at,
            "updated_at": meal.updated_at,
        }

    def from_document(self, doc: Dict[str, Any]) -> Meal:
        try:
            price = doc["price"]
            amount = price["amount"]
            if isinstance(amount, Decimal128):
                amount = amount.to_decimal()

            return Meal(
                id=MealId(int(doc["_id"])),
                date=self.str_to_date(doc["date"]),
                dining_time=DiningTime.from_value(doc["dining_time"]),
                place=doc["place"],
                price=Money(Decimal(amount), price["currency"]),
                calories=Calories(int(doc["calories"])),
                menu=Menu(tuple(doc["menu"])),
                created_at=self.ensure_utc(doc["created_at"]),
                updated_at=self.ensure_utc(doc["updated_at"]),
            )
        except KeyError as e:
            raise ValueError(f"Meal document {doc.get('_id')} is missing field {e}") from e

    # ============================================================
    # IMealRepository
    # ============================================================

    def save(self, meal: Meal) -> Meal:
        if meal.id is None:
            meal = meal.with_id(MealId(self._next_id()))

        self._replace_one(self.to_document(meal))
        return meal

    def find_by_id(self, meal_id: MealId) -> Optional[Meal]:
        doc = self._find_one({"_id": meal_id.value})
        return self.from_document(doc) if doc else None

    def find_by_date(self, day: date) -> List[Meal]:
        return self._find_meals({"date": self.date_to_str(day)})

    def find_by_date_and_dining_time(self, day: date, dining_time: DiningTime) -> List[Meal]:
        return self._find_meals(
            {"date": self.date_to_str(day), "dining_time": dining_time.value}
        )

    def find_by_date_range(self, start_date: date, end_date: date) -> List[Meal]:
        docs = self._find_many(
            {"date": {"$gte": self.date_to_str(start_date), "$lte": self.date_to_str(end_date)}},
            sort=[("date", ASCENDING), ("_id", ASCENDING)],
        )
        return [self.from_document(doc) for doc in docs]

    def find_by_place(self, place: str) -> List[Meal]:
        return self._find_meals({"place_lower": place.lower()})

    def delete(self, meal: Meal) -> None:
        if meal.id is not None:
            self._delete_one({"_id": meal.id.value})

    def _find_meals(self, filter_dict: Dict[str, Any]) -> List[Meal]:
        docs = self._find_many(filter_dict, sort=_NATIVE_ORDER)
        return [self.from_document(doc) for doc in docs]
