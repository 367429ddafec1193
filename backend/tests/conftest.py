"""Shared test fixtures.

Loads ``.env.test`` when present, pins the environment to the in-memory
backend, and provides in-memory fakes for every domain port.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Callable, Generator, Iterable, Optional, Union

import pytest
from dotenv import load_dotenv

from domain.meal.core.entities.meal import Meal
from domain.meal.core.value_objects.calories import Calories
from domain.meal.core.value_objects.dining_time import DiningTime
from domain.meal.core.value_objects.menu import Menu
from domain.meal.services.meal_service import MealDomainService
from domain.shared.value_objects.money import Money
from domain.user.services.user_service import UserDomainService
from infrastructure.clock import FixedClock
from infrastructure.persistence.factory import reset_repositories
from infrastructure.persistence.in_memory.meal_repository import InMemoryMealRepository
from infrastructure.persistence.in_memory.user_repository import InMemoryUserRepository

env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)

# Monday
TODAY = date(2024, 1, 15)
NOW = datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)


class FakePasswordHasher:
    """Reversible IPasswordHasher fake: "hashed:<raw>"."""

    PREFIX = "hashed:"

    def encode(self, raw_password: str) -> str:
        return f"{self.PREFIX}{raw_password}"

    def matches(self, raw_password: str, encoded_password: str) -> bool:
        return encoded_password == f"{self.PREFIX}{raw_password}"


@pytest.fixture(autouse=True)
def _test_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Fast, isolated settings for every test; singletons rebuilt per test."""
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("REPOSITORY_BACKEND", "inmemory")
    monkeypatch.setenv("BCRYPT_COST_FACTOR", "4")
    reset_repositories()
    yield
    reset_repositories()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(TODAY, NOW)


@pytest.fixture
def password_hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def user_service(
    user_repository: InMemoryUserRepository,
    password_hasher: FakePasswordHasher,
    clock: FixedClock,
) -> UserDomainService:
    return UserDomainService(user_repository, password_hasher, clock=clock)


@pytest.fixture
def meal_service(
    meal_repository: InMemoryMealRepository, clock: FixedClock
) -> MealDomainService:
    return MealDomainService(meal_repository, clock)


MealBuilder = Callable[..., Meal]


@pytest.fixture
def make_meal(clock: FixedClock) -> MealBuilder:
    """Build an unsaved meal; every attribute has a sensible default."""

    def _make(
        meal_date: Optional[date] = None,
        dining_time: DiningTime = DiningTime.LUNCH,
        place: str = "Student Cafeteria",
        price: Union[int, str, Decimal] = 5000,
        calories: int = 650,
        menu: Iterable[str] = ("rice", "kimchi stew", "herbed greens"),
    ) -> Meal:
        return Meal.create(
            meal_date=meal_date or TODAY,
            dining_time=dining_time,
            place=place,
            price=Money.of(price),
            calories=Calories(calories),
            menu=Menu(tuple(menu)),
            clock=clock,
        )

    return _make


@pytest.fixture
def save_meal(meal_repository: InMemoryMealRepository, make_meal: MealBuilder) -> MealBuilder:
    """Build and persist a meal in the in-memory repository."""

    def _save(**kwargs: object) -> Meal:
        return meal_repository.save(make_meal(**kwargs))

    return _save
