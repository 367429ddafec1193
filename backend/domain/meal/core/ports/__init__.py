from .meal_repository import IMealRepository

__all__ = ["IMealRepository"]
