"""Core entities for meal domain."""

from .meal import Meal

__all__ = ["Meal"]
