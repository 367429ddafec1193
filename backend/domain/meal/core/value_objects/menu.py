"""Menu value object.

Ordered list of dish names served in one meal, with keyword based
classification (vegetarian / spicy).
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from domain.shared.errors import ErrorKind, ValidationError

# Cafeteria menus are written in Korean; English equivalents are matched too.
VEGETARIAN_KEYWORDS: Tuple[str, ...] = (
    "나물",
    "샐러드",
    "두부",
    "콩",
    "버섯",
    "herbed greens",
    "salad",
    "tofu",
    "beans",
    "mushroom",
)

SPICY_KEYWORDS: Tuple[str, ...] = (
    "매운",
    "김치",
    "고추",
    "매콤",
    "불고기",
    "spicy",
    "kimchi",
    "chili",
    "hot",
    "bulgogi",
)


@dataclass(frozen=True)
class Menu:
    """Non-empty ordered sequence of non-blank menu items.

    Attributes:
        items: Dish names, in serving order. Lists are accepted and
            stored as a tuple.

    Examples:
        >>> menu = Menu(["rice", "kimchi stew"])
        >>> menu.has_spicy_items()
        True
        >>> menu.contains("rice")
        True
        >>> str(menu)
        'rice, kimchi stew'

    Raises:
        ValidationError: EMPTY_MENU or BLANK_MENU_ITEM.
    """

    items: Tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate menu invariants."""
        items = tuple(self.items)
        object.__setattr__(self, "items", items)

        if not items:
            raise ValidationError(ErrorKind.EMPTY_MENU, "Menu must have at least one item")

        if any(not isinstance(item, str) or not item.strip() for item in items):
            raise ValidationError(ErrorKind.BLANK_MENU_ITEM, "Menu items must not be blank")

    @classmethod
    def of(cls, *items: str) -> "Menu":
        return cls(tuple(items))

    def size(self) -> int:
        return len(self.items)

    def contains(self, item: str) -> bool:
        """Exact item match."""
        return item in self.items

    def contains_keyword(self, keyword: str) -> bool:
        """Case-insensitive substring match against any item."""
        needle = keyword.lower()
        return any(needle in item.lower() for item in self.items)

    def has_vegetarian_options(self) -> bool:
        return self._matches_any(VEGETARIAN_KEYWORDS)

    def has_spicy_items(self) -> bool:
        return self._matches_any(SPICY_KEYWORDS)

    def _matches_any(self, keywords: Iterable[str]) -> bool:
        return any(self.contains_keyword(keyword) for keyword in keywords)

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        return ", ".join(self.items)
