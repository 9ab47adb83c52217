"""Inventory records and fuzzy match results."""

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

ItemT = TypeVar("ItemT")

MatchMethod = Literal["substring", "levenshtein"]


@dataclass(frozen=True)
class InventoryItem:
    """An existing inventory entry supplied by the caller."""

    id: str
    name: str


@dataclass(frozen=True)
class MatchResult(Generic[ItemT]):
    """Best inventory candidate for a query."""

    item: ItemT
    score: float  # 0.0 to 1.0
    method: MatchMethod
