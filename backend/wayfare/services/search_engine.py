"""Search engine — filter, stable price sort, and contiguous-slice pagination."""

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from wayfare.errors import NotFoundError
from wayfare.services.catalog_store import CatalogStore

T = TypeVar("T")


@dataclass(frozen=True)
class SearchPage(Generic[T]):
    items: list[T]
    total: int
    total_pages: int
    page: int
    limit: int

    def pagination(self) -> dict:
        return {
            "page": self.page,
            "limit": self.limit,
            "total": self.total,
            "totalPages": self.total_pages,
        }


def search(
    catalog: Sequence[T],
    predicate: Callable[[T], bool],
    page: int = 1,
    limit: int = 20,
    price: Callable[[T], float] = lambda item: item.unit_price,
) -> SearchPage[T]:
    """Filter ``catalog``, sort by ascending price, and return one page.

    ``sorted`` is stable, so items with equal prices keep catalog order.
    A page past the end is empty rather than an error.
    """
    if page < 1 or limit < 1:
        raise ValueError("page and limit must be >= 1")

    matches = sorted((item for item in catalog if predicate(item)), key=price)
    start = (page - 1) * limit
    return SearchPage(
        items=matches[start:start + limit],
        total=len(matches),
        total_pages=math.ceil(len(matches) / limit),
        page=page,
        limit=limit,
    )


async def get_by_id(catalog: CatalogStore[T], item_id: str, label: str = "Item") -> T:
    """Look one item up through the store, so SQL-backed catalogs fetch a single row."""
    item = await catalog.get_item(item_id)
    if item is None:
        raise NotFoundError(f"{label} not found")
    return item
