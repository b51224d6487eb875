"""Catalog stores — ordered, read-only sources of bookable items per domain."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wayfare.data.catalog import CARS, FLIGHTS, HOTELS
from wayfare.models.catalog import CatalogItemRecord
from wayfare.schemas.catalog import Car, CatalogModel, Flight, Hotel

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=CatalogModel)


class CatalogStore(Protocol[T]):
    async def list_items(self) -> Sequence[T]: ...

    async def get_item(self, item_id: str) -> T | None: ...


class InMemoryCatalogStore(Generic[T]):
    """Wraps a fixed tuple of items; insertion order is the catalog order."""

    def __init__(self, items: Sequence[T]):
        self._items = tuple(items)
        # first occurrence wins on duplicate ids
        self._by_id = {item.id: item for item in reversed(self._items)}

    @classmethod
    def from_records(cls, model: type[T], records: Sequence[dict]) -> "InMemoryCatalogStore[T]":
        return cls([model.model_validate(r) for r in records])

    async def list_items(self) -> Sequence[T]:
        return self._items

    async def get_item(self, item_id: str) -> T | None:
        return self._by_id.get(item_id)


class SqlCatalogStore(Generic[T]):
    """Reads one domain's rows from ``catalog_items``, ordered by position."""

    def __init__(self, db: AsyncSession, domain: str, model: type[T]):
        self.db = db
        self.domain = domain
        self.model = model

    async def list_items(self) -> Sequence[T]:
        result = await self.db.execute(
            select(CatalogItemRecord)
            .where(CatalogItemRecord.domain == self.domain)
            .order_by(CatalogItemRecord.position)
        )
        return tuple(self.model.model_validate(r.payload) for r in result.scalars().all())

    async def get_item(self, item_id: str) -> T | None:
        result = await self.db.execute(
            select(CatalogItemRecord).where(
                CatalogItemRecord.domain == self.domain,
                CatalogItemRecord.item_id == item_id,
            )
        )
        record = result.scalar_one_or_none()
        return self.model.model_validate(record.payload) if record else None


@dataclass(frozen=True)
class Catalogs:
    flights: CatalogStore[Flight]
    hotels: CatalogStore[Hotel]
    cars: CatalogStore[Car]


BUNDLED_CATALOGS = Catalogs(
    flights=InMemoryCatalogStore.from_records(Flight, FLIGHTS),
    hotels=InMemoryCatalogStore.from_records(Hotel, HOTELS),
    cars=InMemoryCatalogStore.from_records(Car, CARS),
)


def sql_catalogs(db: AsyncSession) -> Catalogs:
    return Catalogs(
        flights=SqlCatalogStore(db, "flight", Flight),
        hotels=SqlCatalogStore(db, "hotel", Hotel),
        cars=SqlCatalogStore(db, "car", Car),
    )


async def seed_catalog(db: AsyncSession) -> int:
    """Copy the bundled mock catalog into ``catalog_items`` if it is empty."""
    result = await db.execute(select(CatalogItemRecord.id).limit(1))
    if result.scalar_one_or_none():
        return 0

    count = 0
    for domain, model, records in (("flight", Flight, FLIGHTS), ("hotel", Hotel, HOTELS), ("car", Car, CARS)):
        for position, raw in enumerate(records):
            item = model.model_validate(raw)
            db.add(CatalogItemRecord(
                domain=domain,
                item_id=item.id,
                position=position,
                payload=item.model_dump(mode="json", by_alias=True),
            ))
            count += 1
    await db.commit()
    logger.info(f"Seeded {count} catalog items")
    return count
