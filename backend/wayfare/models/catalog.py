"""Database-backed catalog rows — one JSON payload per bookable item."""

import uuid

from sqlalchemy import JSON, Integer, String, UniqueConstraint, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from wayfare.database import Base


class CatalogItemRecord(Base):
    __tablename__ = "catalog_items"
    __table_args__ = (UniqueConstraint("domain", "item_id", name="uq_catalog_domain_item"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    domain: Mapped[str] = mapped_column(String(20), nullable=False, index=True)  # flight | hotel | car
    item_id: Mapped[str] = mapped_column(String(50), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    payload: Mapped[dict] = mapped_column(JSON().with_variant(JSONB, "postgresql"), nullable=False)
