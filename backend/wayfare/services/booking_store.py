"""Booking store — persists booking records and issues booking references."""

import logging
import secrets
import string
import uuid
from datetime import datetime, timezone
from decimal import Decimal

from pydantic import TypeAdapter
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wayfare.config import settings
from wayfare.errors import InternalError, NotFoundError, ValidationError
from wayfare.models.booking import Booking
from wayfare.schemas.booking import BookingDetails

logger = logging.getLogger(__name__)

REFERENCE_PREFIXES = {"flight": "FL", "hotel": "HT", "car": "CR", "restaurant": "RS"}
REFERENCE_ALPHABET = string.ascii_uppercase + string.digits

_details_adapter = TypeAdapter(BookingDetails)


def generate_reference(booking_type: str, now: datetime | None = None) -> str:
    """Type prefix, booking date, and six random characters, e.g. ``HT240215K3P9QZ``."""
    now = now or datetime.now(timezone.utc)
    suffix = "".join(secrets.choice(REFERENCE_ALPHABET) for _ in range(6))
    return f"{REFERENCE_PREFIXES[booking_type]}{now:%y%m%d}{suffix}"


def serialize_booking(booking: Booking) -> dict:
    details = booking.booking_details
    if booking.type in ("flight", "hotel", "car"):
        details = _details_adapter.validate_python(details).model_dump(mode="json", by_alias=True)
    return {
        "id": str(booking.id),
        "user": str(booking.user_id),
        "type": booking.type,
        "bookingReference": booking.booking_reference,
        "status": booking.status,
        "totalAmount": float(booking.total_amount),
        "currency": booking.currency,
        "bookingDetails": details,
        "createdAt": booking.created_at.isoformat() if booking.created_at else None,
        "updatedAt": booking.updated_at.isoformat() if booking.updated_at else None,
    }


class BookingStore:
    """Owns every write to the bookings table."""

    async def reference_exists(self, db: AsyncSession, reference: str) -> bool:
        result = await db.execute(select(Booking.id).where(Booking.booking_reference == reference))
        return result.scalar_one_or_none() is not None

    async def _unique_reference(self, db: AsyncSession, booking_type: str) -> str:
        for _ in range(settings.booking_reference_attempts):
            reference = generate_reference(booking_type)
            if not await self.reference_exists(db, reference):
                return reference
        raise InternalError("Could not allocate a booking reference")

    async def create(
        self,
        db: AsyncSession,
        user_id: uuid.UUID,
        booking_type: str,
        total_amount: Decimal,
        currency: str,
        details: dict,
    ) -> Booking:
        """Insert one pending booking and return it once the commit has completed."""
        try:
            booking = Booking(
                user_id=user_id,
                type=booking_type,
                booking_reference=await self._unique_reference(db, booking_type),
                status="pending",
                total_amount=total_amount,
                currency=currency,
                booking_details=details,
            )
            db.add(booking)
            await db.commit()
            await db.refresh(booking)
        except SQLAlchemyError as e:
            await db.rollback()
            logger.exception(f"Booking persistence failed for user {user_id}: {e}")
            raise InternalError("Error creating booking") from e

        logger.info(
            f"Booking {booking.booking_reference} created: {booking_type} for user {user_id}, "
            f"{booking.total_amount} {booking.currency}"
        )
        return booking

    async def get_for_user(self, db: AsyncSession, booking_id: uuid.UUID, user_id: uuid.UUID) -> Booking:
        result = await db.execute(
            select(Booking).where(Booking.id == booking_id, Booking.user_id == user_id)
        )
        booking = result.scalar_one_or_none()
        if not booking:
            raise NotFoundError("Booking not found")
        return booking

    async def get_by_reference(self, db: AsyncSession, reference: str, user_id: uuid.UUID) -> Booking:
        result = await db.execute(
            select(Booking).where(
                Booking.booking_reference == reference.upper(),
                Booking.user_id == user_id,
            )
        )
        booking = result.scalar_one_or_none()
        if not booking:
            raise NotFoundError("Booking not found")
        return booking

    async def list_for_user(
        self,
        db: AsyncSession,
        user_id: uuid.UUID,
        booking_type: str | None = None,
        status: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[Booking], int]:
        """Newest first; returns the page and the total matching count."""
        conditions = [Booking.user_id == user_id]
        if booking_type:
            conditions.append(Booking.type == booking_type)
        if status:
            conditions.append(Booking.status == status)

        count_result = await db.execute(select(func.count(Booking.id)).where(*conditions))
        total = count_result.scalar() or 0

        result = await db.execute(
            select(Booking)
            .where(*conditions)
            .order_by(Booking.created_at.desc(), Booking.booking_reference)
            .offset((page - 1) * limit)
            .limit(limit)
        )
        return list(result.scalars().all()), total

    async def transition(self, db: AsyncSession, booking: Booking, status: str) -> Booking:
        if not booking.can_transition_to(status):
            raise ValidationError.for_field(
                "status", f"Booking cannot move from {booking.status} to {status}"
            )
        previous = booking.status
        booking.status = status
        try:
            await db.commit()
            await db.refresh(booking)
        except SQLAlchemyError as e:
            await db.rollback()
            logger.exception(f"Status update failed for booking {booking.booking_reference}: {e}")
            raise InternalError("Error updating booking") from e

        logger.info(f"Booking {booking.booking_reference}: {previous} -> {status}")
        return booking

    async def cancel(self, db: AsyncSession, booking: Booking) -> Booking:
        return await self.transition(db, booking, "cancelled")

    async def summary(self, db: AsyncSession, user_id: uuid.UUID) -> dict:
        by_type = await db.execute(
            select(Booking.type, func.count(Booking.id))
            .where(Booking.user_id == user_id)
            .group_by(Booking.type)
        )
        by_status = await db.execute(
            select(Booking.status, func.count(Booking.id))
            .where(Booking.user_id == user_id)
            .group_by(Booking.status)
        )
        spent = await db.execute(
            select(func.coalesce(func.sum(Booking.total_amount), 0))
            .where(Booking.user_id == user_id, Booking.status != "cancelled")
        )
        type_counts = {t: c for t, c in by_type.all()}
        return {
            "totalBookings": sum(type_counts.values()),
            "byType": type_counts,
            "byStatus": {s: c for s, c in by_status.all()},
            "totalSpent": float(spent.scalar() or 0),
        }


booking_store = BookingStore()
