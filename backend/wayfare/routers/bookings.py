"""Bookings router — the signed-in user's bookings, lookup by reference, and cancellation."""

import math
import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from wayfare.database import get_db
from wayfare.dependencies import get_current_user
from wayfare.models.user import User
from wayfare.schemas.booking import BookingListParams
from wayfare.schemas.search import parse_criteria
from wayfare.services.booking_store import booking_store, serialize_booking

router = APIRouter()


@router.get("")
async def list_bookings(
    type: str | None = Query(None),
    status: str | None = Query(None),
    page: str | None = Query(None),
    limit: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    params = parse_criteria(BookingListParams, type=type, status=status, page=page, limit=limit)
    bookings, total = await booking_store.list_for_user(
        db, user.id, params.type, params.status, params.page, params.limit
    )
    return {
        "status": "success",
        "data": {"bookings": [serialize_booking(b) for b in bookings]},
        "pagination": {
            "page": params.page,
            "limit": params.limit,
            "total": total,
            "totalPages": math.ceil(total / params.limit),
        },
    }


@router.get("/stats/summary")
async def booking_summary(
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return {"status": "success", "data": {"summary": await booking_store.summary(db, user.id)}}


@router.get("/reference/{reference}")
async def get_booking_by_reference(
    reference: str,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    booking = await booking_store.get_by_reference(db, reference, user.id)
    return {"status": "success", "data": {"booking": serialize_booking(booking)}}


@router.get("/{booking_id}")
async def get_booking(
    booking_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    booking = await booking_store.get_for_user(db, booking_id, user.id)
    return {"status": "success", "data": {"booking": serialize_booking(booking)}}


@router.delete("/{booking_id}")
async def cancel_booking(
    booking_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Cancel a booking. The record is kept with status ``cancelled``."""
    booking = await booking_store.get_for_user(db, booking_id, user.id)
    booking = await booking_store.cancel(db, booking)
    return {
        "status": "success",
        "message": "Booking cancelled successfully",
        "data": {"booking": serialize_booking(booking)},
    }
