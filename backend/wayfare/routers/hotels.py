"""Hotel router — search, detail, and booking."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from wayfare.database import get_db
from wayfare.dependencies import get_catalogs, get_current_user
from wayfare.models.user import User
from wayfare.schemas.booking import HotelBookingRequest
from wayfare.schemas.search import HotelSearchCriteria, parse_criteria
from wayfare.services.booking_service import booking_service
from wayfare.services.booking_store import serialize_booking
from wayfare.services.catalog_store import Catalogs
from wayfare.services.query_builder import hotel_predicate
from wayfare.services.search_engine import get_by_id, search

router = APIRouter()


@router.get("/search")
async def search_hotels(
    destination: str | None = Query(None),
    check_in: str | None = Query(None, alias="checkIn"),
    check_out: str | None = Query(None, alias="checkOut"),
    guests: str | None = Query(None),
    rooms: str | None = Query(None),
    min_price: str | None = Query(None, alias="minPrice"),
    max_price: str | None = Query(None, alias="maxPrice"),
    rating: str | None = Query(None),
    amenities: str | None = Query(None, description="Comma-separated, all must match"),
    page: str | None = Query(None),
    limit: str | None = Query(None),
    catalogs: Catalogs = Depends(get_catalogs),
):
    """Search hotels by nightly price, cheapest first."""
    criteria = parse_criteria(
        HotelSearchCriteria,
        destination=destination,
        check_in=check_in,
        check_out=check_out,
        guests=guests,
        rooms=rooms,
        min_price=min_price,
        max_price=max_price,
        rating=rating,
        amenities=amenities,
        page=page,
        limit=limit,
    )
    result = search(await catalogs.hotels.list_items(), hotel_predicate(criteria), criteria.page, criteria.limit)

    return {
        "status": "success",
        "data": {
            "items": [h.model_dump(mode="json", by_alias=True) for h in result.items],
            "searchParams": criteria.search_params(),
        },
        "pagination": result.pagination(),
    }


@router.post("/book", status_code=201)
async def book_hotel(
    req: HotelBookingRequest,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
    catalogs: Catalogs = Depends(get_catalogs),
):
    booking = await booking_service.book_hotel(db, catalogs.hotels, req, user.id)
    return {
        "status": "success",
        "message": "Hotel booked successfully",
        "data": {"booking": serialize_booking(booking)},
    }


@router.get("/{hotel_id}")
async def get_hotel(hotel_id: str, catalogs: Catalogs = Depends(get_catalogs)):
    hotel = await get_by_id(catalogs.hotels, hotel_id, "Hotel")
    return {"status": "success", "data": {"item": hotel.model_dump(mode="json", by_alias=True)}}
