"""Car rental router — search, detail, and booking."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from wayfare.database import get_db
from wayfare.dependencies import get_catalogs, get_current_user
from wayfare.models.user import User
from wayfare.schemas.booking import CarBookingRequest
from wayfare.schemas.search import CarSearchCriteria, parse_criteria
from wayfare.services.booking_service import booking_service
from wayfare.services.booking_store import serialize_booking
from wayfare.services.catalog_store import Catalogs
from wayfare.services.query_builder import car_predicate
from wayfare.services.search_engine import get_by_id, search

router = APIRouter()


@router.get("/search")
async def search_cars(
    pickup_location: str | None = Query(None, alias="pickupLocation"),
    dropoff_location: str | None = Query(None, alias="dropoffLocation"),
    pickup_date: str | None = Query(None, alias="pickupDate"),
    dropoff_date: str | None = Query(None, alias="dropoffDate"),
    category: str | None = Query(None),
    transmission: str | None = Query(None),
    min_price: str | None = Query(None, alias="minPrice"),
    max_price: str | None = Query(None, alias="maxPrice"),
    page: str | None = Query(None),
    limit: str | None = Query(None),
    catalogs: Catalogs = Depends(get_catalogs),
):
    """Search available rental cars by daily price, cheapest first."""
    criteria = parse_criteria(
        CarSearchCriteria,
        pickup_location=pickup_location,
        dropoff_location=dropoff_location,
        pickup_date=pickup_date,
        dropoff_date=dropoff_date,
        category=category,
        transmission=transmission,
        min_price=min_price,
        max_price=max_price,
        page=page,
        limit=limit,
    )
    result = search(await catalogs.cars.list_items(), car_predicate(criteria), criteria.page, criteria.limit)

    return {
        "status": "success",
        "data": {
            "items": [c.model_dump(mode="json", by_alias=True) for c in result.items],
            "searchParams": criteria.search_params(),
        },
        "pagination": result.pagination(),
    }


@router.post("/book", status_code=201)
async def book_car(
    req: CarBookingRequest,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
    catalogs: Catalogs = Depends(get_catalogs),
):
    booking = await booking_service.book_car(db, catalogs.cars, req, user.id)
    return {
        "status": "success",
        "message": "Car booked successfully",
        "data": {"booking": serialize_booking(booking)},
    }


@router.get("/{car_id}")
async def get_car(car_id: str, catalogs: Catalogs = Depends(get_catalogs)):
    car = await get_by_id(catalogs.cars, car_id, "Car")
    return {"status": "success", "data": {"item": car.model_dump(mode="json", by_alias=True)}}
