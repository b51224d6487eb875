"""Flight router — search, airport lookup, detail, and booking."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from wayfare.data.catalog import AIRPORTS
from wayfare.database import get_db
from wayfare.dependencies import get_catalogs, get_current_user
from wayfare.models.user import User
from wayfare.schemas.booking import FlightBookingRequest
from wayfare.schemas.catalog import Airport
from wayfare.schemas.search import AirportSearchCriteria, FlightSearchCriteria, parse_criteria
from wayfare.services.booking_service import booking_service
from wayfare.services.booking_store import serialize_booking
from wayfare.services.catalog_store import Catalogs
from wayfare.services.query_builder import airport_predicate, flight_predicate
from wayfare.services.search_engine import get_by_id, search

router = APIRouter()

_AIRPORTS = [Airport(code=c, name=n, city=city, country=country) for c, n, city, country in AIRPORTS]


@router.get("/search")
async def search_flights(
    origin: str | None = Query(None),
    destination: str | None = Query(None),
    departure_date: str | None = Query(None, alias="departureDate"),
    return_date: str | None = Query(None, alias="returnDate"),
    passengers: str | None = Query(None),
    flight_class: str | None = Query(None, alias="class"),
    max_price: str | None = Query(None, alias="maxPrice"),
    airline: str | None = Query(None),
    page: str | None = Query(None),
    limit: str | None = Query(None),
    catalogs: Catalogs = Depends(get_catalogs),
):
    """Search flights; results are sorted by price, cheapest first."""
    criteria = parse_criteria(
        FlightSearchCriteria,
        origin=origin,
        destination=destination,
        departure_date=departure_date,
        return_date=return_date,
        passengers=passengers,
        flight_class=flight_class,
        max_price=max_price,
        airline=airline,
        page=page,
        limit=limit,
    )
    result = search(await catalogs.flights.list_items(), flight_predicate(criteria), criteria.page, criteria.limit)

    return {
        "status": "success",
        "data": {
            "items": [f.model_dump(mode="json", by_alias=True) for f in result.items],
            "searchParams": criteria.search_params(),
        },
        "pagination": result.pagination(),
    }


@router.get("/airports/search")
async def search_airports(q: str | None = Query(None)):
    """Search airports by code, name, or city."""
    criteria = parse_criteria(AirportSearchCriteria, q=q)
    predicate = airport_predicate(criteria)
    return {
        "status": "success",
        "data": {"airports": [a.model_dump(mode="json", by_alias=True) for a in _AIRPORTS if predicate(a)]},
    }


@router.post("/book", status_code=201)
async def book_flight(
    req: FlightBookingRequest,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
    catalogs: Catalogs = Depends(get_catalogs),
):
    booking = await booking_service.book_flight(db, catalogs.flights, req, user.id)
    return {
        "status": "success",
        "message": "Flight booked successfully",
        "data": {"booking": serialize_booking(booking)},
    }


@router.get("/{flight_id}")
async def get_flight(flight_id: str, catalogs: Catalogs = Depends(get_catalogs)):
    flight = await get_by_id(catalogs.flights, flight_id, "Flight")
    return {"status": "success", "data": {"item": flight.model_dump(mode="json", by_alias=True)}}
