"""Booking commit — validates a selection against the catalog, prices it, and persists it.

Each ``book_*`` call runs the same steps in the same order, and each step has
its own failure:

1. catalog lookup (``NotFoundError``)
2. availability for the requested quantity (``UnavailableError``)
3. required traveller details (``ValidationError``)
4. pricing from the catalog price at this moment (``ValidationError`` for an
   empty or inverted date range)
5. persist through the booking store

Nothing is written unless every step before persistence has passed.
"""

import logging
import math
import uuid
from datetime import date, datetime, time, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from wayfare.errors import NotFoundError, UnavailableError, ValidationError
from wayfare.models.booking import Booking
from wayfare.schemas.booking import (
    CarBookingRequest,
    CarDetails,
    CarSnapshot,
    ContactInfo,
    FlightBookingRequest,
    FlightDetails,
    FlightSnapshot,
    HotelBookingRequest,
    HotelDetails,
    HotelSnapshot,
)
from wayfare.schemas.catalog import Car, Flight, Hotel, RoomType
from wayfare.services.booking_store import booking_store
from wayfare.services.catalog_store import CatalogStore
from wayfare.services.search_engine import get_by_id

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)
CENTS = Decimal("0.01")


def _as_utc(value: date | datetime) -> datetime:
    if not isinstance(value, datetime):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def span_days(start: date | datetime, end: date | datetime) -> int:
    """Whole days between two instants, rounding partial days up."""
    return math.ceil((_as_utc(end) - _as_utc(start)) / ONE_DAY)


def _money(unit_price: float, *quantities: int) -> Decimal:
    total = Decimal(str(unit_price))
    for q in quantities:
        total *= q
    return total.quantize(CENTS, rounding=ROUND_HALF_UP)


def flight_total(flight: Flight, passenger_count: int) -> Decimal:
    return _money(flight.price, passenger_count)


def hotel_total(room: RoomType, rooms: int, check_in: date, check_out: date) -> tuple[int, Decimal]:
    nights = span_days(check_in, check_out)
    if nights < 1:
        raise ValidationError.for_field("checkOut", "Check-out must be at least one night after check-in")
    return nights, _money(room.price, rooms, nights)


def car_total(car: Car, pickup: datetime, dropoff: datetime) -> tuple[int, Decimal]:
    days = span_days(pickup, dropoff)
    if days < 1:
        raise ValidationError.for_field("dropoffDate", "Rental must last at least one day")
    return days, _money(car.price_per_day, days)


class BookingService:
    """Commits flight, hotel, and car bookings for an authenticated user."""

    async def book_flight(
        self,
        db: AsyncSession,
        flights: CatalogStore[Flight],
        req: FlightBookingRequest,
        user_id: uuid.UUID,
    ) -> Booking:
        flight = await get_by_id(flights, req.flight_id, "Flight")

        passenger_count = len(req.passengers)
        if flight.available_seats < passenger_count:
            logger.info(f"Flight {flight.id}: {passenger_count} seats requested, {flight.available_seats} left")
            raise UnavailableError("Not enough seats available")
        if not req.passengers:
            raise ValidationError.for_field("passengers", "At least one passenger is required")

        total = flight_total(flight, passenger_count)
        details = FlightDetails(
            flight=FlightSnapshot(
                id=flight.id,
                airline=flight.airline,
                flight_number=flight.flight_number,
                departure=flight.departure,
                arrival=flight.arrival,
                flight_class=flight.flight_class,
                aircraft=flight.aircraft,
            ),
            passengers=req.passengers,
            contact=ContactInfo(email=req.contact_email, phone=req.contact_phone),
            seat_preferences=req.seat_preferences,
            meal_preferences=req.meal_preferences,
            passenger_count=passenger_count,
            price_per_passenger=flight.price,
        )
        return await booking_store.create(
            db, user_id, "flight", total, flight.currency, details.model_dump(mode="json", by_alias=True)
        )

    async def book_hotel(
        self,
        db: AsyncSession,
        hotels: CatalogStore[Hotel],
        req: HotelBookingRequest,
        user_id: uuid.UUID,
    ) -> Booking:
        hotel = await get_by_id(hotels, req.hotel_id, "Hotel")
        room = hotel.room(req.room_type)
        if room is None:
            raise NotFoundError("Room type not found")

        if room.available < req.rooms:
            logger.info(f"Hotel {hotel.id} '{room.type}': {req.rooms} rooms requested, {room.available} left")
            raise UnavailableError("Not enough rooms available")
        if not req.guest_details:
            raise ValidationError.for_field("guestDetails", "Guest details are required")

        nights, total = hotel_total(room, req.rooms, req.check_in, req.check_out)
        details = HotelDetails(
            hotel=HotelSnapshot(id=hotel.id, name=hotel.name, location=hotel.location),
            room=room,
            check_in=req.check_in,
            check_out=req.check_out,
            nights=nights,
            guests=req.guests,
            rooms=req.rooms,
            guest_details=req.guest_details,
            special_requests=req.special_requests,
            price_per_night=room.price,
        )
        return await booking_store.create(
            db, user_id, "hotel", total, room.currency, details.model_dump(mode="json", by_alias=True)
        )

    async def book_car(
        self,
        db: AsyncSession,
        cars: CatalogStore[Car],
        req: CarBookingRequest,
        user_id: uuid.UUID,
    ) -> Booking:
        car = await get_by_id(cars, req.car_id, "Car")

        if not car.available:
            logger.info(f"Car {car.id} requested but not available")
            raise UnavailableError("Car is not available")
        driver = req.driver_details
        if driver is None:
            raise ValidationError.for_field("driverDetails", "Driver details are required")
        if not (driver.license_number or "").strip():
            raise ValidationError.for_field("driverDetails.licenseNumber", "License number is required")

        days, total = car_total(car, req.pickup_date, req.dropoff_date)
        details = CarDetails(
            car=CarSnapshot(
                id=car.id,
                make=car.make,
                model=car.model,
                year=car.year,
                category=car.category,
                image=car.image,
            ),
            pickup_date=req.pickup_date,
            dropoff_date=req.dropoff_date,
            days=days,
            driver_details=driver,
            insurance=req.insurance,
            price_per_day=car.price_per_day,
        )
        return await booking_store.create(
            db, user_id, "car", total, car.currency, details.model_dump(mode="json", by_alias=True)
        )


booking_service = BookingService()
