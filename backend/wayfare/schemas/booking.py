"""Booking request bodies and the per-domain booking detail snapshots.

Request bodies ignore unknown keys, so a client-supplied ``totalAmount`` or
``price`` never reaches the commit pipeline. Detail lists that the commit
pipeline requires (passengers, guests, driver) default to empty here and are
checked after the catalog lookup and availability check.
"""

from datetime import date, datetime
from typing import Annotated, Any, Literal, Union

from pydantic import EmailStr, Field

from wayfare.schemas.catalog import (
    CamelModel,
    FlightClass,
    FlightEndpoint,
    HotelLocation,
    IsoDate,
    IsoDateTime,
    RoomType,
)


# ── Requests ──────────────────────────────────────────────────────────────────


class PassengerIn(CamelModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    date_of_birth: IsoDate
    passport: dict | None = None


class FlightBookingRequest(CamelModel):
    flight_id: str = Field(min_length=1)
    passengers: list[PassengerIn] = []
    contact_email: EmailStr
    contact_phone: str = Field(min_length=1)
    seat_preferences: Any = None
    meal_preferences: Any = None


class GuestIn(CamelModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: EmailStr | None = None
    phone: str | None = None


class HotelBookingRequest(CamelModel):
    hotel_id: str = Field(min_length=1)
    room_type: str = Field(min_length=1)
    check_in: IsoDate
    check_out: IsoDate
    guests: int = Field(ge=1)
    rooms: int = Field(ge=1)
    guest_details: list[GuestIn] = []
    special_requests: str | None = None


class DriverIn(CamelModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    license_number: str | None = None
    email: EmailStr | None = None
    phone: str | None = None


class CarBookingRequest(CamelModel):
    car_id: str = Field(min_length=1)
    pickup_date: IsoDateTime
    dropoff_date: IsoDateTime
    driver_details: DriverIn | None = None
    insurance: Any = None


# ── Stored snapshots (bookingDetails) ─────────────────────────────────────────


class ContactInfo(CamelModel):
    email: str
    phone: str


class FlightSnapshot(CamelModel):
    id: str
    airline: str
    flight_number: str
    departure: FlightEndpoint
    arrival: FlightEndpoint
    flight_class: FlightClass = Field(alias="class")
    aircraft: str


class FlightDetails(CamelModel):
    type: Literal["flight"] = "flight"
    flight: FlightSnapshot
    passengers: list[PassengerIn]
    contact: ContactInfo
    seat_preferences: Any = None
    meal_preferences: Any = None
    passenger_count: int
    price_per_passenger: float


class HotelSnapshot(CamelModel):
    id: str
    name: str
    location: HotelLocation


class HotelDetails(CamelModel):
    type: Literal["hotel"] = "hotel"
    hotel: HotelSnapshot
    room: RoomType
    check_in: date
    check_out: date
    nights: int
    guests: int
    rooms: int
    guest_details: list[GuestIn]
    special_requests: str | None = None
    price_per_night: float


class CarSnapshot(CamelModel):
    id: str
    make: str
    model: str
    year: int
    category: str
    image: str


class CarDetails(CamelModel):
    type: Literal["car"] = "car"
    car: CarSnapshot
    pickup_date: datetime
    dropoff_date: datetime
    days: int
    driver_details: DriverIn
    insurance: Any = None
    price_per_day: float


BookingDetails = Annotated[Union[FlightDetails, HotelDetails, CarDetails], Field(discriminator="type")]


class BookingListParams(CamelModel):
    type: Literal["flight", "hotel", "car", "restaurant"] | None = None
    status: Literal["pending", "confirmed", "cancelled", "completed"] | None = None
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1, le=100)
