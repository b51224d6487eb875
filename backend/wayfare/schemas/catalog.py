"""Catalog item shapes — flights, hotels, cars, and the airport lookup table.

Items are frozen: a catalog is a read-only snapshot for the lifetime of a process.
Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import date, datetime
from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

FlightClass = Literal["economy", "business", "first"]
CarCategory = Literal["economy", "compact", "midsize", "fullsize", "luxury", "suv"]
Transmission = Literal["manual", "automatic"]
FuelType = Literal["petrol", "diesel", "electric", "hybrid"]


def _iso_date(value: Any) -> date:
    if isinstance(value, datetime):
        raise ValueError("Expected a calendar date without a time")
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            pass
    raise ValueError("Must be an ISO 8601 date (YYYY-MM-DD)")


def _iso_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            pass
    raise ValueError("Must be an ISO 8601 date-time")


# Numbers and numeric strings are not read as Unix timestamps.
IsoDate = Annotated[date, BeforeValidator(_iso_date)]
IsoDateTime = Annotated[datetime, BeforeValidator(_iso_datetime)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CatalogModel(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class FlightEndpoint(CatalogModel):
    airport: str
    city: str
    country: str
    date: datetime
    terminal: str | None = None


class Baggage(CatalogModel):
    carry: str
    checked: str


class Flight(CatalogModel):
    id: str
    airline: str
    flight_number: str
    departure: FlightEndpoint
    arrival: FlightEndpoint
    duration: str
    aircraft: str
    price: float = Field(gt=0)
    currency: str = "USD"
    available_seats: int = Field(ge=0)
    flight_class: FlightClass = Field(alias="class")
    baggage: Baggage

    @property
    def unit_price(self) -> float:
        return self.price


class Coordinates(CatalogModel):
    lat: float
    lng: float


class HotelLocation(CatalogModel):
    address: str
    city: str
    country: str
    coordinates: Coordinates


class RoomType(CatalogModel):
    type: str
    price: float = Field(gt=0)
    currency: str = "USD"
    available: int = Field(ge=0)
    max_guests: int
    description: str = ""


class Hotel(CatalogModel):
    id: str
    name: str
    location: HotelLocation
    rating: float
    images: list[str] = []
    amenities: list[str] = []
    room_types: list[RoomType]
    check_in: date
    check_out: date
    price_per_night: float = Field(gt=0)
    currency: str = "USD"

    @property
    def unit_price(self) -> float:
        return self.price_per_night

    def room(self, room_type: str) -> RoomType | None:
        return next((r for r in self.room_types if r.type == room_type), None)


class Car(CatalogModel):
    id: str
    make: str
    model: str
    year: int
    category: CarCategory
    transmission: Transmission
    fuel_type: FuelType
    seats: int
    doors: int
    air_conditioning: bool
    image: str
    price_per_day: float = Field(gt=0)
    currency: str = "USD"
    available: bool
    pickup_location: str
    dropoff_location: str
    pickup_date: date
    dropoff_date: date

    @property
    def unit_price(self) -> float:
        return self.price_per_day


class Airport(CatalogModel):
    code: str
    name: str
    city: str
    country: str
