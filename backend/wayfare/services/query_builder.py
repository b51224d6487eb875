"""Query predicate builder — turns search criteria into a single item predicate.

Every supplied filter contributes one check; the predicate is their AND.
Missing filters contribute nothing, so empty criteria match every item.
"""

from collections.abc import Callable

from wayfare.schemas.catalog import Airport, Car, Flight, Hotel
from wayfare.schemas.search import (
    AirportSearchCriteria,
    CarSearchCriteria,
    FlightSearchCriteria,
    HotelSearchCriteria,
)


def contains(haystack: str, needle: str) -> bool:
    return needle.lower() in haystack.lower()


def code_equals(value: str, code: str) -> bool:
    return value.lower() == code.lower()


def all_of(checks: list[Callable]) -> Callable:
    def predicate(item) -> bool:
        return all(check(item) for check in checks)

    return predicate


def _price_bounds(checks: list[Callable], min_price: float | None, max_price: float | None) -> None:
    if min_price is not None:
        checks.append(lambda item: item.unit_price >= min_price)
    if max_price is not None:
        checks.append(lambda item: item.unit_price <= max_price)


def flight_predicate(criteria: FlightSearchCriteria) -> Callable[[Flight], bool]:
    checks: list[Callable[[Flight], bool]] = []

    # Route ends match the airport code exactly or the city by substring
    if criteria.origin:
        origin = criteria.origin
        checks.append(
            lambda f: code_equals(f.departure.airport, origin) or contains(f.departure.city, origin)
        )
    if criteria.destination:
        destination = criteria.destination
        checks.append(
            lambda f: code_equals(f.arrival.airport, destination) or contains(f.arrival.city, destination)
        )
    if criteria.flight_class:
        flight_class = criteria.flight_class
        checks.append(lambda f: code_equals(f.flight_class, flight_class))
    if criteria.airline:
        airline = criteria.airline
        checks.append(lambda f: contains(f.airline, airline))
    if criteria.passengers is not None:
        passengers = criteria.passengers
        checks.append(lambda f: f.available_seats >= passengers)
    _price_bounds(checks, None, criteria.max_price)

    return all_of(checks)


def hotel_predicate(criteria: HotelSearchCriteria) -> Callable[[Hotel], bool]:
    checks: list[Callable[[Hotel], bool]] = []

    if criteria.destination:
        destination = criteria.destination
        checks.append(
            lambda h: contains(h.location.city, destination) or contains(h.location.country, destination)
        )
    _price_bounds(checks, criteria.min_price, criteria.max_price)
    if criteria.rating is not None:
        rating = criteria.rating
        checks.append(lambda h: h.rating >= rating)
    tokens = criteria.amenity_tokens
    if tokens:
        checks.append(
            lambda h: all(any(contains(amenity, token) for amenity in h.amenities) for token in tokens)
        )
    if criteria.rooms is not None:
        rooms = criteria.rooms
        checks.append(lambda h: any(r.available >= rooms for r in h.room_types))

    return all_of(checks)


def car_predicate(criteria: CarSearchCriteria) -> Callable[[Car], bool]:
    checks: list[Callable[[Car], bool]] = [lambda c: c.available]

    if criteria.pickup_location:
        pickup = criteria.pickup_location
        checks.append(lambda c: contains(c.pickup_location, pickup))
    if criteria.dropoff_location:
        dropoff = criteria.dropoff_location
        checks.append(lambda c: contains(c.dropoff_location, dropoff))
    if criteria.category:
        category = criteria.category
        checks.append(lambda c: code_equals(c.category, category))
    if criteria.transmission:
        transmission = criteria.transmission
        checks.append(lambda c: code_equals(c.transmission, transmission))
    _price_bounds(checks, criteria.min_price, criteria.max_price)

    return all_of(checks)


def airport_predicate(criteria: AirportSearchCriteria) -> Callable[[Airport], bool]:
    q = criteria.q
    return lambda a: contains(a.code, q) or contains(a.name, q) or contains(a.city, q)
