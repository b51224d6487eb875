"""
Tests for the per-domain search predicates.
"""

import pytest

from wayfare.data.catalog import AIRPORTS, CARS, FLIGHTS, HOTELS
from wayfare.schemas.catalog import Airport, Car, Flight, Hotel
from wayfare.schemas.search import (
    AirportSearchCriteria,
    CarSearchCriteria,
    FlightSearchCriteria,
    HotelSearchCriteria,
    parse_criteria,
)
from wayfare.services.query_builder import (
    airport_predicate,
    car_predicate,
    flight_predicate,
    hotel_predicate,
)

SAMPLE_FLIGHTS = [Flight.model_validate(f) for f in FLIGHTS]
SAMPLE_HOTELS = [Hotel.model_validate(h) for h in HOTELS]
SAMPLE_CARS = [Car.model_validate(c) for c in CARS]
SAMPLE_AIRPORTS = [Airport(code=c, name=n, city=city, country=country) for c, n, city, country in AIRPORTS]


def _ids(items, predicate):
    return [i.id for i in items if predicate(i)]


class TestFlightPredicate:

    def test_origin_matches_code_case_insensitively(self):
        predicate = flight_predicate(FlightSearchCriteria(origin="jfk"))
        assert _ids(SAMPLE_FLIGHTS, predicate) == ["FL001"]

    def test_origin_matches_city_substring(self):
        predicate = flight_predicate(FlightSearchCriteria(origin="chic"))
        assert _ids(SAMPLE_FLIGHTS, predicate) == ["FL003"]

    def test_destination(self):
        predicate = flight_predicate(FlightSearchCriteria(destination="London"))
        assert _ids(SAMPLE_FLIGHTS, predicate) == ["FL003"]

    def test_class_is_exact(self):
        predicate = flight_predicate(parse_criteria(FlightSearchCriteria, flight_class="BUSINESS"))
        assert _ids(SAMPLE_FLIGHTS, predicate) == ["FL003"]

    def test_airline_substring(self):
        predicate = flight_predicate(FlightSearchCriteria(airline="delta"))
        assert _ids(SAMPLE_FLIGHTS, predicate) == ["FL002"]

    def test_passengers_require_seats(self):
        full = SAMPLE_FLIGHTS[0].model_copy(update={"available_seats": 2})
        predicate = flight_predicate(FlightSearchCriteria(passengers=3))
        assert not predicate(full)
        assert predicate(SAMPLE_FLIGHTS[0])

    def test_max_price_is_inclusive(self):
        predicate = flight_predicate(FlightSearchCriteria(max_price=349.99))
        assert _ids(SAMPLE_FLIGHTS, predicate) == ["FL001", "FL002"]

    def test_filters_combine_with_and(self):
        predicate = flight_predicate(FlightSearchCriteria(origin="LAX", max_price=300))
        assert _ids(SAMPLE_FLIGHTS, predicate) == []

    def test_malformed_price_is_ignored(self):
        criteria = parse_criteria(FlightSearchCriteria, max_price="cheap")
        assert criteria.max_price is None
        assert len(_ids(SAMPLE_FLIGHTS, flight_predicate(criteria))) == len(SAMPLE_FLIGHTS)


class TestHotelPredicate:

    def test_destination_matches_city_or_country(self):
        assert _ids(SAMPLE_HOTELS, hotel_predicate(HotelSearchCriteria(destination="new york"))) == ["HTL001"]
        assert _ids(SAMPLE_HOTELS, hotel_predicate(HotelSearchCriteria(destination="USA"))) == ["HTL001", "HTL002"]

    def test_price_bounds_use_nightly_price(self):
        predicate = hotel_predicate(HotelSearchCriteria(min_price=200, max_price=300))
        assert _ids(SAMPLE_HOTELS, predicate) == ["HTL002"]

    def test_min_price_is_inclusive(self):
        predicate = hotel_predicate(HotelSearchCriteria(min_price=199))
        assert _ids(SAMPLE_HOTELS, predicate) == ["HTL001", "HTL002"]

    def test_price_range_of_a_single_value(self):
        predicate = hotel_predicate(HotelSearchCriteria(min_price=299, max_price=299))
        assert _ids(SAMPLE_HOTELS, predicate) == ["HTL002"]

    def test_rating_is_a_minimum(self):
        assert _ids(SAMPLE_HOTELS, hotel_predicate(HotelSearchCriteria(rating=4.6))) == ["HTL002"]

    def test_rating_is_inclusive(self):
        assert _ids(SAMPLE_HOTELS, hotel_predicate(HotelSearchCriteria(rating=4.8))) == ["HTL002"]
        assert _ids(SAMPLE_HOTELS, hotel_predicate(HotelSearchCriteria(rating=4.5))) == ["HTL001", "HTL002"]

    @pytest.mark.parametrize(
        "amenities,expected",
        [
            ("wifi,pool", ["HTL001", "HTL002"]),
            ("Spa", ["HTL001"]),
            ("beach", ["HTL002"]),
            ("spa,beach", []),
            ("wifi, ,", ["HTL001", "HTL002"]),
        ],
    )
    def test_every_amenity_token_must_match(self, amenities, expected):
        predicate = hotel_predicate(HotelSearchCriteria(amenities=amenities))
        assert _ids(SAMPLE_HOTELS, predicate) == expected

    def test_rooms_need_one_room_type_with_enough_inventory(self):
        assert _ids(SAMPLE_HOTELS, hotel_predicate(HotelSearchCriteria(rooms=6))) == ["HTL002"]
        assert _ids(SAMPLE_HOTELS, hotel_predicate(HotelSearchCriteria(rooms=9))) == []

    def test_guests_do_not_narrow(self):
        assert len(_ids(SAMPLE_HOTELS, hotel_predicate(HotelSearchCriteria(guests=3)))) == 2


class TestCarPredicate:

    def test_unavailable_cars_never_match(self):
        unavailable = SAMPLE_CARS[0].model_copy(update={"available": False})
        assert not car_predicate(CarSearchCriteria())(unavailable)

    def test_pickup_location_substring(self):
        assert _ids(SAMPLE_CARS, car_predicate(CarSearchCriteria(pickup_location="lax"))) == ["CAR001"]

    def test_category_and_transmission(self):
        criteria = parse_criteria(CarSearchCriteria, category="SUV", transmission="Automatic")
        assert _ids(SAMPLE_CARS, car_predicate(criteria)) == ["CAR003"]

    def test_daily_price_bounds(self):
        predicate = car_predicate(CarSearchCriteria(min_price=50, max_price=89))
        assert _ids(SAMPLE_CARS, predicate) == ["CAR002", "CAR003"]

    def test_min_price_is_inclusive(self):
        predicate = car_predicate(CarSearchCriteria(min_price=45))
        assert _ids(SAMPLE_CARS, predicate) == ["CAR001", "CAR002", "CAR003"]

    def test_max_price_is_inclusive(self):
        predicate = car_predicate(CarSearchCriteria(max_price=45))
        assert _ids(SAMPLE_CARS, predicate) == ["CAR001"]


class TestAirportPredicate:

    @pytest.mark.parametrize(
        "q,expected",
        [
            ("lhr", ["LHR"]),
            ("heathrow", ["LHR"]),
            ("Paris", ["CDG"]),
            ("International", ["JFK", "LAX", "ORD", "NRT"]),
        ],
    )
    def test_matches_code_name_or_city(self, q, expected):
        predicate = airport_predicate(AirportSearchCriteria(q=q))
        assert [a.code for a in SAMPLE_AIRPORTS if predicate(a)] == expected
