"""
Tests for search criteria parsing: which inputs fail open and which are rejected.
"""

from datetime import date

import pytest

from wayfare.errors import ValidationError
from wayfare.schemas.booking import BookingListParams
from wayfare.schemas.search import (
    AirportSearchCriteria,
    CarSearchCriteria,
    FlightSearchCriteria,
    HotelSearchCriteria,
    parse_criteria,
)


def _fields(exc: ValidationError) -> list[str]:
    return [e.field for e in exc.errors]


class TestLenientNumerics:

    @pytest.mark.parametrize("raw", ["abc", "", "   ", "nan", "inf", "1e999"])
    def test_malformed_price_is_dropped(self, raw):
        criteria = parse_criteria(HotelSearchCriteria, min_price=raw, max_price=raw, rating=raw)
        assert criteria.min_price is None
        assert criteria.max_price is None
        assert criteria.rating is None

    def test_numeric_strings_parse(self):
        criteria = parse_criteria(CarSearchCriteria, min_price="40", max_price="70.5")
        assert criteria.min_price == 40.0
        assert criteria.max_price == 70.5


class TestStrictFields:

    def test_defaults(self):
        criteria = parse_criteria(FlightSearchCriteria)
        assert criteria.page == 1
        assert criteria.limit == 20

    def test_dates_parse(self):
        criteria = parse_criteria(HotelSearchCriteria, check_in="2024-02-15", check_out="2024-02-17")
        assert criteria.check_in == date(2024, 2, 15)
        assert criteria.check_out == date(2024, 2, 17)

    def test_malformed_date_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            parse_criteria(FlightSearchCriteria, departure_date="not-a-date")
        assert exc.value.status_code == 400
        assert _fields(exc.value) == ["departureDate"]

    @pytest.mark.parametrize("raw", ["0", "86400", "1707955200", "2024-02-30", "15/02/2024", "2024-02-15T08:00:00"])
    def test_only_iso_calendar_dates_are_accepted(self, raw):
        with pytest.raises(ValidationError) as exc:
            parse_criteria(HotelSearchCriteria, check_in=raw)
        assert _fields(exc.value) == ["checkIn"]

    def test_numeric_car_dates_are_rejected(self):
        with pytest.raises(ValidationError) as exc:
            parse_criteria(CarSearchCriteria, pickup_date="0", dropoff_date="86400")
        assert sorted(_fields(exc.value)) == ["dropoffDate", "pickupDate"]

    @pytest.mark.parametrize("page,limit", [("0", "20"), ("1", "0"), ("1", "101"), ("x", "20")])
    def test_bad_pagination_is_rejected(self, page, limit):
        with pytest.raises(ValidationError):
            parse_criteria(CarSearchCriteria, page=page, limit=limit)

    def test_passenger_count_is_bounded(self):
        with pytest.raises(ValidationError) as exc:
            parse_criteria(FlightSearchCriteria, passengers="10")
        assert _fields(exc.value) == ["passengers"]

    def test_unknown_enum_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            parse_criteria(CarSearchCriteria, category="spaceship")
        assert _fields(exc.value) == ["category"]

    def test_codes_are_normalized(self):
        flight = parse_criteria(FlightSearchCriteria, flight_class=" First ")
        car = parse_criteria(CarSearchCriteria, transmission="MANUAL")
        assert flight.flight_class == "first"
        assert car.transmission == "manual"

    def test_every_bad_field_is_reported(self):
        with pytest.raises(ValidationError) as exc:
            parse_criteria(HotelSearchCriteria, check_in="soon", rooms="0")
        assert sorted(_fields(exc.value)) == ["checkIn", "rooms"]


class TestSearchParams:

    def test_echoes_supplied_filters_by_wire_name(self):
        criteria = parse_criteria(
            FlightSearchCriteria,
            origin="JFK",
            departure_date="2024-02-15",
            flight_class="economy",
            page="2",
        )
        assert criteria.search_params() == {
            "origin": "JFK",
            "departureDate": "2024-02-15",
            "class": "economy",
        }

    def test_amenity_tokens(self):
        criteria = HotelSearchCriteria(amenities=" WiFi ,, Pool ")
        assert criteria.amenity_tokens == ["wifi", "pool"]


class TestAirportCriteria:

    def test_query_is_required(self):
        with pytest.raises(ValidationError) as exc:
            parse_criteria(AirportSearchCriteria, q=None)
        assert _fields(exc.value) == ["q"]

    def test_blank_query_is_rejected(self):
        with pytest.raises(ValidationError):
            parse_criteria(AirportSearchCriteria, q="   ")


class TestBookingListParams:

    def test_defaults(self):
        params = parse_criteria(BookingListParams)
        assert (params.page, params.limit, params.type, params.status) == (1, 10, None, None)

    def test_unknown_status_is_rejected(self):
        with pytest.raises(ValidationError):
            parse_criteria(BookingListParams, status="lost")
