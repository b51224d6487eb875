"""Search criteria per domain.

Numeric filters (prices, rating) fail open: a value that does not parse as a
finite number is treated as if it had not been supplied. Dates, counts, coded
enums and pagination are strict and raise ``ValidationError``.
"""

import logging
import math
from typing import Annotated, Any, TypeVar

from pydantic import BeforeValidator, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from wayfare.config import settings
from wayfare.errors import ValidationError, field_errors
from wayfare.schemas.catalog import CamelModel, CarCategory, FlightClass, IsoDate, Transmission

logger = logging.getLogger(__name__)


def _lenient_float(value: Any) -> float | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.debug(f"Ignoring malformed numeric filter {value!r}")
        return None
    return number if math.isfinite(number) else None


def _lower(value: Any) -> Any:
    return value.strip().lower() if isinstance(value, str) else value


LenientFloat = Annotated[float | None, BeforeValidator(_lenient_float)]


class SearchCriteria(CamelModel):
    page: int = Field(1, ge=1)
    limit: int = Field(settings.default_page_size, ge=1, le=settings.max_page_size)

    def search_params(self) -> dict:
        """The filters echoed back to the client, without pagination."""
        return self.model_dump(mode="json", by_alias=True, exclude={"page", "limit"}, exclude_none=True)


class FlightSearchCriteria(SearchCriteria):
    origin: str | None = None
    destination: str | None = None
    departure_date: IsoDate | None = None
    return_date: IsoDate | None = None
    passengers: int | None = Field(None, ge=1, le=9)
    flight_class: FlightClass | None = Field(None, alias="class")
    max_price: LenientFloat = None
    airline: str | None = None

    @field_validator("flight_class", mode="before")
    @classmethod
    def normalize_class(cls, v: Any) -> Any:
        return _lower(v)


class HotelSearchCriteria(SearchCriteria):
    destination: str | None = None
    check_in: IsoDate | None = None
    check_out: IsoDate | None = None
    guests: int | None = Field(None, ge=1, le=20)
    rooms: int | None = Field(None, ge=1, le=10)
    min_price: LenientFloat = None
    max_price: LenientFloat = None
    rating: LenientFloat = None
    amenities: str | None = None

    @property
    def amenity_tokens(self) -> list[str]:
        if not self.amenities:
            return []
        return [token.strip().lower() for token in self.amenities.split(",") if token.strip()]


class CarSearchCriteria(SearchCriteria):
    pickup_location: str | None = None
    dropoff_location: str | None = None
    pickup_date: IsoDate | None = None
    dropoff_date: IsoDate | None = None
    category: CarCategory | None = None
    transmission: Transmission | None = None
    min_price: LenientFloat = None
    max_price: LenientFloat = None

    @field_validator("category", "transmission", mode="before")
    @classmethod
    def normalize_codes(cls, v: Any) -> Any:
        return _lower(v)


class AirportSearchCriteria(CamelModel):
    q: str = Field(min_length=1)

    @field_validator("q", mode="before")
    @classmethod
    def strip_query(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v


C = TypeVar("C", bound=CamelModel)


def parse_criteria(model: type[C], **values: Any) -> C:
    """Build criteria from raw request values, dropping the ones not supplied.

    Values are keyed by wire name before validation so that error locations
    name the query parameter the client actually sent.
    """
    fields = model.model_fields
    supplied = {
        (fields[k].alias or k) if k in fields else k: v
        for k, v in values.items()
        if v is not None
    }
    try:
        return model.model_validate(supplied)
    except PydanticValidationError as e:
        raise ValidationError(errors=field_errors(e.errors())) from e
