from wayfare.models.user import User
from wayfare.models.booking import Booking
from wayfare.models.catalog import CatalogItemRecord

__all__ = [
    "Booking",
    "CatalogItemRecord",
    "User",
]
