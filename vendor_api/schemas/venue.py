# vendor_api/schemas/venue.py
from decimal import Decimal
from typing import ClassVar, Dict, Optional

from pydantic import BaseModel, NonNegativeInt

from vendor_api.schemas.base import ListingForm


class VenueCreate(ListingForm):
    venue_title: str = ""
    venue_owner: str = ""
    venue_location: str = ""
    venue_contact: str = ""
    venue_details: str = ""
    venue_status: str = "available"
    venue_type: str = "internal"
    venue_price_min: Decimal = Decimal("0")
    venue_price_max: Decimal = Decimal("0")
    venue_price_description: str = ""
    venue_capacity: NonNegativeInt = 0

    required_messages: ClassVar[Dict[str, str]] = {"user_id": "User ID is missing"}

    def listing_fields(self) -> dict:
        return {
            "user_id": self.user_id,
            "title": self.venue_title,
            "owner": self.venue_owner,
            "location": self.venue_location,
            "contact": self.venue_contact,
            "details": self.venue_details,
            "status": self.venue_status,
            "type": self.venue_type,
        }

    def price_fields(self) -> dict:
        return {
            "min": self.venue_price_min,
            "max": self.venue_price_max,
            "capacity": self.venue_capacity,
            "description": self.venue_price_description,
        }


class VenueListing(BaseModel):
    venue_id: int
    venue_title: str
    venue_owner: Optional[str] = None
    venue_location: Optional[str] = None
    venue_contact: Optional[str] = None
    venue_status: Optional[str] = None
    venue_type: Optional[str] = None
    venue_details: Optional[str] = None
    venue_capacity: Optional[int] = None
    venue_profile_picture: Optional[str] = None
    venue_cover_photo: Optional[str] = None
    venue_price_title: Optional[str] = None
    venue_price_min: Optional[float] = None
    venue_price_max: Optional[float] = None
    venue_price_description: Optional[str] = None
