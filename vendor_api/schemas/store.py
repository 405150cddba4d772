# vendor_api/schemas/store.py
from decimal import Decimal
from typing import ClassVar, Dict, List, Optional

from pydantic import BaseModel, Field, PositiveInt

from vendor_api.schemas.base import ListingForm


class StoreCreate(ListingForm):
    store_name: str = Field("", alias="storeName")
    store_details: str = Field("", alias="storeDetails")
    contact_number: str = Field("", alias="contactNumber")
    email: str = ""
    store_type: str = Field("", alias="storeType")
    store_description: str = Field("", alias="storeDescription")
    location: str = ""
    store_category_id: PositiveInt
    store_price_min: Decimal = Decimal("0")
    store_price_max: Decimal = Decimal("0")
    store_price_description: str = ""

    required_messages: ClassVar[Dict[str, str]] = {
        "user_id": "User ID is missing",
        "store_category_id": "Store category ID is required",
    }

    def listing_fields(self) -> dict:
        return {
            "user_id": self.user_id,
            "name": self.store_name,
            "details": self.store_details,
            "contact": self.contact_number,
            "email": self.email,
            "type": self.store_type,
            "description": self.store_description,
            "location": self.location,
            "category_id": self.store_category_id,
        }

    def price_fields(self) -> dict:
        return {
            "min": self.store_price_min,
            "max": self.store_price_max,
            "description": self.store_price_description,
        }


class StoreCategory(BaseModel):
    id: int
    type: str

    model_config = {"from_attributes": True}


class PriceTier(BaseModel):
    title: Optional[str] = None
    min: Optional[float] = None
    max: Optional[float] = None
    description: Optional[str] = None


class StoreListing(BaseModel):
    id: int
    storeName: str
    storeCategory: str
    coverPhoto: Optional[str] = None
    profilePicture: Optional[str] = None
    store_type: Optional[str] = None
    store_status: Optional[str] = None
    store_location: Optional[str] = None
    store_contact: Optional[str] = None
    prices: List[PriceTier] = []
