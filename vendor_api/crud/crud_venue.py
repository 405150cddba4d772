# vendor_api/crud/crud_venue.py
from typing import List

from sqlalchemy.orm import Session, selectinload

from vendor_api.crud.base_listing import CRUDListing
from vendor_api.models.venue import Venue
from vendor_api.models.venue_price import VenuePrice


class CRUDVenue(CRUDListing[Venue, VenuePrice]):
    def get_multi_by_user(self, db: Session, *, user_id: int) -> List[Venue]:
        # Prices are matched through VenuePrice.venue_id, the owning key.
        return (
            db.query(Venue)
            .options(selectinload(Venue.prices))
            .filter(Venue.user_id == user_id)
            .order_by(Venue.id)
            .all()
        )


venue = CRUDVenue(Venue, VenuePrice, owner_key="venue_id")
