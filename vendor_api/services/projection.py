# vendor_api/services/projection.py
"""
Turns store, venue and price rows into API listings.

Stored picture references are rewritten into public URLs of their
collection. The configured default avatar is recognised by equality and is
always returned as-is.
"""

import posixpath
from typing import List, Optional, Sequence, Tuple

from vendor_api.constants.collections import Collection
from vendor_api.core.blob_store import BlobStore
from vendor_api.models.store import Store
from vendor_api.models.venue import Venue
from vendor_api.schemas.store import PriceTier, StoreListing
from vendor_api.schemas.venue import VenueListing


def _as_float(value) -> Optional[float]:
    return float(value) if value is not None else None


class ReadProjection:
    def __init__(self, blob_store: BlobStore, default_reference: str):
        self.blob_store = blob_store
        self.default_reference = default_reference

    def qualify(
        self, reference: Optional[str], collection: str, use_default: bool = False
    ) -> Optional[str]:
        if not reference:
            return self.default_reference if use_default else None
        if reference == self.default_reference:
            return reference
        return self.blob_store.public_url(collection, posixpath.basename(reference))

    @staticmethod
    def price_tiers(prices: Sequence) -> List[PriceTier]:
        return [
            PriceTier(
                title=price.title,
                min=_as_float(price.min),
                max=_as_float(price.max),
                description=price.description,
            )
            for price in prices
        ]

    def store(self, row: Tuple[Store, str]) -> StoreListing:
        store, category_type = row
        return StoreListing(
            id=store.id,
            storeName=store.name,
            storeCategory=category_type,
            coverPhoto=self.qualify(store.cover_photo, Collection.COVER_PHOTOS),
            profilePicture=self.qualify(
                store.profile_picture, Collection.PROFILE_PICTURES, use_default=True
            ),
            store_type=store.type,
            store_status=store.status,
            store_location=store.location,
            store_contact=store.contact,
            prices=self.price_tiers(store.prices),
        )

    def venue(self, venue: Venue) -> VenueListing:
        # Venues are created with exactly one price row; the oldest wins.
        price = venue.prices[0] if venue.prices else None
        return VenueListing(
            venue_id=venue.id,
            venue_title=venue.title,
            venue_owner=venue.owner,
            venue_location=venue.location,
            venue_contact=venue.contact,
            venue_status=venue.status,
            venue_type=venue.type,
            venue_details=venue.details,
            venue_capacity=price.capacity if price else None,
            venue_profile_picture=self.qualify(
                venue.profile_picture, Collection.VENUE_PROFILE_PICTURES, use_default=True
            ),
            venue_cover_photo=self.qualify(venue.cover_photo, Collection.VENUE_COVER_PHOTOS),
            venue_price_title=price.title if price else None,
            venue_price_min=_as_float(price.min) if price else None,
            venue_price_max=_as_float(price.max) if price else None,
            venue_price_description=price.description if price else None,
        )
