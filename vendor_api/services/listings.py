# vendor_api/services/listings.py
"""
Creation and listing of stores and venues.

Both follow the same workflow: resolve the uploaded pictures, insert the
listing together with its first price row in one transaction, and read
listings back through the projection. ``ListingSpec`` holds everything that
differs between the two.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vendor_api.constants.collections import Collection
from vendor_api.core.exceptions import classify_database_error
from vendor_api.crud import crud_store, crud_venue
from vendor_api.crud.base_listing import CRUDListing
from vendor_api.schemas.base import ListingForm
from vendor_api.schemas.store import StoreCategory
from vendor_api.services.attachments import AttachmentResolver, Upload
from vendor_api.services.projection import ReadProjection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttachmentSlot:
    field: str
    attribute: str
    collection: str
    use_default: bool = False


@dataclass(frozen=True)
class ListingSpec:
    name: str
    crud: CRUDListing
    attachments: Tuple[AttachmentSlot, ...]
    created_message: str
    id_key: str
    project: Callable[[ReadProjection, object], BaseModel]


STORE_SPEC = ListingSpec(
    name="store",
    crud=crud_store.store,
    attachments=(
        AttachmentSlot("coverPhoto", "cover_photo", Collection.COVER_PHOTOS),
        AttachmentSlot(
            "profilePicture", "profile_picture", Collection.PROFILE_PICTURES, use_default=True
        ),
    ),
    created_message="Store created successfully!",
    id_key="store_id",
    project=ReadProjection.store,
)

VENUE_SPEC = ListingSpec(
    name="venue",
    crud=crud_venue.venue,
    attachments=(
        AttachmentSlot(
            "venue_profile_picture",
            "profile_picture",
            Collection.VENUE_PROFILE_PICTURES,
            use_default=True,
        ),
        AttachmentSlot("venue_cover_photo", "cover_photo", Collection.VENUE_COVER_PHOTOS),
    ),
    created_message="Venue created successfully!",
    id_key="venue_id",
    project=ReadProjection.venue,
)


class ListingWorkflow:
    def __init__(
        self,
        db: Session,
        resolver: AttachmentResolver,
        projection: ReadProjection,
        spec: ListingSpec,
        default_reference: str,
    ):
        self.db = db
        self.resolver = resolver
        self.projection = projection
        self.spec = spec
        self.default_reference = default_reference

    def _resolve_attachments(
        self, uploads: Dict[str, Optional[Upload]], written: List[str]
    ) -> Dict[str, Optional[str]]:
        references = {}
        for slot in self.spec.attachments:
            fallback = self.default_reference if slot.use_default else None
            upload = uploads.get(slot.field)
            reference = self.resolver.resolve(upload, slot.collection, fallback)
            if upload is not None:
                written.append(reference)
            references[slot.attribute] = reference
        return references

    def create(self, form: ListingForm, uploads: Dict[str, Optional[Upload]]) -> dict:
        written: List[str] = []
        try:
            references = self._resolve_attachments(uploads, written)
            listing = self.spec.crud.create_with_price(
                self.db,
                obj_in={**form.listing_fields(), **references},
                price_in=form.price_fields(),
            )
        except SQLAlchemyError as e:
            self.resolver.discard(written)
            raise classify_database_error(e) from e
        except Exception:
            self.resolver.discard(written)
            raise

        logger.info(f"User {form.user_id} created {self.spec.name} {listing.id}")
        return {"message": self.spec.created_message, self.spec.id_key: listing.id}

    def list(self, user_id: int) -> List[BaseModel]:
        try:
            rows = self.spec.crud.get_multi_by_user(self.db, user_id=user_id)
            return [self.spec.project(self.projection, row) for row in rows]
        except SQLAlchemyError as e:
            raise classify_database_error(e) from e


class StoreWorkflow(ListingWorkflow):
    def __init__(self, db, resolver, projection, default_reference: str):
        super().__init__(db, resolver, projection, STORE_SPEC, default_reference)

    def list_categories(self) -> List[StoreCategory]:
        try:
            categories = crud_store.store.get_categories(self.db)
        except SQLAlchemyError as e:
            raise classify_database_error(e) from e
        return [StoreCategory.model_validate(category) for category in categories]


class VenueWorkflow(ListingWorkflow):
    def __init__(self, db, resolver, projection, default_reference: str):
        super().__init__(db, resolver, projection, VENUE_SPEC, default_reference)
