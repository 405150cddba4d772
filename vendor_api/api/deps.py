# vendor_api/api/deps.py
from dataclasses import dataclass
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from vendor_api.core.blob_store import BlobStore, build_blob_store
from vendor_api.core.config import settings
from vendor_api.db.session import get_db
from vendor_api.services.attachments import AttachmentResolver
from vendor_api.services.listings import StoreWorkflow, VenueWorkflow
from vendor_api.services.profile import ProfileWorkflow
from vendor_api.services.projection import ReadProjection


@lru_cache
def get_blob_store() -> BlobStore:
    """One blob store (and S3 client) per process."""
    return build_blob_store(settings)


@dataclass
class Workflows:
    profile: ProfileWorkflow
    stores: StoreWorkflow
    venues: VenueWorkflow


def get_workflows(
    db: Session = Depends(get_db),
    blob_store: BlobStore = Depends(get_blob_store),
) -> Workflows:
    default_reference = settings.DEFAULT_PROFILE_PICTURE
    resolver = AttachmentResolver(blob_store)
    projection = ReadProjection(blob_store, default_reference)
    return Workflows(
        profile=ProfileWorkflow(db, resolver, default_reference),
        stores=StoreWorkflow(db, resolver, projection, default_reference),
        venues=VenueWorkflow(db, resolver, projection, default_reference),
    )
