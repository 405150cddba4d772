# vendor_api/services/provisioning.py
import logging
from pathlib import Path
from typing import Optional

from vendor_api.constants.collections import Collection
from vendor_api.core.blob_store import BlobStore

logger = logging.getLogger(__name__)


def provision_storage(
    blob_store: BlobStore, default_reference: str, default_source: Optional[str]
) -> bool:
    """
    Create every collection and make sure the default avatar exists.

    Returns True when the default avatar was copied in by this call.
    """
    for collection in Collection.all_values():
        blob_store.ensure_collection(collection)

    if blob_store.exists(default_reference):
        return False

    if not default_source or not Path(default_source).is_file():
        logger.warning(
            f"Default profile picture {default_reference} is missing and no "
            "DEFAULT_PROFILE_PICTURE_SOURCE file is configured"
        )
        return False

    copied = blob_store.provision(default_reference, Path(default_source))
    if copied:
        logger.info(f"Provisioned default profile picture at {default_reference}")
    return copied
