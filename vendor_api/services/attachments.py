# vendor_api/services/attachments.py
"""
Stores uploaded files in the blob store and hands back the references
that get saved on store, venue and user rows.
"""

import logging
import uuid
from dataclasses import dataclass
from typing import BinaryIO, Iterable, Optional

from starlette.datastructures import UploadFile

from vendor_api.core.blob_store import BlobStore
from vendor_api.core.exceptions import StorageError, ValidationError
from vendor_api.utils.sanitize import sanitize_filename

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Upload:
    filename: str
    stream: BinaryIO

    @classmethod
    def from_form_value(cls, value) -> Optional["Upload"]:
        """An uploaded multipart field, or None when no file was sent."""
        if not isinstance(value, UploadFile) or not value.filename:
            return None
        return cls(filename=value.filename, stream=value.file)


class AttachmentResolver:
    def __init__(self, blob_store: BlobStore):
        self.blob_store = blob_store

    @staticmethod
    def stored_name(filename: str) -> str:
        try:
            basename = sanitize_filename(filename)
        except ValueError:
            raise ValidationError(f"Invalid filename: {filename}")
        return f"{uuid.uuid4().hex}_{basename}"

    def resolve(
        self,
        upload: Optional[Upload],
        collection: str,
        fallback: Optional[str] = None,
    ) -> Optional[str]:
        """
        Store ``upload`` in ``collection`` and return its reference.

        Without an upload the fallback reference is returned untouched.
        Raises StorageError when the blob could not be written.
        """
        if upload is None:
            return fallback

        name = self.stored_name(upload.filename)
        self.blob_store.ensure_collection(collection)
        reference = self.blob_store.write(collection, name, upload.stream)
        logger.info(f"Stored upload {upload.filename!r} as {reference}")
        return reference

    def discard(self, references: Iterable[str]) -> None:
        """Best-effort removal of blobs written by a request that failed."""
        for reference in references:
            try:
                self.blob_store.delete(reference)
            except StorageError as e:
                logger.warning(f"Could not remove orphaned blob {reference}: {e}")
