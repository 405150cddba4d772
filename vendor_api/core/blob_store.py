# vendor_api/core/blob_store.py
"""
Blob storage backends for uploaded pictures.

A blob lives in a named collection (``profile_pictures``, ``cover_photos``,
...) and is addressed by a reference string that is persisted in the
database. ``LocalBlobStore`` keeps files on disk under ``UPLOAD_DIR``;
``S3BlobStore`` keeps them in a bucket.
"""

import logging
import os
import shutil
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Optional

from botocore.exceptions import BotoCoreError, ClientError

from vendor_api.core.config import Settings
from vendor_api.core.exceptions import StorageError
from vendor_api.core.s3 import get_s3_client, public_object_url

logger = logging.getLogger(__name__)


class BlobStore(ABC):
    @abstractmethod
    def reference(self, collection: str, name: str) -> str:
        """Reference persisted for blob ``name`` in ``collection``."""

    @abstractmethod
    def public_url(self, collection: str, name: str) -> str:
        """Externally addressable location of the blob."""

    @abstractmethod
    def ensure_collection(self, collection: str) -> None:
        ...

    @abstractmethod
    def write(self, collection: str, name: str, stream: BinaryIO) -> str:
        """Store the stream and return its reference once it is durable."""

    @abstractmethod
    def exists(self, reference: str) -> bool:
        ...

    @abstractmethod
    def delete(self, reference: str) -> None:
        ...

    @abstractmethod
    def provision(self, reference: str, source: Path) -> bool:
        """Copy ``source`` to ``reference`` unless it already exists."""


class LocalBlobStore(BlobStore):
    def __init__(self, root, url_prefix: str = "uploads"):
        self.root = Path(root)
        self.url_prefix = url_prefix.strip("/")

    def reference(self, collection: str, name: str) -> str:
        return f"{self.url_prefix}/{collection}/{name}"

    def public_url(self, collection: str, name: str) -> str:
        return self.reference(collection, name)

    def _path(self, reference: str) -> Path:
        prefix = f"{self.url_prefix}/"
        relative = reference[len(prefix):] if reference.startswith(prefix) else reference
        root = self.root.resolve()
        path = (root / relative).resolve()
        if root not in path.parents:
            raise StorageError("Invalid blob reference")
        return path

    def ensure_collection(self, collection: str) -> None:
        try:
            (self.root / collection).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Could not create collection {collection}: {e}")
            raise StorageError(f"Could not create collection {collection}") from e

    def _write_atomic(self, target: Path, stream: BinaryIO) -> None:
        # Readers only ever see the final name after os.replace.
        fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=".upload-")
        try:
            with os.fdopen(fd, "wb") as out:
                shutil.copyfileobj(stream, out)
                out.flush()
                os.fsync(out.fileno())
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def write(self, collection: str, name: str, stream: BinaryIO) -> str:
        target = self.root / collection / name
        try:
            self._write_atomic(target, stream)
        except OSError as e:
            logger.error(f"Failed to write blob {collection}/{name}: {e}")
            raise StorageError(f"Failed to upload file to {collection}") from e
        return self.reference(collection, name)

    def exists(self, reference: str) -> bool:
        return self._path(reference).is_file()

    def delete(self, reference: str) -> None:
        try:
            self._path(reference).unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to delete {reference}") from e

    def provision(self, reference: str, source: Path) -> bool:
        target = self._path(reference)
        if target.is_file():
            return False
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with open(source, "rb") as stream:
                self._write_atomic(target, stream)
        except OSError as e:
            raise StorageError(f"Failed to provision {reference}") from e
        return True


class S3BlobStore(BlobStore):
    def __init__(
        self,
        client,
        bucket: str,
        region: Optional[str] = None,
        public_base_url: Optional[str] = None,
    ):
        self.client = client
        self.bucket = bucket
        self.region = region
        self.public_base_url = public_base_url.rstrip("/") if public_base_url else None

    def reference(self, collection: str, name: str) -> str:
        return f"{collection}/{name}"

    def public_url(self, collection: str, name: str) -> str:
        key = self.reference(collection, name)
        if self.public_base_url:
            return f"{self.public_base_url}/{key}"
        return public_object_url(self.bucket, self.region, key)

    def ensure_collection(self, collection: str) -> None:
        # S3 prefixes exist implicitly once an object is written under them.
        return None

    def write(self, collection: str, name: str, stream: BinaryIO) -> str:
        key = self.reference(collection, name)
        try:
            self.client.upload_fileobj(stream, self.bucket, key)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to upload s3://{self.bucket}/{key}: {e}")
            raise StorageError(f"Failed to upload file to {collection}") from e
        return key

    def exists(self, reference: str) -> bool:
        try:
            self.client.head_object(Bucket=self.bucket, Key=reference)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in ("404", "NoSuchKey", "NotFound"):
                return False
            raise StorageError(f"Could not check {reference}") from e
        return True

    def delete(self, reference: str) -> None:
        try:
            self.client.delete_object(Bucket=self.bucket, Key=reference)
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f"Failed to delete {reference}") from e

    def provision(self, reference: str, source: Path) -> bool:
        if self.exists(reference):
            return False
        try:
            self.client.upload_file(str(source), self.bucket, reference)
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f"Failed to provision {reference}") from e
        return True


def build_blob_store(settings: Settings) -> BlobStore:
    if settings.BLOB_BACKEND == "s3":
        if not settings.AWS_S3_BUCKET_NAME:
            raise ValueError("AWS_S3_BUCKET_NAME is required when BLOB_BACKEND=s3")
        public_base_url = None
        if settings.AWS_S3_ENDPOINT_URL:
            public_base_url = f"{settings.AWS_S3_ENDPOINT_URL.rstrip('/')}/{settings.AWS_S3_BUCKET_NAME}"
        return S3BlobStore(
            get_s3_client(),
            bucket=settings.AWS_S3_BUCKET_NAME,
            region=settings.AWS_S3_REGION,
            public_base_url=public_base_url,
        )
    return LocalBlobStore(settings.UPLOAD_DIR, url_prefix=settings.UPLOAD_URL_PREFIX)
