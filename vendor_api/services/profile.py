# vendor_api/services/profile.py
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vendor_api.constants.collections import Collection
from vendor_api.core.exceptions import NotFoundError, ValidationError, classify_database_error
from vendor_api.crud import crud_user
from vendor_api.schemas.user import UserInfo
from vendor_api.services.attachments import AttachmentResolver, Upload

logger = logging.getLogger(__name__)


class ProfileWorkflow:
    """Reads a user's profile and replaces their profile picture."""

    def __init__(self, db: Session, resolver: AttachmentResolver, default_reference: str):
        self.db = db
        self.resolver = resolver
        self.default_reference = default_reference

    def get_user_info(self, user_id: int) -> UserInfo:
        try:
            row = crud_user.user.get_info(
                self.db, user_id=user_id, default_picture=self.default_reference
            )
        except SQLAlchemyError as e:
            raise classify_database_error(e) from e

        if row is None:
            raise NotFoundError("User not found")
        return UserInfo(**row._asdict())

    def update_picture(self, user_id: int, upload: Optional[Upload]) -> str:
        if upload is None:
            raise ValidationError("User ID and profile picture are required.")

        reference = self.resolver.resolve(upload, Collection.PROFILE_PICTURES)

        try:
            updated = crud_user.user.update_picture(
                self.db, user_id=user_id, reference=reference
            )
        except SQLAlchemyError as e:
            self.resolver.discard([reference])
            raise classify_database_error(e) from e

        if not updated:
            self.resolver.discard([reference])
            raise NotFoundError("User not found")

        logger.info(f"Updated profile picture of user {user_id}")
        return reference
