# vendor_api/crud/crud_user.py
from typing import Optional

from sqlalchemy import func
from sqlalchemy.engine import Row
from sqlalchemy.orm import Session

from vendor_api.models.user import User


class CRUDUser:
    def get_info(self, db: Session, *, user_id: int, default_picture: str) -> Optional[Row]:
        """Profile row with the default avatar substituted by the query itself."""
        return (
            db.query(
                User.id.label("user_id"),
                User.first_name.label("user_firstName"),
                User.last_name.label("user_lastName"),
                User.email.label("user_email"),
                User.role.label("user_role"),
                func.coalesce(User.profile_picture, default_picture).label("user_pfp"),
            )
            .filter(User.id == user_id)
            .first()
        )

    def update_picture(self, db: Session, *, user_id: int, reference: str) -> int:
        """Set the picture reference; returns the number of rows touched."""
        try:
            updated = (
                db.query(User)
                .filter(User.id == user_id)
                .update({User.profile_picture: reference}, synchronize_session=False)
            )
            if updated:
                db.commit()
            else:
                db.rollback()
        except Exception:
            db.rollback()
            raise
        return updated


user = CRUDUser()
