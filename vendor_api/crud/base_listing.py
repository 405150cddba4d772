# vendor_api/crud/base_listing.py
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Type, TypeVar

from sqlalchemy.orm import Session

from vendor_api.db.base_class import Base

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)
PriceModelType = TypeVar("PriceModelType", bound=Base)


class CRUDListing(ABC, Generic[ModelType, PriceModelType]):
    """
    Persistence for a listing (store, venue) that is created together with
    its first price row.

    ``owner_key`` is the attribute of the price model that points back at
    the listing.
    """

    def __init__(
        self, model: Type[ModelType], price_model: Type[PriceModelType], owner_key: str
    ):
        self.model = model
        self.price_model = price_model
        self.owner_key = owner_key

    def get(self, db: Session, *, id: Any) -> ModelType | None:
        return db.query(self.model).filter(self.model.id == id).first()

    def create_with_price(
        self, db: Session, *, obj_in: Dict[str, Any], price_in: Dict[str, Any]
    ) -> ModelType:
        """
        Insert the listing and its price row as one transaction.

        The parent is flushed first so its generated id is available for the
        price row. Any failure rolls both rows back.
        """
        try:
            db_obj = self.model(**obj_in)
            db.add(db_obj)
            db.flush()

            price = self.price_model(**{self.owner_key: db_obj.id}, **price_in)
            db.add(price)

            db.commit()
            db.refresh(db_obj)
        except Exception as e:
            logger.error(
                f"Failed to create {self.model.__tablename__} row: {str(e)}",
                extra={"user_id": obj_in.get("user_id")},
            )
            db.rollback()
            raise

        logger.info(f"Created {self.model.__tablename__} {db_obj.id}")
        return db_obj

    @abstractmethod
    def get_multi_by_user(self, db: Session, *, user_id: int) -> List[Any]:
        """Listings owned by ``user_id``, oldest first."""
