# vendor_api/crud/crud_store.py
from typing import List, Tuple

from sqlalchemy.orm import Session, selectinload

from vendor_api.crud.base_listing import CRUDListing
from vendor_api.models.store import Store
from vendor_api.models.store_category import StoreCategory
from vendor_api.models.store_price import StorePrice


class CRUDStore(CRUDListing[Store, StorePrice]):
    def get_multi_by_user(self, db: Session, *, user_id: int) -> List[Tuple[Store, str]]:
        """
        Stores of a user with their category label.

        Stores whose category row is missing are left out by the inner join;
        price rows are loaded separately so stores without prices still show.
        """
        return (
            db.query(Store, StoreCategory.type)
            .join(StoreCategory, Store.category_id == StoreCategory.id)
            .options(selectinload(Store.prices))
            .filter(Store.user_id == user_id)
            .order_by(Store.id)
            .all()
        )

    def get_categories(self, db: Session) -> List[StoreCategory]:
        return db.query(StoreCategory).order_by(StoreCategory.id).all()


store = CRUDStore(Store, StorePrice, owner_key="store_id")
