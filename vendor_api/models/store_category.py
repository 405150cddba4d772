# vendor_api/models/store_category.py
from sqlalchemy import Column, Integer, String
from vendor_api.db.base_class import Base


class StoreCategory(Base):
    __tablename__ = "tbl_store_category"

    id = Column("store_category_id", Integer, primary_key=True, autoincrement=True)
    type = Column("store_category_type", String(100), nullable=False)
