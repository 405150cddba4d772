# vendor_api/models/store_price.py
from sqlalchemy import Column, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship
from vendor_api.db.base_class import Base


class StorePrice(Base):
    __tablename__ = "tbl_store_price"

    id = Column("store_price_id", Integer, primary_key=True, autoincrement=True)
    store_id = Column(
        "store_id",
        Integer,
        ForeignKey("tbl_store.store_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column("store_price_title", String(255), nullable=True)
    min = Column("store_price_min", Numeric(12, 2), nullable=False, default=0)
    max = Column("store_price_max", Numeric(12, 2), nullable=False, default=0)
    description = Column("store_price_description", Text, nullable=True)

    # Relationships
    store = relationship("Store", back_populates="prices")
