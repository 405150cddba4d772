# vendor_api/models/store.py
from sqlalchemy import Column, ForeignKey, Integer, String, Text, text
from sqlalchemy.orm import relationship
from vendor_api.db.base_class import Base


class Store(Base):
    __tablename__ = "tbl_store"

    id = Column("store_id", Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "user_id", Integer, ForeignKey("tbl_users.user_id"), nullable=False, index=True
    )
    name = Column("store_name", String(255), nullable=False, default="")
    details = Column("store_details", Text, nullable=True)
    contact = Column("store_contact", String(50), nullable=True)
    email = Column("store_email", String(255), nullable=True)
    type = Column("store_type", String(100), nullable=True)
    description = Column("store_description", Text, nullable=True)
    location = Column("store_location", String(255), nullable=True)
    status = Column(
        "store_status", String(50), nullable=False, server_default=text("'active'")
    )
    cover_photo = Column("store_coverphoto", String(512), nullable=True)
    profile_picture = Column("store_profile_picture", String(512), nullable=True)
    category_id = Column(
        "store_category_id",
        Integer,
        ForeignKey("tbl_store_category.store_category_id"),
        nullable=False,
    )

    # Relationships
    category = relationship("StoreCategory")
    prices = relationship(
        "StorePrice",
        back_populates="store",
        cascade="all, delete-orphan",
        order_by="StorePrice.id",
    )
