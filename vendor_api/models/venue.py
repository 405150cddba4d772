# vendor_api/models/venue.py
from sqlalchemy import Column, ForeignKey, Integer, String, Text, text
from sqlalchemy.orm import relationship
from vendor_api.db.base_class import Base


class Venue(Base):
    __tablename__ = "tbl_venue"

    id = Column("venue_id", Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "user_id", Integer, ForeignKey("tbl_users.user_id"), nullable=False, index=True
    )
    title = Column("venue_title", String(255), nullable=False, default="")
    # Free text: the venue may be listed on behalf of someone else.
    owner = Column("venue_owner", String(255), nullable=True)
    location = Column("venue_location", String(255), nullable=True)
    contact = Column("venue_contact", String(50), nullable=True)
    details = Column("venue_details", Text, nullable=True)
    status = Column(
        "venue_status", String(50), nullable=False, server_default=text("'available'")
    )
    type = Column(
        "venue_type", String(50), nullable=False, server_default=text("'internal'")
    )
    profile_picture = Column("venue_profile_picture", String(512), nullable=True)
    cover_photo = Column("venue_cover_photo", String(512), nullable=True)

    # Relationships
    prices = relationship(
        "VenuePrice",
        back_populates="venue",
        cascade="all, delete-orphan",
        order_by="VenuePrice.id",
    )
