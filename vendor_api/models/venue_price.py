# vendor_api/models/venue_price.py
from sqlalchemy import Column, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship
from vendor_api.db.base_class import Base


class VenuePrice(Base):
    __tablename__ = "tbl_venue_price"

    id = Column("venue_price_id", Integer, primary_key=True, autoincrement=True)
    venue_id = Column(
        "venue_id",
        Integer,
        ForeignKey("tbl_venue.venue_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column("venue_price_title", String(255), nullable=True)
    min = Column("venue_price_min", Numeric(12, 2), nullable=False, default=0)
    max = Column("venue_price_max", Numeric(12, 2), nullable=False, default=0)
    capacity = Column("venue_capacity", Integer, nullable=False, default=0)
    description = Column("venue_price_description", Text, nullable=True)

    # Relationships
    venue = relationship("Venue", back_populates="prices")
