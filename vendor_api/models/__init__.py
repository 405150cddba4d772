# vendor_api/models/__init__.py
# Import all models to ensure SQLAlchemy can resolve relationships

from vendor_api.db.base_class import Base
from vendor_api.models.user import User
from vendor_api.models.store_category import StoreCategory
from vendor_api.models.store import Store
from vendor_api.models.store_price import StorePrice
from vendor_api.models.venue import Venue
from vendor_api.models.venue_price import VenuePrice
