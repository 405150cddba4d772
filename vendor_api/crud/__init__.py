# vendor_api/crud/__init__.py

from .crud_store import store
from .crud_user import user
from .crud_venue import venue
