# vendor_api/api/v1/api.py

from fastapi import APIRouter
from vendor_api.api.v1.endpoints import vendor

# This is the main router for the v1 API.
api_router = APIRouter()

api_router.include_router(vendor.router)
