# vendor_api/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vendor_api.api.deps import get_blob_store
from vendor_api.api.v1.api import api_router
from vendor_api.core.config import settings
from vendor_api.core.errors import register_exception_handlers
from vendor_api.services.provisioning import provision_storage

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Vendor API starting up...")
    # Dependency overrides (tests) replace the blob store used at startup too.
    blob_store_factory = app.dependency_overrides.get(get_blob_store, get_blob_store)
    provision_storage(
        blob_store_factory(),
        settings.DEFAULT_PROFILE_PICTURE,
        settings.DEFAULT_PROFILE_PICTURE_SOURCE,
    )
    yield
    logger.info("Vendor API shutting down...")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    description="""
        Profiles, vendor stores and venues for the event-planning marketplace.

        Every operation is served by `GET|POST /api/v1/vendor`, selected by
        the `operation` parameter.
        """,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
)

register_exception_handlers(app)

app.include_router(api_router, prefix=settings.API_V1_STR)


@app.get("/")
def read_root():
    return {"status": "Vendor API is running"}


# If running directly (for development)
if __name__ == "__main__":
    import uvicorn

    uvicorn.run("vendor_api.main:app", host="0.0.0.0", port=8000, reload=True)
