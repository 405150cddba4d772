# vendor_api/core/config.py

from typing import List, Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Environment variables win over the optional .env file.
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # The environment mode: 'local' or 'prod'
    ENV: str = "local"

    PROJECT_NAME: str = "Vendor Marketplace API"
    API_V1_STR: str = "/api/v1"
    LOG_LEVEL: str = "INFO"

    # --- Database ---
    DATABASE_URL_LOCAL: str = "sqlite:///./vendor.db"
    DATABASE_URL_PROD: Optional[str] = None

    # --- Blob storage ---
    BLOB_BACKEND: Literal["local", "s3"] = "local"
    UPLOAD_DIR: str = "uploads"
    UPLOAD_URL_PREFIX: str = "uploads"

    AWS_ACCESS_KEY_ID: Optional[str] = None
    AWS_SECRET_ACCESS_KEY: Optional[str] = None
    AWS_S3_BUCKET_NAME: Optional[str] = None
    AWS_S3_REGION: Optional[str] = None
    AWS_S3_ENDPOINT_URL: Optional[str] = None

    # --- Default avatar ---
    DEFAULT_PROFILE_PICTURE: str = "uploads/user_profile/default_pfp.png"
    DEFAULT_PROFILE_PICTURE_SOURCE: Optional[str] = None

    # --- HTTP ---
    CORS_ORIGINS: List[str] = ["*"]
    # Answer every error with HTTP 200 and the error embedded in the body,
    # the way the legacy PHP endpoint did.
    ERRORS_AS_HTTP_200: bool = False

    @property
    def DATABASE_URL(self) -> str:
        if self.ENV == "local" or not self.DATABASE_URL_PROD:
            return self.DATABASE_URL_LOCAL
        return self.DATABASE_URL_PROD


# Create a single instance of the settings
settings = Settings()
