# styleshop/config.py
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="STYLESHOP_", env_file=".env", extra="ignore")

    PROJECT_NAME: str = "StyleShop API"
    API_VERSION: str = "1.0.0"
    SERVICE_NAME: str = "styleshop"

    HOST: str = "0.0.0.0"
    # plain PORT, like most PaaS hosts set it
    PORT: int = Field(5000, validation_alias="PORT")
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # Client bundle and user uploads served next to the API
    STATIC_DIR: str = "public"
    UPLOADS_DIR: str = "uploads"


settings = Settings()
