# app/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from pathlib import Path
from urllib.parse import quote_plus

class Settings(BaseSettings):
    app_name: str = Field(default="Vehicle Sightings API", alias="APP_NAME")
    app_env: str = Field(default="dev", alias="APP_ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    # MongoDB (MONGODB_URI wins over the individual parts)
    mongodb_uri:      str | None = Field(default=None, alias="MONGODB_URI")
    mongodb_user:     str = Field(default="admin", alias="MONGODB_USER")
    mongodb_password: str | None = Field(default=None, alias="MONGODB_PASSWORD")
    mongodb_host:     str = Field(default="vehicles.irxpojv.mongodb.net", alias="MONGODB_HOST")
    mongodb_app_name: str = Field(default="Vehicles", alias="MONGODB_APP_NAME")
    mongodb_database:   str = Field(default="main", alias="MONGODB_DATABASE")
    mongodb_collection: str = Field(default="Vehicles", alias="MONGODB_COLLECTION")

    # Image host
    catbox_api_url: str = Field(default="https://catbox.moe/user/api.php", alias="CATBOX_API_URL")
    upload_timeout: float = Field(default=60.0, alias="UPLOAD_TIMEOUT")

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).resolve().parents[1] / ".env"),  # app/.env
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def mongodb_connection_uri(self) -> str:
        if self.mongodb_uri:
            return self.mongodb_uri
        password = quote_plus(self.mongodb_password or "")
        return (
            f"mongodb+srv://{quote_plus(self.mongodb_user)}:{password}"
            f"@{self.mongodb_host}/?appName={self.mongodb_app_name}"
        )

settings = Settings()
