from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Beer Catalog API"
    app_env: str = "development"
    app_port: int = 8000
    frontend_url: str = "http://localhost:3000"

    # Database (SQLite for local dev, any SQLAlchemy async URL in deployment)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./beer_catalog.db",
        alias="DATABASE_URL",
    )
    create_tables_on_startup: bool = Field(
        default=True, alias="CREATE_TABLES_ON_STARTUP",
    )
    seed_sample_data: bool = Field(default=False, alias="SEED_SAMPLE_DATA")

    # Request path the beer endpoints are mounted under
    api_prefix: str = Field(default="/api/v1", alias="BEER_API_PREFIX")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

settings = Settings()
