from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Cars Catalog API"
    app_env: str = "development"
    app_port: int = 8000

    # Database (PostgreSQL via asyncpg or SQLite for local dev)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./cars_dev.db",
        alias="DATABASE_URL",
    )

    # External vehicle-info lookup used when ingesting new registration numbers
    vehicle_info_url: str = Field(
        default="http://localhost:8081", alias="VEHICLE_INFO_URL",
    )
    vehicle_info_timeout: float = Field(default=10.0, alias="VEHICLE_INFO_TIMEOUT")

    # List endpoint window
    default_page_limit: int = Field(default=10, alias="DEFAULT_PAGE_LIMIT")
    min_page_limit: int = Field(default=5, alias="MIN_PAGE_LIMIT")
    max_page_limit: int = Field(default=100, alias="MAX_PAGE_LIMIT")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    def clamp_limit(self, limit: int) -> int:
        """Force a requested page size into the configured window."""
        return max(self.min_page_limit, min(limit, self.max_page_limit))

settings = Settings()
