"""Application settings and configuration."""

from functools import lru_cache
from typing import ClassVar, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    debug: bool = Field(default=False, description="Debug mode (echoes SQL)")
    testing: bool = Field(default=False, description="Testing mode")

    # PostgreSQL Database
    postgres_user: str = Field(default="admin", description="PostgreSQL user")
    postgres_password: str = Field(
        default="supersecretpassword", description="PostgreSQL password"
    )
    postgres_host: str = Field(default="localhost", description="PostgreSQL host")
    postgres_port: int = Field(default=5432, description="PostgreSQL port")
    postgres_db: str = Field(default="entities", description="PostgreSQL database name")
    test_postgres_db: str = Field(
        default="entities_test", description="PostgreSQL test database name"
    )
    database_dsn: str | None = Field(
        default=None,
        description="Full SQLAlchemy database URL, overrides the postgres_* fields",
    )

    # Identifiers
    identifier_strategy: Literal["uuid4", "uuid1"] = Field(
        default="uuid4", description="UUID generation strategy for new entities"
    )
    auto_assign_identifiers: bool = Field(
        default=True,
        description="Assign a fresh identifier to entities inserted without one",
    )

    # Database URL (computed property)
    @property
    def database_url(self) -> str:
        """Construct database URL from individual components."""
        if self.database_dsn:
            return self.database_dsn

        db_name = self.test_postgres_db if self.testing else self.postgres_db
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{db_name}"
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
