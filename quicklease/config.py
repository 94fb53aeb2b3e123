"""Configuration management using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    database_path: str = "./data/quicklease.db"
    api_v1_prefix: str = "/api/v1"
    cors_origins: list[str] = ["http://localhost:3000"]

    # JWT Configuration
    jwt_secret_key: str = "change-me-in-production-use-env-var"
    jwt_algorithm: str = "HS256"
    jwt_expiry_days: int = 30

    # Bcrypt work factor (higher = more secure but slower)
    # For tests, use 4 for faster execution
    bcrypt_work_factor: int = 12

    # Direct account creation stores the password as supplied unless enabled.
    # Registration always hashes.
    hash_password_on_create: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False
    )


settings = Settings()
