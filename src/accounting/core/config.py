from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Accounting"
    app_env: str = "development"  # development, testing, production
    debug: bool = False

    # Security
    log_user_emails: bool = False  # Set to False in production for GDPR compliance

    # Database
    database_url: str
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Auth
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 12
    session_cookie_name: str = "token"
    argon2_time_cost: int = 3
    argon2_memory_cost: int = 65536
    argon2_parallelism: int = 1

    # Dashboard redirects
    forbidden_path: str = "/forbidden"
    products_list_path: str = "/dashboard/products"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Metrics
    metrics_enabled: bool = True

    @field_validator("jwt_secret_key")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        if v == "change-this-to-a-secure-random-string":
            raise ValueError(
                "JWT_SECRET_KEY must be changed from default value. "
                "Generate a secure secret with: openssl rand -hex 32"
            )
        if len(v) < 32:
            raise ValueError("JWT_SECRET_KEY must be at least 32 characters")
        return v

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """Validate CORS origins - reject wildcards when credentials are used."""
        for origin in v:
            if origin == "*":
                raise ValueError(
                    "CORS wildcard '*' is not allowed when allow_credentials=True. "
                    "Specify explicit origins instead."
                )
        return v

    @field_validator("forbidden_path", "products_list_path")
    @classmethod
    def validate_redirect_path(cls, v: str) -> str:
        """Redirect destinations must stay on this site."""
        if not v.startswith("/") or v.startswith("//"):
            raise ValueError("Redirect paths must be absolute paths on this site")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
