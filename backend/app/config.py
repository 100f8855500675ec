from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )

    # Database
    database_url: str

    # Auth
    secret_key: str
    jwt_algorithm: str = "HS256"
    access_token_ttl_days: int = 7

    # Frontend (always allowed by CORS)
    frontend_url: str = "http://localhost:5173"
    allowed_origins: str = ""  # comma-separated extra origins

    # App
    debug: bool = False
    log_level: str = "INFO"

    def get_allowed_origins(self) -> list[str]:
        """Frontend origin plus any extra origins from ALLOWED_ORIGINS."""
        origins = [self.frontend_url]
        if self.allowed_origins:
            origins.extend(
                origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()
            )
        return origins


settings = Settings()
