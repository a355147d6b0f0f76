from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:3000"]
    frontend_url: str = "http://localhost:3000"  # For constructing shareable URLs

    # GitHub REST API
    github_api_url: str = "https://api.github.com"
    github_api_version: str = "2022-11-28"
    # GitHub caps per_page at 100; a shorter page marks the last one
    github_page_size: int = 100
    github_timeout_seconds: float = 30.0
    github_connect_timeout_seconds: float = 5.0
    github_max_connections: int = 20

    def share_url(self, share_id: str) -> str:
        """Build the public URL for a share token."""
        return f"{self.frontend_url.rstrip('/')}/share/{share_id}"


settings = Settings()
