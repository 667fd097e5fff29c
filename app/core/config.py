"""Application configuration via pydantic-settings.

Loads all settings from environment variables with sensible defaults.
A global `settings` singleton is available for import throughout the app.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Supabase
    SUPABASE_URL: str
    SUPABASE_KEY: str
    PROFILES_TABLE: str = "profiles_ig_directory"
    ADMIN_USERS_TABLE: str = "admin_users_ig_directory"

    # Profile lookup ("mock" | "apify")
    PROFILE_LOOKUP_PROVIDER: str = "mock"
    APIFY_TOKEN: str = ""
    APIFY_PROFILE_ACTOR_ID: str = "apify/instagram-profile-scraper"

    # Content filter (comma-separated, added to the built-in list)
    CONTENT_FILTER_EXTRA_WORDS: str = ""

    # Admin sessions
    SESSION_TTL_MINUTES: int = 480
    SESSION_PURGE_INTERVAL_MINUTES: int = 15
    SESSION_COOKIE_SECURE: bool = False

    # CORS
    ALLOWED_ORIGINS: str = "*"

    # Logging
    LOG_LEVEL: str = "INFO"


settings = Settings()  # type: ignore[call-arg]
