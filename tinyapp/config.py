from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """

    # Environment
    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"

    # Application
    app_name: str = "TinyApp"
    app_version: str = "1.0.0"
    secret_key: str = "your-secret-key-here-change-in-production"

    # Server
    host: str = "127.0.0.1"
    port: int = 8080

    # URL Shortener specific
    base_url: str = "http://127.0.0.1:8080"
    short_code_length: int = 6
    user_id_length: int = 6
    visitor_id_length: int = 10
    max_retries: int = 5

    # Sessions (signed cookie, no server-side store)
    session_cookie: str = "tinyapp_session"
    session_max_age: int = 24 * 60 * 60  # 24 hours
    session_https_only: bool = False
    login_path: str = "/login"

    # Password hashing
    bcrypt_rounds: int = 12

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
