"""Settings for the `uploadingfiles` application."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the project."""

    model_config = SettingsConfigDict(
        env_prefix="UPLOADINGFILES__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    DO_USE_FILE_LOGS: bool = False

    # Folder location for storing files. Relative to the current working directory unless absolute
    STORAGE_LOCATION: str = "upload-dir"

    # Flash messages live in a signed session cookie
    # TODO: [18.10.2026] Refuse to start with the default key when `DEBUG` is off.
    SESSION_SECRET_KEY: str = "change-me"
    SESSION_COOKIE_NAME: str = "uploadingfiles_session"

    # Used by `python -m uploadingfiles`
    HOST: str = "127.0.0.1"
    PORT: int = 8080


settings = Settings()
