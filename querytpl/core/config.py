"""
Settings for querytpl, read from the environment (and an optional ``.env``).
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Return resolved queries without escaping (no database needed).
    QUERY_TEST_MODE: bool = False

    # MySQL connection used only for its string escaping
    MYSQL_HOST: str | None = None
    MYSQL_PORT: int = 3306
    MYSQL_USER: str | None = None
    MYSQL_PASSWORD: str = ""
    MYSQL_DATABASE: str | None = None
    EXTERNAL_DB_CONNECT_TIMEOUT: int = 10


settings = Settings()  # type: ignore
