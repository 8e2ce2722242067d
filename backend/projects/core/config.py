from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    ENV: str = Field(default="dev")  # dev|prod

    # DB
    DATABASE_URL: str = Field(default="sqlite:///./projects.db")
    DB_ECHO: bool = Field(default=False)
    DB_POOL_PRE_PING: bool = Field(default=True)


settings = Settings()
