from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    ward_name: str | None = None
    first_bed: int | None = None
    last_bed: int | None = None
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="HOSPITAL_WARD_",
        env_file=(
            Path("~/.hospital_ward/env").expanduser(),
            ".env",
        ),
        extra="ignore",
    )


SETTINGS = Settings()
