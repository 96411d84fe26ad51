from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    env: str = Field(default="local")
    log_level: str = Field(default="INFO")

    # IANA zone name used for "now" when no instant is given; None means system local
    local_timezone: Optional[str] = Field(
        default=None,
        description="Zone of the default clock, e.g. 'Europe/Oslo'",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CALBOUNDS_",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


settings = Settings()
