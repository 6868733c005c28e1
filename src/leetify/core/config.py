from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from leetify.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_S


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LEETIFY_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    api_key: str | None = Field(default=None, repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = Field(default=DEFAULT_TIMEOUT_S, gt=0)

    def require_api_key(self) -> str:
        if not self.api_key:
            raise RuntimeError("LEETIFY_API_KEY is not set. Set it in the environment or .env file.")
        return self.api_key


settings = Settings()
