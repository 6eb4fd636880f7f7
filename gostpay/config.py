# gostpay/config.py
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gostpay.parser import ParserPolicy


class Settings(BaseSettings):
    APP_NAME: str = "GOST payment codec"
    DEBUG: bool = False

    # Codec
    FORMAT_VERSION: str = "0001"
    PARSER_POLICY: ParserPolicy = ParserPolicy.STRICT
    DEFAULT_SEPARATOR: str = "|"

    # HTTP
    ALLOWED_ORIGINS: str = "http://localhost:3000"

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @field_validator("FORMAT_VERSION")
    @classmethod
    def _check_version(cls, v: str) -> str:
        if len(v) != 4 or not v.isascii():
            raise ValueError("FORMAT_VERSION must be 4 ASCII characters")
        return v

    @field_validator("DEFAULT_SEPARATOR")
    @classmethod
    def _check_separator(cls, v: str) -> str:
        if len(v) != 1 or not v.isascii() or v == "=":
            raise ValueError("DEFAULT_SEPARATOR must be a single ASCII character other than '='")
        return v

    @property
    def allowed_origins(self) -> List[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]


settings = Settings()
