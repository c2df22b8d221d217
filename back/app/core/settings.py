from ipaddress import ip_address

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_IP = "127.0.0.1"
DEFAULT_PORT = 3000
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "TRACE")


class Settings(BaseSettings):
    OPERATOR_TOKEN: str
    IP: str = DEFAULT_IP
    PORT: int = DEFAULT_PORT
    PING_CAPACITY: int = 8
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("IP", mode="before")
    @classmethod
    def _fallback_ip(cls, value):
        # невалидный адрес -> адрес по умолчанию, процесс при этом стартует
        try:
            return str(ip_address(str(value).strip()))
        except ValueError:
            return DEFAULT_IP

    @field_validator("PORT", mode="before")
    @classmethod
    def _fallback_port(cls, value):
        try:
            port = int(str(value).strip())
        except ValueError:
            return DEFAULT_PORT
        if not 0 <= port <= 65535:
            return DEFAULT_PORT
        return port

    @field_validator("PING_CAPACITY")
    @classmethod
    def _positive_capacity(cls, value: int) -> int:
        if value < 1:
            raise ValueError("PING_CAPACITY must be at least 1")
        return value

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _known_log_level(cls, value) -> str:
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return level
