import os
from dotenv import load_dotenv

load_dotenv()

VERSION = "2015.10.8"
USER_AGENT = "VGT Deep Pings/3.0"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


class Settings:
    DEBUG: bool = _env_flag("DEBUG")
    LOG_LEVEL: str = os.getenv("DEEP_PING_LOG_LEVEL", "info")
    HOST: str | None = os.getenv("DEEP_PING_HOST")
    PORT: int = int(os.getenv("DEEP_PING_PORT", 80))
    PROTOCOL: str = os.getenv("DEEP_PING_PROTOCOL", "http")
    PATH: str = os.getenv("DEEP_PING_PATH", "")
    WARNING_SECONDS: float = float(os.getenv("DEEP_PING_WARNING", "10.0"))
    CRITICAL_SECONDS: float = float(os.getenv("DEEP_PING_CRITICAL", "15.0"))
    TIMEOUT_SECONDS: float = float(os.getenv("DEEP_PING_TIMEOUT", "30.0"))
    CHECKSTR: str = os.getenv("DEEP_PING_CHECKSTR", "Ok")


settings = Settings()
