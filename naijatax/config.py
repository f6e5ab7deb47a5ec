import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel


_ENV_PATH = os.path.join(os.path.dirname(__file__), "..", ".env")
load_dotenv(dotenv_path=_ENV_PATH, override=False)


def _get_env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _get_bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_float(name: str, default: float) -> float:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    return float(v.replace(",", "").replace("_", ""))


class Settings(BaseModel):
    APP_ENV: str
    DEBUG: bool
    LOG_LEVEL: str
    TAX_YEAR: int
    # Turnover the ALLOW_003 entertainment cap is measured against
    ENTERTAINMENT_REFERENCE_TURNOVER: float
    CORS_ORIGINS: str

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        APP_ENV=_get_env("APP_ENV", "development"),
        DEBUG=_get_bool("DEBUG", True),
        LOG_LEVEL=_get_env("LOG_LEVEL", "INFO").upper(),
        TAX_YEAR=int(_get_env("TAX_YEAR", "2026")),
        ENTERTAINMENT_REFERENCE_TURNOVER=_get_float("ENTERTAINMENT_REFERENCE_TURNOVER", 40_000_000.0),
        CORS_ORIGINS=_get_env("CORS_ORIGINS", "*"),
    )


settings = get_settings()
