"""Environment-driven settings for the API and the dashboard client."""

import logging
import os


def _csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    UPSTREAM_RATES_URL = os.environ.get("UPSTREAM_RATES_URL", "")
    RATES_CACHE_SECONDS = float(os.environ.get("RATES_CACHE_SECONDS", "60"))
    UPSTREAM_TIMEOUT_SECONDS = float(os.environ.get("UPSTREAM_TIMEOUT_SECONDS", "10"))

    CORS_ORIGINS = _csv(
        os.environ.get(
            "CORS_ORIGINS",
            "http://localhost:3000,http://localhost:5173,"
            "http://127.0.0.1:3000,http://127.0.0.1:5173",
        )
    )

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Dashboard client
    HYLO_API_URL = os.environ.get("HYLO_API_URL", "http://localhost:3000")
    REFRESH_INTERVAL_SECONDS = float(os.environ.get("REFRESH_INTERVAL_SECONDS", "900"))


class TestingConfig(Config):
    TESTING = True
    UPSTREAM_RATES_URL = ""
    RATES_CACHE_SECONDS = 60.0
    LOG_LEVEL = "DEBUG"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
