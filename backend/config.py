import logging
import os

from dotenv import load_dotenv

load_dotenv()


def _split_origins(raw: str) -> list[str]:
    origins = [origin.strip() for origin in (raw or "").split(",")]
    return [origin for origin in origins if origin] or ["*"]


def _log_level(raw: str) -> int:
    level = logging.getLevelName((raw or "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


LOG_LEVEL = _log_level(os.getenv("LOG_LEVEL", "INFO"))
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(50 * 1024 * 1024)))
ROW_PREVIEW_LIMIT = int(os.getenv("ROW_PREVIEW_LIMIT", "20"))
CORS_ALLOW_ORIGINS = _split_origins(os.getenv("CORS_ALLOW_ORIGINS", "*"))
