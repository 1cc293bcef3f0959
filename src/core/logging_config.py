"""
Logging setup: dictConfig 기반 콘솔 로깅.

모든 모듈은 logging.getLogger(__name__) 을 사용하고,
핸들러/포맷은 애플리케이션 시작 시 여기서 한 번만 구성한다.
"""

import logging
import logging.config
from typing import Any

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def build_logging_config(level: str = "INFO") -> dict[str, Any]:
    """
    dictConfig 용 설정 생성.

    Args:
        level: 루트 로그 레벨 (DEBUG, INFO, WARNING, ...)

    Returns:
        logging.config.dictConfig 에 넘길 dict
    """
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": LOG_FORMAT,
                "datefmt": LOG_DATEFMT,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "level": level,
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "": {
                "handlers": ["console"],
                "level": level,
            },
            "uvicorn.error": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
            "uvicorn.access": {
                "handlers": ["console"],
                "level": "WARNING",  # 접근 로그 노이즈 감소
                "propagate": False,
            },
            "httpx": {
                "level": "WARNING",
            },
        },
    }


def setup_logging(level: str = "INFO") -> None:
    """로깅 시스템 구성."""
    logging.config.dictConfig(build_logging_config(level))
    logging.getLogger(__name__).info(f"Logging initialized (level={level.upper()})")
