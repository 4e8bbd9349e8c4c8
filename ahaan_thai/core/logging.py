"""로깅 설정

MCP stdio 전송은 stdout을 프로토콜 채널로 사용하므로 로그는 항상 stderr로 보냅니다.
"""
import logging
import sys

from ahaan_thai.core.config import settings

LOGGER_NAME = "ahaan_thai"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_FORMATS = {
    "production": "%(asctime)s [%(levelname)s] %(message)s",
    "default": "%(asctime)s [%(levelname)s] %(name)s %(funcName)s:%(lineno)d | %(message)s",
}


def _resolve_level(environment: str, level_name: str) -> int:
    level = getattr(logging, level_name.upper(), logging.INFO)
    # production에서는 DEBUG 로그를 남기지 않음
    if environment == "production" and level < logging.INFO:
        return logging.INFO
    return level


def setup_logging() -> logging.Logger:
    """패키지 로거 초기화 (핸들러는 한 번만 붙임)"""
    environment = settings.environment.lower()
    level = _resolve_level(environment, settings.log_level)

    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(level)

    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(
            logging.Formatter(fmt=_FORMATS.get(environment, _FORMATS["default"]), datefmt=DATE_FORMAT)
        )
        log.addHandler(handler)

    return log


logger = setup_logging()


def sanitize_for_log(value: str, max_length: int = 100) -> str:
    """사용자 입력의 개행을 공백으로 바꾸고 길이를 제한"""
    if not value:
        return "[empty]"
    flat = value.replace("\r", " ").replace("\n", " ")
    if len(flat) > max_length:
        return flat[:max_length] + "..."
    return flat
