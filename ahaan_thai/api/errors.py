"""도메인 예외 → HTTPException 변환"""
from fastapi import HTTPException

from ahaan_thai.core.exceptions import (
    AhaanThaiException,
    FetchException,
    NotFoundException,
    ValidationException,
)
from ahaan_thai.core.logging import logger


def http_error(e: AhaanThaiException) -> HTTPException:
    """
    예외 종류별 상태 코드

    - NotFoundException: 404
    - ValidationException: 400
    - FetchException: 502 (원격 데이터셋 문제)
    - 그 외: 500

    detail은 {error, error_code, details} 형태입니다.
    """
    if isinstance(e, NotFoundException):
        status_code = 404
        logger.info(f"[API] Not found: {e.error_code}")
    elif isinstance(e, ValidationException):
        status_code = 400
        logger.warning(f"[API] Validation error: {e.error_code}")
    elif isinstance(e, FetchException):
        status_code = 502
        logger.error(f"[API] Upstream dataset error: {e}")
    else:
        status_code = 500
        logger.error(f"[API] Unexpected error: {e}")
    return HTTPException(status_code=status_code, detail=e.to_dict())
