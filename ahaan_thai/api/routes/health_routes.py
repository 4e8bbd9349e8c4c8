"""헬스 체크 엔드포인트"""
from datetime import datetime

from fastapi import APIRouter, Depends

from ahaan_thai import __version__
from ahaan_thai.api.dependencies import get_services
from ahaan_thai.core.config import settings
from ahaan_thai.schemas.base import HealthResponse
from ahaan_thai.services import ServiceRegistry

router = APIRouter(tags=["health"])

ENDPOINTS = {
    "dictionary": "/api/dictionary",
    "books": "/api/books",
    "library": "/api/library",
    "encyclopedia": "/api/encyclopedia",
    "health": "/health",
    "docs": "/docs",
}


@router.get("/health", response_model=HealthResponse)
async def health_check(services: ServiceRegistry = Depends(get_services)):
    """
    헬스 체크 엔드포인트

    데이터셋은 fetch하지 않고 도메인별 캐시 유효 여부만 보고합니다.
    """
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(),
        version=__version__,
        datasets={ds.name: ds.is_cached() for ds in services.datasets()},
    )


@router.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "name": settings.api_title,
        "description": settings.api_description,
        "version": __version__,
        "endpoints": ENDPOINTS,
    }
