"""라우터 공용 의존성 - 서비스 싱글톤"""
from typing import Optional

from fastapi import Depends

from ahaan_thai.services import (
    BookService,
    DictionaryService,
    EncyclopediaService,
    LibraryService,
    ServiceRegistry,
    create_services,
)

# 싱글톤 서비스 (도메인별 캐시를 요청 간 공유)
_services: Optional[ServiceRegistry] = None


def get_services() -> ServiceRegistry:
    """ServiceRegistry 싱글톤"""
    global _services
    if _services is None:
        _services = create_services()
    return _services


def get_dictionary_service(services: ServiceRegistry = Depends(get_services)) -> DictionaryService:
    return services.dictionary


def get_book_service(services: ServiceRegistry = Depends(get_services)) -> BookService:
    return services.books


def get_library_service(services: ServiceRegistry = Depends(get_services)) -> LibraryService:
    return services.library


def get_encyclopedia_service(services: ServiceRegistry = Depends(get_services)) -> EncyclopediaService:
    return services.encyclopedia
