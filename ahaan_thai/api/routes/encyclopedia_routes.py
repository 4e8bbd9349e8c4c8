"""태국 음식 백과사전 API"""
from fastapi import APIRouter, Depends, Query

from ahaan_thai.api.dependencies import get_encyclopedia_service
from ahaan_thai.api.errors import http_error
from ahaan_thai.core.exceptions import AhaanThaiException
from ahaan_thai.schemas.encyclopedia_schema import (
    EncyclopediaEntriesResponse,
    EncyclopediaSearchResponse,
    RegionEntriesResponse,
    TagEntriesResponse,
)
from ahaan_thai.services import EncyclopediaService
from ahaan_thai.services.impl.encyclopedia_service import DEFAULT_LIST_LIMIT, DEFAULT_SEARCH_LIMIT

router = APIRouter(prefix="/api/encyclopedia", tags=["encyclopedia"])


@router.get("/search", response_model=EncyclopediaSearchResponse)
async def search_encyclopedia(
    q: str = Query(..., min_length=1),
    limit: int = Query(DEFAULT_SEARCH_LIMIT, ge=1),
    service: EncyclopediaService = Depends(get_encyclopedia_service),
):
    try:
        results = await service.search_entries(q, limit=limit)
    except AhaanThaiException as e:
        raise http_error(e)
    return EncyclopediaSearchResponse(query=q, count=len(results), results=results)


@router.get("/entries", response_model=EncyclopediaEntriesResponse)
async def get_all_entries(
    limit: int = Query(DEFAULT_LIST_LIMIT, ge=1),
    service: EncyclopediaService = Depends(get_encyclopedia_service),
):
    try:
        entries = await service.get_all_entries(limit=limit)
    except AhaanThaiException as e:
        raise http_error(e)
    return EncyclopediaEntriesResponse(count=len(entries), entries=entries)


@router.get("/region/{region}", response_model=RegionEntriesResponse)
async def get_entries_by_region(
    region: str,
    limit: int = Query(DEFAULT_SEARCH_LIMIT, ge=1),
    service: EncyclopediaService = Depends(get_encyclopedia_service),
):
    try:
        entries = await service.get_entries_by_region(region, limit=limit)
    except AhaanThaiException as e:
        raise http_error(e)
    return RegionEntriesResponse(region=region, count=len(entries), entries=entries)


@router.get("/tag/{tag}", response_model=TagEntriesResponse)
async def get_entries_by_tag(
    tag: str,
    limit: int = Query(DEFAULT_SEARCH_LIMIT, ge=1),
    service: EncyclopediaService = Depends(get_encyclopedia_service),
):
    try:
        entries = await service.get_entries_by_tag(tag, limit=limit)
    except AhaanThaiException as e:
        raise http_error(e)
    return TagEntriesResponse(tag=tag, count=len(entries), entries=entries)


@router.get("/regions")
async def list_regions(service: EncyclopediaService = Depends(get_encyclopedia_service)):
    """태국 4대 지역 (고정 테이블)"""
    return service.list_regions()


@router.get("/relationships")
async def list_relationships(service: EncyclopediaService = Depends(get_encyclopedia_service)):
    """관계 필드 의미 (고정 테이블)"""
    return service.list_relationships()
