"""레시피 라이브러리 API"""
from typing import Optional

from fastapi import APIRouter, Depends

from ahaan_thai.api.dependencies import get_library_service
from ahaan_thai.api.errors import http_error
from ahaan_thai.core.exceptions import AhaanThaiException
from ahaan_thai.schemas.library_schema import (
    CookbookListResponse,
    CookbookRecipesResponse,
    LibraryStatistics,
    RecipeSearchResponse,
    RegionRecipesResponse,
)
from ahaan_thai.services import LibraryService

router = APIRouter(prefix="/api/library", tags=["library"])


@router.get("/cookbooks", response_model=CookbookListResponse)
async def list_cookbooks(service: LibraryService = Depends(get_library_service)):
    try:
        cookbooks = await service.list_cookbooks()
    except AhaanThaiException as e:
        raise http_error(e)
    return CookbookListResponse(count=len(cookbooks), cookbooks=cookbooks)


@router.get("/cookbook/{cookbook}", response_model=CookbookRecipesResponse)
async def get_cookbook_recipes(cookbook: str, service: LibraryService = Depends(get_library_service)):
    try:
        recipes = await service.get_cookbook_recipes(cookbook)
    except AhaanThaiException as e:
        raise http_error(e)
    return CookbookRecipesResponse(cookbook=cookbook, count=len(recipes), recipes=recipes)


@router.get("/cookbook/{cookbook}/recipe/{recipe_key}")
async def get_recipe(
    cookbook: str,
    recipe_key: str,
    service: LibraryService = Depends(get_library_service),
):
    try:
        return await service.get_recipe(cookbook, recipe_key)
    except AhaanThaiException as e:
        raise http_error(e)


@router.get("/search", response_model=RecipeSearchResponse)
async def search_recipes(
    query: Optional[str] = None,
    region: Optional[str] = None,
    cookbook: Optional[str] = None,
    service: LibraryService = Depends(get_library_service),
):
    try:
        return await service.search_recipes(query=query, region=region, cookbook=cookbook)
    except AhaanThaiException as e:
        raise http_error(e)


@router.get("/region/{region}", response_model=RegionRecipesResponse)
async def get_recipes_by_region(region: str, service: LibraryService = Depends(get_library_service)):
    try:
        return await service.get_recipes_by_region(region)
    except AhaanThaiException as e:
        raise http_error(e)


@router.get("/stats", response_model=LibraryStatistics)
async def get_statistics(service: LibraryService = Depends(get_library_service)):
    try:
        return await service.get_statistics()
    except AhaanThaiException as e:
        raise http_error(e)
