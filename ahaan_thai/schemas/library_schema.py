"""레시피 라이브러리 스키마"""
from typing import Any, Optional

from pydantic import BaseModel, Field

from .base import Record


class Recipe(Record):
    title_de: Optional[str] = None
    title_en: Optional[str] = None
    transcript_de: Optional[str] = None
    thai: Optional[str] = None
    region: Optional[str] = None
    url_de: Optional[str] = None
    url_en: Optional[str] = None
    image_url: Optional[str] = Field(None, alias="imageUrl")


# cookbook -> recipe key -> recipe
LibraryDataset = dict[str, dict[str, Recipe]]


class CookbookSummary(BaseModel):
    name: str
    recipe_count: int
    display_name: str


class CookbookListResponse(BaseModel):
    count: int
    cookbooks: list[CookbookSummary]


class CookbookRecipesResponse(BaseModel):
    cookbook: str
    count: int
    recipes: dict[str, dict[str, Any]]


class RecipeSearchResponse(BaseModel):
    total_results: int
    recipes: list[dict[str, Any]]


class RegionRecipesResponse(BaseModel):
    region: str
    total_recipes: int
    recipes: list[dict[str, Any]]


class LibraryStatistics(BaseModel):
    total_cookbooks: int
    total_recipes: int
    recipes_by_cookbook: dict[str, int]
    recipes_by_region: dict[str, int]
    regions: list[str]
    cookbooks: list[str]
