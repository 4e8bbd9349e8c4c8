"""레시피 라이브러리 조회 서비스"""
from typing import Any, Optional

from ahaan_thai.core.exceptions import CookbookNotFoundException, RecipeNotFoundException
from ahaan_thai.core.logging import logger, sanitize_for_log
from ahaan_thai.schemas.library_schema import LibraryDataset, Recipe
from ahaan_thai.services.impl.dataset_service import DatasetService
from ahaan_thai.utils.text import count_by, to_display_name


def _with_location(recipe: Recipe, cookbook: str, recipe_key: str) -> dict[str, Any]:
    return {**recipe.to_dict(), "cookbook": cookbook, "recipe_key": recipe_key}


def _search_text(recipe: Recipe) -> str:
    parts = (recipe.title_de, recipe.title_en, recipe.transcript_de, recipe.thai)
    return " ".join(part or "" for part in parts).lower()


def _same_region(recipe: Recipe, region_lower: str) -> bool:
    return recipe.region is not None and recipe.region.lower() == region_lower


class LibraryService:
    """요리책 → 레시피 키 → 레시피 구조의 라이브러리 조회"""

    def __init__(self, dataset: DatasetService[LibraryDataset]):
        self.dataset = dataset

    async def list_cookbooks(self) -> list[dict[str, Any]]:
        data = await self.dataset.fetch_dataset()
        return [
            {
                "name": name,
                "recipe_count": len(recipes),
                "display_name": to_display_name(name),
            }
            for name, recipes in data.items()
        ]

    async def get_cookbook_recipes(self, cookbook: str) -> dict[str, dict[str, Any]]:
        data = await self.dataset.fetch_dataset()
        recipes = data.get(cookbook)
        if recipes is None:
            raise CookbookNotFoundException(cookbook, list(data.keys()))
        return {key: recipe.to_dict() for key, recipe in recipes.items()}

    async def search_recipes(
        self,
        query: Optional[str] = None,
        region: Optional[str] = None,
        cookbook: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        레시피 검색 (조건 AND, 없는 조건은 무시)

        - cookbook: 요리책 이름 완전 일치
        - region: 지역 완전 일치, 대소문자 무시
        - query: 독일어/영어 제목, 독일어 전사, 태국어 이름에서 부분 일치

        Returns:
            {"total_results": int, "recipes": [...]} (각 레시피에 cookbook, recipe_key 포함)
        """
        data = await self.dataset.fetch_dataset()
        query_lower = query.lower() if query else None
        region_lower = region.lower() if region else None

        results: list[dict[str, Any]] = []
        for cookbook_name, recipes in data.items():
            if cookbook and cookbook_name != cookbook:
                continue
            for recipe_key, recipe in recipes.items():
                if region_lower and not _same_region(recipe, region_lower):
                    continue
                if query_lower and query_lower not in _search_text(recipe):
                    continue
                results.append(_with_location(recipe, cookbook_name, recipe_key))

        logger.info(
            f"[LIBRARY] search query='{sanitize_for_log(query or '')}' "
            f"region={region or '*'} cookbook={cookbook or '*'}: {len(results)} results"
        )
        return {"total_results": len(results), "recipes": results}

    async def get_recipe(self, cookbook: str, recipe_key: str) -> dict[str, Any]:
        data = await self.dataset.fetch_dataset()
        recipes = data.get(cookbook)
        if recipes is None:
            raise CookbookNotFoundException(cookbook)
        recipe = recipes.get(recipe_key)
        if recipe is None:
            raise RecipeNotFoundException(cookbook, recipe_key)
        return _with_location(recipe, cookbook, recipe_key)

    async def get_recipes_by_region(self, region: str) -> dict[str, Any]:
        found = await self.search_recipes(region=region)
        return {
            "region": region,
            "total_recipes": found["total_results"],
            "recipes": found["recipes"],
        }

    async def get_statistics(self) -> dict[str, Any]:
        """요리책별/지역별 레시피 수 (내림차순), 지역 목록 (처음 나온 순서)"""
        data = await self.dataset.fetch_dataset()

        per_cookbook = {name: len(recipes) for name, recipes in data.items()}
        region_values = [
            recipe.region for recipes in data.values() for recipe in recipes.values()
        ]

        return {
            "total_cookbooks": len(data),
            "total_recipes": sum(per_cookbook.values()),
            "recipes_by_cookbook": dict(
                sorted(per_cookbook.items(), key=lambda item: item[1], reverse=True)
            ),
            "recipes_by_region": count_by(region_values),
            "regions": list(dict.fromkeys(r for r in region_values if r)),
            "cookbooks": list(data.keys()),
        }
