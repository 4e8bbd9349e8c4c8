"""레시피 라이브러리 변환기 - 레시피/이미지 URL 절대화"""
from typing import Any

from ahaan_thai.schemas.library_schema import LibraryDataset
from ahaan_thai.utils.url import join_image_url, join_site_url

from .base import DatasetTransformer

RECIPE_URL_FIELDS = ("url_de", "url_en")


def process_recipe(recipe: dict[str, Any], site_base_url: str, image_base_url: str) -> dict[str, Any]:
    processed = dict(recipe)
    for field in RECIPE_URL_FIELDS:
        value = processed.get(field)
        if isinstance(value, str) and value:
            processed[field] = join_site_url(site_base_url, value)

    image = processed.get("imageUrl")
    if isinstance(image, str) and image:
        processed["imageUrl"] = join_image_url(image_base_url, image)
    return processed


class LibraryTransformer(DatasetTransformer[LibraryDataset]):
    expected_type = dict
    dataset_type = LibraryDataset

    def process(self, raw: dict[str, Any]) -> dict[str, Any]:
        return {name: self._process_cookbook(cookbook) for name, cookbook in raw.items()}

    def _process_cookbook(self, cookbook: Any) -> Any:
        site = self.config.site_base_url
        image = self.config.image_base_url or ""
        # 배열로 온 요리책은 인덱스를 레시피 키로 사용
        if isinstance(cookbook, list):
            cookbook = {str(i): recipe for i, recipe in enumerate(cookbook)}
        if isinstance(cookbook, dict):
            return {
                key: process_recipe(recipe, site, image) if isinstance(recipe, dict) else recipe
                for key, recipe in cookbook.items()
            }
        return cookbook
