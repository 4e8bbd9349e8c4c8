"""백과사전 변환기 - 레시피/관계 링크 및 이미지 URL 변환"""
from typing import Any, Union

from ahaan_thai.schemas.encyclopedia_schema import EncyclopediaDataset
from ahaan_thai.utils.url import ensure_trailing_slash, join_image_url, transform_link

from .base import DatasetTransformer

# 레시피 링크: 끝 슬래시 강제하지 않음
RECIPE_FIELDS = ("recipes",)
# 관계 링크: 끝 슬래시 강제
RELATIONSHIP_FIELDS = ("url", "usedBy", "uses", "fits", "fittedBy", "variations", "variationOf")
LOCALES = ("de", "en")

LinkValue = Union[str, list]


def transform_links(value: LinkValue, site_base_url: str, trailing_slash: bool) -> LinkValue:
    def _one(link: Any) -> Any:
        if not isinstance(link, str):
            return link
        url = transform_link(link, site_base_url)
        return ensure_trailing_slash(url) if trailing_slash else url

    if isinstance(value, list):
        return [_one(link) for link in value]
    return _one(value)


def process_locale(locale: dict[str, Any], site_base_url: str) -> dict[str, Any]:
    processed = dict(locale)
    for field in RECIPE_FIELDS:
        if processed.get(field):
            processed[field] = transform_links(processed[field], site_base_url, trailing_slash=False)
    for field in RELATIONSHIP_FIELDS:
        if processed.get(field):
            processed[field] = transform_links(processed[field], site_base_url, trailing_slash=True)
    return processed


def process_entry(entry: dict[str, Any], site_base_url: str, image_base_url: str) -> dict[str, Any]:
    processed = dict(entry)
    for lang in LOCALES:
        if isinstance(processed.get(lang), dict):
            processed[lang] = process_locale(processed[lang], site_base_url)

    image = processed.get("imageUrl")
    if isinstance(image, str) and image:
        processed["imageUrl"] = join_image_url(image_base_url, image)
    return processed


class EncyclopediaTransformer(DatasetTransformer[EncyclopediaDataset]):
    expected_type = list
    dataset_type = EncyclopediaDataset

    def process(self, raw: list[Any]) -> list[Any]:
        site = self.config.site_base_url
        image = self.config.image_base_url or ""
        return [process_entry(entry, site, image) if isinstance(entry, dict) else entry for entry in raw]
