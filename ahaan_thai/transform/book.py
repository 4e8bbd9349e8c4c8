"""요리책 정보 변환기 - Amazon 제휴 링크 생성"""
from typing import Any

from ahaan_thai.schemas.book_schema import BookDataset

from .base import DatasetTransformer


def process_book(book: dict[str, Any], affiliate_base_url: str) -> dict[str, Any]:
    """
    shop == "amazon"이고 target이 비어 있지 않으면 url = 제휴 prefix + target, target 제거.
    그 외에는 그대로 복사합니다.
    """
    processed = dict(book)
    target = book.get("target")
    if book.get("shop") == "amazon" and isinstance(target, str) and target.strip():
        processed["url"] = affiliate_base_url + target
        del processed["target"]
    return processed


class BookTransformer(DatasetTransformer[BookDataset]):
    expected_type = list
    dataset_type = BookDataset

    def process(self, raw: list[Any]) -> list[Any]:
        affiliate = self.config.affiliate_base_url or ""
        return [process_book(book, affiliate) if isinstance(book, dict) else book for book in raw]
