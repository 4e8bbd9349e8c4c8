"""서비스 조립 - 도메인별 Cache/Fetcher/Transformer를 묶어 Query 서비스 생성

HTTP 앱과 MCP 서버가 같은 방식으로 서비스를 만듭니다.
"""
from dataclasses import dataclass
from typing import Optional

from ahaan_thai.clients import JsonFetcher, SharedHttpClient
from ahaan_thai.core.config import Settings, settings as default_settings
from ahaan_thai.services.impl import (
    BookService,
    DatasetService,
    DictionaryService,
    EncyclopediaService,
    LibraryService,
    TTLCache,
)
from ahaan_thai.transform import (
    BookTransformer,
    DictionaryTransformer,
    EncyclopediaTransformer,
    LibraryTransformer,
)


@dataclass
class ServiceRegistry:
    dictionary: DictionaryService
    books: BookService
    library: LibraryService
    encyclopedia: EncyclopediaService

    def datasets(self) -> list[DatasetService]:
        return [
            self.dictionary.dataset,
            self.books.dataset,
            self.library.dataset,
            self.encyclopedia.dataset,
        ]


def _dataset(name: str, transformer_cls, cfg: Settings, fetcher: JsonFetcher) -> DatasetService:
    domain = cfg.domain_config(name)
    return DatasetService(
        domain,
        fetcher,
        transformer_cls(domain),
        cache=TTLCache(ttl=cfg.cache_ttl),
    )


def create_services(
    cfg: Optional[Settings] = None,
    http_client: Optional[SharedHttpClient] = None,
    fetcher: Optional[JsonFetcher] = None,
) -> ServiceRegistry:
    """
    4개 도메인 서비스 생성 (도메인마다 독립된 캐시)

    Args:
        cfg: 설정 (기본: 전역 settings)
        http_client: 공유 HTTP 클라이언트 (기본: 프로세스 싱글톤)
        fetcher: 테스트용 Fetcher 주입
    """
    cfg = cfg or default_settings
    fetcher = fetcher or JsonFetcher(http_client, timeout_s=cfg.http_timeout_s)

    return ServiceRegistry(
        dictionary=DictionaryService(_dataset("dictionary", DictionaryTransformer, cfg, fetcher)),
        books=BookService(_dataset("books", BookTransformer, cfg, fetcher)),
        library=LibraryService(_dataset("library", LibraryTransformer, cfg, fetcher)),
        encyclopedia=EncyclopediaService(_dataset("encyclopedia", EncyclopediaTransformer, cfg, fetcher)),
    )
