"""설정 관리 - 환경 변수 로드 및 검증"""
from dataclasses import dataclass
from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import field_validator


DOMAINS = ("dictionary", "books", "library", "encyclopedia")


@dataclass(frozen=True)
class DomainConfig:
    """도메인별 URL 설정 (Fetcher/Transformer 생성 시 주입)"""

    name: str
    dataset_url: str
    site_base_url: str
    image_base_url: Optional[str] = None
    affiliate_base_url: Optional[str] = None


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 원격 데이터셋 (단일 호스트, 경로만 다름)
    dictionary_url: str = "https://www.ahaan-thai.de/api/thai-food-dictionary.json"
    book_info_url: str = "https://www.ahaan-thai.de/api/thai-cook-book-info.json"
    library_url: str = "https://www.ahaan-thai.de/api/thai-cook-book-library.json"
    encyclopedia_url: str = "https://www.ahaan-thai.de/api/thai-food-encyclopedia.json"

    # URL 변환 prefix
    site_base_url: str = "https://www.ahaan-thai.de"
    recipe_image_base_url: str = "https://bilder.koch-reis.de/"
    encyclopedia_image_base_url: str = "https://bilder.koch-reis.de/media/"
    amazon_affiliate_base_url: str = "https://amzn.to/"

    # 캐시
    cache_ttl: int = 300  # 5분

    # HTTP
    # curl_cffi 기본 타임아웃과 동일 (재시도 없음)
    http_timeout_s: float = 30.0
    http_user_agent: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
    http_impersonate: str = "chrome110"

    # 앱 시작 시 4개 데이터셋을 미리 가져올지 여부
    # 기본값은 False: 첫 요청에서 lazy-fetch
    dataset_warmup: bool = False

    # translate miss 시 제안할 유사 단어 수
    suggestion_limit: int = 5

    # API
    api_title: str = "Ahaan Thai API"
    api_version: str = "1.0.0"
    api_description: str = "Thai food dictionary, cookbooks, recipe library and encyclopedia."
    host: str = "0.0.0.0"
    port: int = 3000

    # 로깅
    log_level: str = "INFO"
    environment: str = "development"

    @field_validator("cache_ttl")
    @classmethod
    def validate_cache_ttl(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("cache_ttl must be positive")
        return v

    @field_validator("http_timeout_s")
    @classmethod
    def validate_http_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("http_timeout_s must be positive")
        return v

    @field_validator("suggestion_limit")
    @classmethod
    def validate_suggestion_limit(cls, v: int) -> int:
        if v < 0:
            raise ValueError("suggestion_limit must be >= 0")
        return v

    @field_validator(
        "dictionary_url",
        "book_info_url",
        "library_url",
        "encyclopedia_url",
        "site_base_url",
    )
    @classmethod
    def validate_required_urls(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("dataset and site URLs must be absolute http(s) URLs")
        return v

    @field_validator("site_base_url")
    @classmethod
    def strip_site_base_slash(cls, v: str) -> str:
        # 상대 경로는 항상 "/"로 시작하므로 base 쪽 슬래시는 제거
        return v.rstrip("/")

    def domain_config(self, name: str) -> DomainConfig:
        """도메인 이름으로 DomainConfig 생성"""
        if name == "dictionary":
            return DomainConfig(name, self.dictionary_url, self.site_base_url)
        if name == "books":
            return DomainConfig(
                name,
                self.book_info_url,
                self.site_base_url,
                affiliate_base_url=self.amazon_affiliate_base_url,
            )
        if name == "library":
            return DomainConfig(
                name,
                self.library_url,
                self.site_base_url,
                image_base_url=self.recipe_image_base_url,
            )
        if name == "encyclopedia":
            return DomainConfig(
                name,
                self.encyclopedia_url,
                self.site_base_url,
                image_base_url=self.encyclopedia_image_base_url,
            )
        raise ValueError(f"Unknown domain: {name} (expected one of {', '.join(DOMAINS)})")

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
