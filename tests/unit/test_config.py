"""설정 검증 테스트"""
import pytest
from pydantic import ValidationError

from ahaan_thai.core.config import Settings


class TestSettings:
    def test_defaults(self):
        cfg = Settings()
        assert cfg.dictionary_url == "https://www.ahaan-thai.de/api/thai-food-dictionary.json"
        assert cfg.encyclopedia_image_base_url == "https://bilder.koch-reis.de/media/"
        assert cfg.cache_ttl == 300

    def test_site_base_trailing_slash_removed(self):
        assert Settings(site_base_url="https://www.ahaan-thai.de/").site_base_url == "https://www.ahaan-thai.de"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"cache_ttl": 0},
            {"http_timeout_s": -1},
            {"suggestion_limit": -1},
            {"library_url": "/api/library.json"},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValidationError):
            Settings(**kwargs)

    def test_domain_config(self):
        cfg = Settings()
        books = cfg.domain_config("books")
        library = cfg.domain_config("library")

        assert books.affiliate_base_url == "https://amzn.to/"
        assert books.image_base_url is None
        assert library.image_base_url == "https://bilder.koch-reis.de/"
        assert library.dataset_url == cfg.library_url

    def test_unknown_domain(self):
        with pytest.raises(ValueError):
            Settings().domain_config("recipes")


class TestLogging:
    def test_debug_suppressed_in_production(self):
        import logging

        from ahaan_thai.core.logging import _resolve_level

        assert _resolve_level("production", "debug") == logging.INFO
        assert _resolve_level("development", "debug") == logging.DEBUG
        assert _resolve_level("production", "warning") == logging.WARNING

    def test_sanitize_for_log(self):
        from ahaan_thai.core.logging import sanitize_for_log

        assert sanitize_for_log("") == "[empty]"
        assert sanitize_for_log("a\nb") == "a b"
        assert sanitize_for_log("x" * 5, max_length=3) == "xxx..."
