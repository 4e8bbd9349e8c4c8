"""URL 정규화 유틸리티 테스트"""
from urllib.parse import parse_qs, urlparse

import pytest

from ahaan_thai.utils.url import (
    build_translate_url,
    ensure_trailing_slash,
    join_image_url,
    join_site_url,
    strip_translation_marker,
    transform_link,
)

SITE = "https://www.ahaan-thai.de"


class TestJoinUrls:
    @pytest.mark.parametrize(
        "path,expected",
        [
            ("/foo/bar", "https://www.ahaan-thai.de/foo/bar"),
            ("foo", "https://www.ahaan-thai.de/foo"),
            ("https://x.de/a", "https://x.de/a"),
            ("http://x.de/a", "http://x.de/a"),
        ],
    )
    def test_join_site_url(self, path, expected):
        assert join_site_url(SITE, path) == expected

    def test_join_image_url_no_double_slash(self):
        assert join_image_url("https://bilder.koch-reis.de/", "baz.jpg") == "https://bilder.koch-reis.de/baz.jpg"
        assert join_image_url("https://bilder.koch-reis.de/", "/baz.jpg") == "https://bilder.koch-reis.de/baz.jpg"

    def test_join_is_idempotent(self):
        once = join_site_url(SITE, "/foo")
        assert join_site_url(SITE, once) == once
        image = join_image_url("https://bilder.koch-reis.de/", "a.jpg")
        assert join_image_url("https://bilder.koch-reis.de/", image) == image


class TestTrailingSlash:
    @pytest.mark.parametrize(
        "url,expected",
        [
            ("https://a.de/x", "https://a.de/x/"),
            ("https://a.de/x/", "https://a.de/x/"),
            ("https://a.de/x#top", "https://a.de/x#top"),
            ("https://a.de/x?p=1", "https://a.de/x?p=1"),
        ],
    )
    def test_ensure_trailing_slash(self, url, expected):
        assert ensure_trailing_slash(url) == expected


class TestTranslationMarker:
    @pytest.mark.parametrize(
        "url,lang,expected",
        [
            ("https://site.th/page?trans=TH-DE", "de", "https://site.th/page"),
            ("https://site.th/page?trans=TH-DE&x=1", "de", "https://site.th/page?x=1"),
            ("https://site.th/page?x=1&trans=TH-EN", "en", "https://site.th/page?x=1"),
        ],
    )
    def test_strip_translation_marker(self, url, lang, expected):
        assert strip_translation_marker(url, lang) == expected

    def test_build_translate_url_encodes_target(self):
        url = build_translate_url("https://site.th/page?x=1", "de")
        parsed = urlparse(url)
        params = parse_qs(parsed.query)

        assert url.startswith("https://translate.google.com/translate?sl=th&tl=de")
        assert params["tl"] == ["de"]
        assert params["hl"] == ["de"]
        assert params["u"] == ["https://site.th/page?x=1"]
        assert "https%3A%2F%2Fsite.th%2Fpage%3Fx%3D1" in url


class TestTransformLink:
    """링크 종류별 우선순위 규칙"""

    def test_translation_marker_wraps_in_google_translate(self):
        result = transform_link("https://site.th/page?trans=TH-DE", SITE)
        params = parse_qs(urlparse(result).query)

        assert result.startswith("https://translate.google.com/translate")
        assert params["tl"] == ["de"]
        assert params["u"] == ["https://site.th/page"]
        assert "trans" not in params["u"][0]

    def test_absolute_url_unchanged(self):
        assert transform_link("https://example.com/a", SITE) == "https://example.com/a"

    def test_reiskoch(self):
        assert transform_link("/reiskoch/rezept", SITE) == "https://www.der-reiskoch.de/rezept"

    def test_pdf(self):
        assert transform_link("/aa-pdf/curry.pdf", SITE) == f"{SITE}/pdf/andreas-ayasse/curry.pdf"

    def test_youtube(self):
        assert transform_link("/youtube/abc123", SITE) == "https://www.youtube.com/watch?v=abc123"

    def test_internal_fallback(self):
        assert transform_link("/lexikon/pad-thai", SITE) == f"{SITE}/lexikon/pad-thai"
        assert transform_link("lexikon/pad-thai", SITE) == f"{SITE}/lexikon/pad-thai"

    @pytest.mark.parametrize(
        "link",
        [
            "https://site.th/page?trans=TH-EN",
            "/reiskoch/a",
            "/aa-pdf/b.pdf",
            "/youtube/xyz",
            "/lexikon/c",
        ],
    )
    def test_idempotent(self, link):
        once = transform_link(link, SITE)
        assert transform_link(once, SITE) == once
