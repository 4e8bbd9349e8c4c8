"""URL 정규화 유틸리티

상대 경로/내부 prefix 링크를 절대 URL로 바꾸는 규칙 모음입니다.
모든 함수는 이미 절대 URL인 값은 그대로 돌려주므로 여러 번 적용해도 결과가 같습니다.
"""
import re
from urllib.parse import quote

REISKOCH_PREFIX = "/reiskoch/"
REISKOCH_BASE_URL = "https://www.der-reiskoch.de/"
PDF_PREFIX = "/aa-pdf/"
PDF_SUBPATH = "/pdf/andreas-ayasse/"
YOUTUBE_PREFIX = "/youtube/"
YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v="
GOOGLE_TRANSLATE_URL = "https://translate.google.com/translate"

_TRANSLATION_MARKER = re.compile(r"trans=TH-(DE|EN)")


def is_absolute_url(value: str) -> bool:
    return value.startswith(("http://", "https://"))


def join_site_url(base_url: str, path: str) -> str:
    """
    사이트 base에 상대 경로를 붙입니다. "/"는 경로에 없을 때만 삽입.

    Examples:
        >>> join_site_url("https://www.ahaan-thai.de", "/foo/bar")
        'https://www.ahaan-thai.de/foo/bar'
        >>> join_site_url("https://www.ahaan-thai.de", "foo")
        'https://www.ahaan-thai.de/foo'
        >>> join_site_url("https://www.ahaan-thai.de", "https://x.de/a")
        'https://x.de/a'
    """
    if path.startswith("http"):
        return path
    return base_url + ("" if path.startswith("/") else "/") + path


def join_image_url(image_base_url: str, path: str) -> str:
    """이미지 base에 상대 경로를 붙입니다. 선행 "/" 하나를 제거해 이중 슬래시를 막습니다.

    Examples:
        >>> join_image_url("https://bilder.koch-reis.de/", "/a/b.jpg")
        'https://bilder.koch-reis.de/a/b.jpg'
    """
    if path.startswith("http"):
        return path
    return image_base_url + (path[1:] if path.startswith("/") else path)


def ensure_trailing_slash(url: str) -> str:
    """fragment(#)나 query(?)가 없는 URL은 "/"로 끝나도록 맞춥니다."""
    if "#" in url or "?" in url:
        return url
    return url if url.endswith("/") else url + "/"


def strip_translation_marker(url: str, lang: str) -> str:
    """query string에서 trans=TH-DE / trans=TH-EN 마커를 제거합니다."""
    param = f"trans=TH-{lang.upper()}"
    cleaned = re.sub(rf"\?{re.escape(param)}(&|$)", "?", url, count=1)
    cleaned = cleaned.replace(f"&{param}", "", 1)
    return re.sub(r"\?$", "", cleaned)


def build_translate_url(url: str, lang: str) -> str:
    """Google Translate 프록시 URL (태국어 → lang)"""
    # encodeURIComponent와 동일한 안전 문자 집합
    encoded = quote(url, safe="!~*'()")
    return (
        f"{GOOGLE_TRANSLATE_URL}?sl=th&tl={lang}&js=y&prev=_t&hl={lang}"
        f"&ie=UTF-8&u={encoded}"
    )


def transform_link(link: str, site_base_url: str) -> str:
    """
    백과사전 링크를 종류에 따라 절대 URL로 변환

    우선순위:
        1. 번역 마커가 있는 절대 URL -> Google Translate 프록시
        2. 절대 URL -> 그대로
        3. /reiskoch/... -> der-reiskoch.de
        4. /aa-pdf/... -> {site}/pdf/andreas-ayasse/...
        5. /youtube/<id> -> YouTube watch URL
        6. 그 외 -> {site}{link}
    """
    if is_absolute_url(link):
        if _TRANSLATION_MARKER.search(link):
            lang = "de" if "trans=TH-DE" in link else "en"
            return build_translate_url(strip_translation_marker(link, lang), lang)
        return link

    if link.startswith(REISKOCH_PREFIX):
        return REISKOCH_BASE_URL + link[len(REISKOCH_PREFIX):]

    if link.startswith(PDF_PREFIX):
        return site_base_url + PDF_SUBPATH + link[len(PDF_PREFIX):]

    if link.startswith(YOUTUBE_PREFIX):
        return YOUTUBE_WATCH_URL + link[len(YOUTUBE_PREFIX):]

    return join_site_url(site_base_url, link)
