"""데이터셋 변환기 테스트"""
import copy

import pytest

from ahaan_thai.core.config import Settings
from ahaan_thai.core.exceptions import DatasetShapeException
from ahaan_thai.schemas import Book, DictionaryEntry, EncyclopediaEntry, Recipe
from ahaan_thai.transform import (
    BookTransformer,
    DictionaryTransformer,
    EncyclopediaTransformer,
    LibraryTransformer,
    process_book,
    process_entry,
    process_recipe,
)
from fixtures import BOOKS_RAW, DICTIONARY_RAW, ENCYCLOPEDIA_RAW, LIBRARY_RAW

SITE = "https://www.ahaan-thai.de"
RECIPE_IMAGES = "https://bilder.koch-reis.de/"
LEXICON_IMAGES = "https://bilder.koch-reis.de/media/"


@pytest.fixture
def cfg() -> Settings:
    return Settings()


class TestDictionaryTransformer:
    def test_valid_dataset(self, cfg):
        data = DictionaryTransformer(cfg.domain_config("dictionary")).transform(copy.deepcopy(DICTIONARY_RAW))
        entry = data["gemuese"]["มะเขือ"]
        assert isinstance(entry, DictionaryEntry)
        assert entry.meaning_de == "Aubergine"

    def test_top_level_must_be_object(self, cfg):
        with pytest.raises(DatasetShapeException):
            DictionaryTransformer(cfg.domain_config("dictionary")).transform([])

    def test_category_must_be_object(self, cfg):
        with pytest.raises(DatasetShapeException):
            DictionaryTransformer(cfg.domain_config("dictionary")).transform({"gemuese": ["x"]})

    def test_missing_translation_field(self, cfg):
        raw = {"gemuese": {"มะเขือ": {"meaning_de": "Aubergine"}}}
        with pytest.raises(DatasetShapeException) as exc_info:
            DictionaryTransformer(cfg.domain_config("dictionary")).transform(raw)
        assert exc_info.value.error_code == "INVALID_DATASET"


class TestBookTransformer:
    def test_amazon_affiliate_url(self):
        result = process_book({"shop": "amazon", "target": "3abc"}, "https://amzn.to/")
        assert result == {"shop": "amazon", "url": "https://amzn.to/3abc"}

    def test_blank_target_is_left_alone(self):
        book = {"shop": "amazon", "target": "  "}
        assert process_book(book, "https://amzn.to/") == book

    def test_other_shop_is_left_alone(self):
        book = {"shop": "bookshop", "target": "abc"}
        assert process_book(book, "https://amzn.to/") == book

    def test_transform_dataset(self, cfg):
        raw = copy.deepcopy(BOOKS_RAW)
        books = BookTransformer(cfg.domain_config("books")).transform(raw)

        assert all(isinstance(b, Book) for b in books)
        assert books[0].url == "https://amzn.to/3abcDEF"
        assert books[0].target is None
        assert books[1].url is None
        # 원본은 변경하지 않음
        assert raw == BOOKS_RAW

    def test_unexpected_value_types_are_kept(self, cfg):
        raw = [{"title": 1984, "level": 2.5, "author": ["A", "B"], "shop": "amazon", "target": 42}]
        books = BookTransformer(cfg.domain_config("books")).transform(raw)

        assert books[0].to_dict() == raw[0]

    def test_top_level_must_be_array(self, cfg):
        with pytest.raises(DatasetShapeException):
            BookTransformer(cfg.domain_config("books")).transform({"title": "x"})


class TestLibraryTransformer:
    def test_recipe_url_rewrite(self):
        result = process_recipe({"url_de": "/foo/bar", "imageUrl": "baz.jpg"}, SITE, RECIPE_IMAGES)
        assert result["url_de"] == f"{SITE}/foo/bar"
        assert result["imageUrl"] == "https://bilder.koch-reis.de/baz.jpg"

    def test_leading_slash_image(self):
        result = process_recipe({"imageUrl": "/a/b.jpg"}, SITE, RECIPE_IMAGES)
        assert result["imageUrl"] == "https://bilder.koch-reis.de/a/b.jpg"

    def test_absolute_urls_unchanged(self):
        recipe = {"url_en": "https://x.de/r", "imageUrl": "http://img.de/r.jpg"}
        assert process_recipe(recipe, SITE, RECIPE_IMAGES) == recipe

    def test_array_cookbook_keyed_by_index(self, cfg):
        data = LibraryTransformer(cfg.domain_config("library")).transform(copy.deepcopy(LIBRARY_RAW))

        assert list(data["andreas_ayasse"].keys()) == ["0", "1"]
        recipe = data["andreas_ayasse"]["0"]
        assert isinstance(recipe, Recipe)
        assert recipe.image_url == "https://bilder.koch-reis.de/curry.jpg"

    def test_transform_is_idempotent(self, cfg):
        transformer = LibraryTransformer(cfg.domain_config("library"))
        once = transformer.transform(copy.deepcopy(LIBRARY_RAW))
        as_raw = {name: {k: r.to_dict() for k, r in recipes.items()} for name, recipes in once.items()}
        twice = transformer.transform(copy.deepcopy(as_raw))
        assert {n: {k: r.to_dict() for k, r in rs.items()} for n, rs in twice.items()} == as_raw


class TestEncyclopediaTransformer:
    def test_translate_link_scenario(self):
        entry = {"de": {"url": "https://site.th/page?trans=TH-DE"}}
        result = process_entry(entry, SITE, LEXICON_IMAGES)
        url = result["de"]["url"]

        assert url.startswith("https://translate.google.com/translate?sl=th&tl=de")
        assert "u=https%3A%2F%2Fsite.th%2Fpage" in url
        assert "trans%3DTH-DE" not in url

    def test_relationship_links_get_trailing_slash(self):
        entry = {
            "de": {
                "uses": ["/lexikon/kokosmilch", "/lexikon/basilikum/"],
                "variationOf": "/lexikon/kaeng#geschichte",
                "usedBy": "/aa-pdf/massaman.pdf",
            }
        }
        de = process_entry(entry, SITE, LEXICON_IMAGES)["de"]

        assert de["uses"] == [f"{SITE}/lexikon/kokosmilch/", f"{SITE}/lexikon/basilikum/"]
        assert de["variationOf"] == f"{SITE}/lexikon/kaeng#geschichte"
        assert de["usedBy"] == f"{SITE}/pdf/andreas-ayasse/massaman.pdf/"

    def test_recipe_links_without_trailing_slash(self):
        entry = {"en": {"recipes": ["/rezepte/a", "/reiskoch/b", "/youtube/xyz"]}}
        en = process_entry(entry, SITE, LEXICON_IMAGES)["en"]
        assert en["recipes"] == [
            f"{SITE}/rezepte/a",
            "https://www.der-reiskoch.de/b",
            "https://www.youtube.com/watch?v=xyz",
        ]

    def test_image_url(self):
        result = process_entry({"imageUrl": "/curry/green.jpg"}, SITE, LEXICON_IMAGES)
        assert result["imageUrl"] == "https://bilder.koch-reis.de/media/curry/green.jpg"

    def test_entry_without_locales(self):
        assert process_entry({"thaiName": "x"}, SITE, LEXICON_IMAGES) == {"thaiName": "x"}

    def test_transform_dataset(self, cfg):
        raw = copy.deepcopy(ENCYCLOPEDIA_RAW)
        entries = EncyclopediaTransformer(cfg.domain_config("encyclopedia")).transform(raw)

        assert all(isinstance(e, EncyclopediaEntry) for e in entries)
        first = entries[0]
        assert first.thai_name == "แกงเขียวหวาน"
        assert first.de.url == f"{SITE}/lexikon/kaeng-khiao-wan/"
        assert first.en.url.startswith("https://translate.google.com/translate?sl=th&tl=en")
        assert raw == ENCYCLOPEDIA_RAW

    def test_transform_is_idempotent(self, cfg):
        transformer = EncyclopediaTransformer(cfg.domain_config("encyclopedia"))
        once = [e.to_dict() for e in transformer.transform(copy.deepcopy(ENCYCLOPEDIA_RAW))]
        twice = [e.to_dict() for e in transformer.transform(copy.deepcopy(once))]
        assert twice == once
