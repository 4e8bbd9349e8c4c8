"""예외 계층 및 메시지 테스트"""
from ahaan_thai.core.exceptions import (
    AhaanThaiException,
    CategoryNotFoundException,
    CookbookNotFoundException,
    DatasetShapeException,
    FetchException,
    HttpStatusException,
    NotFoundException,
    TermNotFoundException,
    ValidationException,
)


class TestExceptionHierarchy:
    def test_fetch_errors_share_base(self):
        err = HttpStatusException("https://x.de/a.json", 500, "Internal Server Error")
        assert isinstance(err, FetchException)
        assert isinstance(err, AhaanThaiException)
        assert str(err) == "[HTTP_STATUS_ERROR] HTTP 500: Internal Server Error"

    def test_status_without_reason(self):
        assert HttpStatusException("https://x.de", 404).message == "HTTP 404"

    def test_not_found_family(self):
        err = CategoryNotFoundException("desserts", ["gemuese", "suppen"])
        assert isinstance(err, NotFoundException)
        assert err.details == {"category": "desserts", "available": ["gemuese", "suppen"]}

    def test_term_not_found_with_suggestions(self):
        err = TermNotFoundException("แกง", ["แกงแดง", "แกงป่า"])
        assert err.message == 'Thai word "แกง" not found in dictionary. Did you mean: แกงแดง, แกงป่า?'
        assert TermNotFoundException("x").message == 'Thai word "x" not found in dictionary'

    def test_cookbook_not_found_without_available(self):
        assert CookbookNotFoundException("x").message == 'Cookbook "x" not found'

    def test_to_dict(self):
        err = DatasetShapeException("books", "expected list, got dict")
        assert err.to_dict() == {
            "error": "Invalid data structure received for books: expected list, got dict",
            "error_code": "INVALID_DATASET",
            "details": {"dataset": "books", "reason": "expected list, got dict"},
        }

    def test_validation_exception(self):
        err = ValidationException("query", "required argument is missing")
        assert err.error_code == "VALIDATION_ERROR"
        assert err.details["field"] == "query"
