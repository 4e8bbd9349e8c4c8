"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional, Sequence


# 기본 예외 클래스
class AhaanThaiException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """어댑터(HTTP/MCP) 응답용 직렬화"""
        return {
            "error": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


# 원격 데이터셋 fetch 관련 예외
class FetchException(AhaanThaiException):
    """데이터셋 fetch 실패의 기본 클래스 (재시도 없음)"""
    def __init__(self, message: str, error_code: str = "FETCH_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "FETCH_ERROR", details)


class TransportException(FetchException):
    """네트워크/DNS/TLS/타임아웃 등 전송 계층 실패"""
    def __init__(self, url: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Request to {url} failed: {reason}"
        super().__init__(message, "NETWORK_ERROR", details or {"url": url, "reason": reason})


class HttpStatusException(FetchException):
    """2xx가 아닌 응답"""
    def __init__(self, url: str, status_code: int, reason: str = "", details: Optional[dict[str, Any]] = None):
        message = f"HTTP {status_code}: {reason}".rstrip(": ")
        super().__init__(message, "HTTP_STATUS_ERROR",
                        details or {"url": url, "status_code": status_code})
        self.status_code = status_code


class ContentTypeException(FetchException):
    """JSON이 아닌 Content-Type"""
    def __init__(self, url: str, content_type: str, details: Optional[dict[str, Any]] = None):
        message = f"Expected JSON from {url}, got content-type '{content_type or 'none'}'"
        super().__init__(message, "INVALID_CONTENT_TYPE",
                        details or {"url": url, "content_type": content_type})


class JsonParseException(FetchException):
    """응답 본문 JSON 파싱 실패"""
    def __init__(self, url: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Failed to parse JSON from {url}: {reason}"
        super().__init__(message, "JSON_PARSE_ERROR", details or {"url": url, "reason": reason})


class DatasetShapeException(FetchException):
    """데이터셋 구조가 기대와 다름"""
    def __init__(self, dataset: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Invalid data structure received for {dataset}: {reason}"
        super().__init__(message, "INVALID_DATASET", details or {"dataset": dataset, "reason": reason})


# 조회 실패 (키 없음)
class NotFoundException(AhaanThaiException):
    """요청한 키에 해당하는 레코드가 없음"""
    def __init__(
        self,
        message: str,
        error_code: str = "NOT_FOUND",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, error_code or "NOT_FOUND", details)


class CategoryNotFoundException(NotFoundException):
    """사전 카테고리 없음"""
    def __init__(self, category: str, available: Sequence[str]):
        message = f'Category "{category}" not found. Available: {", ".join(available)}'
        super().__init__(message, "CATEGORY_NOT_FOUND",
                        {"category": category, "available": list(available)})


class TermNotFoundException(NotFoundException):
    """사전에 없는 태국어 단어 (유사어 제안 포함)"""
    def __init__(self, term: str, suggestions: Optional[Sequence[str]] = None):
        message = f'Thai word "{term}" not found in dictionary'
        if suggestions:
            message += f". Did you mean: {', '.join(suggestions)}?"
        super().__init__(message, "TERM_NOT_FOUND",
                        {"term": term, "suggestions": list(suggestions or [])})


class BookNotFoundException(NotFoundException):
    """ISBN으로 책을 찾을 수 없음"""
    def __init__(self, isbn: str):
        super().__init__(f"No book found with ISBN: {isbn}", "BOOK_NOT_FOUND", {"isbn": isbn})


class AuthorNotFoundException(NotFoundException):
    """저자의 책이 없음"""
    def __init__(self, author: str):
        super().__init__(f"No books found for author: {author}", "AUTHOR_NOT_FOUND", {"author": author})


class LanguageNotFoundException(NotFoundException):
    """해당 언어의 책이 없음"""
    def __init__(self, language: str):
        super().__init__(f"No books found for language: {language}", "LANGUAGE_NOT_FOUND",
                        {"language": language})


class CookbookNotFoundException(NotFoundException):
    """레시피 라이브러리에 요리책 없음"""
    def __init__(self, cookbook: str, available: Optional[Sequence[str]] = None):
        message = f'Cookbook "{cookbook}" not found'
        if available is not None:
            message += f". Available: {', '.join(available)}"
        super().__init__(message, "COOKBOOK_NOT_FOUND",
                        {"cookbook": cookbook, "available": list(available or [])})


class RecipeNotFoundException(NotFoundException):
    """요리책 안에 레시피 키 없음"""
    def __init__(self, cookbook: str, recipe_key: str):
        message = f'Recipe "{recipe_key}" not found in cookbook "{cookbook}"'
        super().__init__(message, "RECIPE_NOT_FOUND",
                        {"cookbook": cookbook, "recipe_key": recipe_key})


# 유효성 검증 관련 예외 (어댑터 레이어 전용)
class ValidationException(AhaanThaiException):
    """유효성 검증 예외"""
    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Validation failed for '{field}': {reason}"
        super().__init__(message, "VALIDATION_ERROR",
                        details or {"field": field, "reason": reason})
