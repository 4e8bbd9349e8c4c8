"""HTTP 클라이언트 및 JSON Fetcher - export only."""

from .http_client import HttpResponse, SharedHttpClient, get_shared_http_client, shutdown_shared_http_client
from .json_fetcher import JsonFetcher, is_json_content_type

__all__ = [
    "HttpResponse",
    "SharedHttpClient",
    "get_shared_http_client",
    "shutdown_shared_http_client",
    "JsonFetcher",
    "is_json_content_type",
]
