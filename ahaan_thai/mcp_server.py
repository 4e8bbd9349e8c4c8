"""Ahaan Thai MCP 서버 (stdio)

AI 어시스턴트용 도구 22개와 리소스 3개를 노출합니다.
도구 결과는 JSON 텍스트(indent=2, 비ASCII 유지)이며, 도메인 예외는 isError 결과로 전달됩니다.
"""
import asyncio
import json
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

import mcp.server.stdio
from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.types import Resource, TextContent, Tool

from ahaan_thai import __version__
from ahaan_thai.clients import shutdown_shared_http_client
from ahaan_thai.core.config import settings
from ahaan_thai.core.exceptions import (
    AhaanThaiException,
    NotFoundException,
    TermNotFoundException,
    ValidationException,
)
from ahaan_thai.core.logging import logger
from ahaan_thai.services import ServiceRegistry, create_services
from ahaan_thai.services.impl.encyclopedia_service import DEFAULT_LIST_LIMIT, DEFAULT_SEARCH_LIMIT

SERVER_NAME = "ahaan-thai"

Handler = Callable[[dict[str, Any]], Awaitable[Any]]


@dataclass
class ToolSpec:
    name: str
    title: str
    description: str
    properties: dict[str, Any]
    required: tuple[str, ...]
    handler: Handler

    def to_tool(self) -> Tool:
        return Tool(
            name=self.name,
            title=self.title,
            description=self.description,
            inputSchema={
                "type": "object",
                "properties": self.properties,
                "required": list(self.required),
            },
        )


def _string(description: str) -> dict[str, str]:
    return {"type": "string", "description": description}


def _limit(default: int) -> dict[str, Any]:
    return {
        "type": "integer",
        "minimum": 1,
        "description": f"Maximum number of results (default: {default})",
    }


def _dumps(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


class AhaanThaiMCP:
    def __init__(self, services: Optional[ServiceRegistry] = None):
        self.services = services or create_services()
        self.server = Server(SERVER_NAME, version=__version__)
        self.tools: dict[str, ToolSpec] = {spec.name: spec for spec in self._tool_specs()}
        self.resources: dict[str, tuple[Resource, Callable[[], Awaitable[Any]]]] = {
            res.uri_str: (res.resource, res.reader) for res in self._resource_specs()
        }
        self._register_handlers()

    # ------------------------------------------------------------------
    # Tools
    # ------------------------------------------------------------------

    def _tool_specs(self) -> list[ToolSpec]:
        s = self.services
        return [
            # 사전
            ToolSpec(
                "search_dictionary",
                "Search Thai Food Dictionary",
                "Search for Thai food terms across all categories or within a specific category",
                {
                    "query": _string("Search term (Thai, English, or German)"),
                    "category": _string("Optional category to search within"),
                },
                ("query",),
                lambda a: s.dictionary.search(a["query"], a.get("category")),
            ),
            ToolSpec(
                "get_dictionary_category",
                "Get Dictionary Category",
                "Get all items in a specific dictionary category",
                {"category": _string('Category name (e.g., "curries", "soups")')},
                ("category",),
                lambda a: s.dictionary.get_category(a["category"]),
            ),
            ToolSpec(
                "translate_thai_word",
                "Translate Thai Word",
                "Translate a Thai word to English and German",
                {"word": _string("Thai word to translate")},
                ("word",),
                self._translate_word,
            ),
            ToolSpec(
                "list_dictionary_categories",
                "List Dictionary Categories",
                "List all available dictionary categories",
                {},
                (),
                lambda a: s.dictionary.list_categories(),
            ),
            # 요리책 정보
            ToolSpec(
                "list_cookbooks",
                "List Thai Cookbooks",
                "List all Thai cookbooks in the collection",
                {},
                (),
                lambda a: s.books.list_books(),
            ),
            ToolSpec(
                "search_cookbooks",
                "Search Cookbooks",
                "Search cookbooks by various criteria",
                {
                    "query": _string("Search query"),
                    "language": _string("Language code (de, en, th)"),
                    "level": _string("Difficulty level"),
                    "author": _string("Author name"),
                    "year": _string("Publication year"),
                    "publisher": _string("Publisher name"),
                },
                (),
                lambda a: s.books.search_books(
                    query=a.get("query"),
                    language=a.get("language"),
                    level=a.get("level"),
                    author=a.get("author"),
                    year=a.get("year"),
                    publisher=a.get("publisher"),
                ),
            ),
            ToolSpec(
                "get_cookbook_by_isbn",
                "Get Cookbook by ISBN",
                "Get detailed information about a cookbook by its ISBN",
                {"isbn": _string("ISBN of the cookbook")},
                ("isbn",),
                lambda a: s.books.get_book_by_isbn(a["isbn"]),
            ),
            ToolSpec(
                "get_cookbooks_by_author",
                "Get Cookbooks by Author",
                "Get all cookbooks by a specific author",
                {"author": _string("Author name")},
                ("author",),
                lambda a: s.books.get_books_by_author(a["author"]),
            ),
            ToolSpec(
                "get_cookbooks_by_language",
                "Get Cookbooks by Language",
                "Get all cookbooks in a specific language",
                {"language": _string("Language code (de, en, th)")},
                ("language",),
                lambda a: s.books.get_books_by_language(a["language"]),
            ),
            ToolSpec(
                "get_cookbook_statistics",
                "Get Cookbook Statistics",
                "Get statistics about the cookbook collection",
                {},
                (),
                lambda a: s.books.get_statistics(),
            ),
            # 레시피 라이브러리
            ToolSpec(
                "list_library_cookbooks",
                "List Library Cookbooks",
                "List all cookbooks with recipes in the library",
                {},
                (),
                lambda a: s.library.list_cookbooks(),
            ),
            ToolSpec(
                "get_cookbook_recipes",
                "Get Cookbook Recipes",
                "Get all recipes from a specific cookbook",
                {"cookbook": _string("Cookbook name")},
                ("cookbook",),
                lambda a: s.library.get_cookbook_recipes(a["cookbook"]),
            ),
            ToolSpec(
                "search_recipes",
                "Search Recipes",
                "Search recipes by query, region, or cookbook",
                {
                    "query": _string("Search query"),
                    "region": _string("Thai region"),
                    "cookbook": _string("Cookbook name"),
                },
                (),
                lambda a: s.library.search_recipes(
                    query=a.get("query"),
                    region=a.get("region"),
                    cookbook=a.get("cookbook"),
                ),
            ),
            ToolSpec(
                "get_recipe",
                "Get Recipe Details",
                "Get detailed information about a specific recipe",
                {
                    "cookbook": _string("Cookbook name"),
                    "recipe_key": _string("Recipe key/ID"),
                },
                ("cookbook", "recipe_key"),
                lambda a: s.library.get_recipe(a["cookbook"], a["recipe_key"]),
            ),
            ToolSpec(
                "get_recipes_by_region",
                "Get Recipes by Region",
                "Get all recipes from a specific Thai region",
                {"region": _string("Thai region (central, north, isaan, south)")},
                ("region",),
                lambda a: s.library.get_recipes_by_region(a["region"]),
            ),
            ToolSpec(
                "get_library_statistics",
                "Get Library Statistics",
                "Get statistics about the recipe library",
                {},
                (),
                lambda a: s.library.get_statistics(),
            ),
            # 백과사전
            ToolSpec(
                "search_encyclopedia",
                "Search Encyclopedia",
                "Search the Thai food encyclopedia",
                {"query": _string("Search query"), "limit": _limit(DEFAULT_SEARCH_LIMIT)},
                ("query",),
                lambda a: s.encyclopedia.search_entries(
                    a["query"], limit=a.get("limit") or DEFAULT_SEARCH_LIMIT
                ),
            ),
            ToolSpec(
                "get_encyclopedia_by_region",
                "Get Encyclopedia Entries by Region",
                "Get encyclopedia entries from a specific Thai region",
                {"region": _string("Thai region"), "limit": _limit(DEFAULT_SEARCH_LIMIT)},
                ("region",),
                lambda a: s.encyclopedia.get_entries_by_region(
                    a["region"], limit=a.get("limit") or DEFAULT_SEARCH_LIMIT
                ),
            ),
            ToolSpec(
                "get_encyclopedia_by_tag",
                "Get Encyclopedia Entries by Tag",
                "Get encyclopedia entries with a specific tag",
                {"tag": _string("Tag name"), "limit": _limit(DEFAULT_SEARCH_LIMIT)},
                ("tag",),
                lambda a: s.encyclopedia.get_entries_by_tag(
                    a["tag"], limit=a.get("limit") or DEFAULT_SEARCH_LIMIT
                ),
            ),
            ToolSpec(
                "get_all_encyclopedia_entries",
                "Get All Encyclopedia Entries",
                "Get all encyclopedia entries (up to limit)",
                {"limit": _limit(DEFAULT_LIST_LIMIT)},
                (),
                lambda a: s.encyclopedia.get_all_entries(limit=a.get("limit") or DEFAULT_LIST_LIMIT),
            ),
            ToolSpec(
                "list_thai_regions",
                "List Thai Regions",
                "List all Thai regions with their details",
                {},
                (),
                self._list_regions,
            ),
            ToolSpec(
                "list_relationship_types",
                "List Relationship Types",
                "List all encyclopedia relationship types",
                {},
                (),
                self._list_relationships,
            ),
        ]

    async def _translate_word(self, args: dict[str, Any]) -> dict[str, Any]:
        word = args["word"]
        result = await self.services.dictionary.translate_word(word)
        if result is None:
            suggestions = await self.services.dictionary.suggest_terms(
                word, limit=settings.suggestion_limit
            )
            raise TermNotFoundException(word, [s["thai"] for s in suggestions])
        return result

    async def _list_regions(self, args: dict[str, Any]) -> dict[str, Any]:
        return self.services.encyclopedia.list_regions()

    async def _list_relationships(self, args: dict[str, Any]) -> dict[str, Any]:
        return self.services.encyclopedia.list_relationships()

    async def dispatch(self, name: str, arguments: Optional[dict[str, Any]] = None) -> Any:
        """
        도구 실행 (전송 계층과 무관하게 테스트 가능)

        Raises:
            ValidationException: 알 수 없는 도구 또는 필수 인자 누락
            AhaanThaiException: 도메인 예외 (조회 실패, fetch 실패)
        """
        spec = self.tools.get(name)
        if spec is None:
            raise ValidationException("name", f"Unknown tool: {name}")

        args = dict(arguments or {})
        missing = [field for field in spec.required if args.get(field) in (None, "")]
        if missing:
            raise ValidationException(missing[0], "required argument is missing")

        return await spec.handler(args)

    # ------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------

    def _resource_specs(self) -> list["_ResourceSpec"]:
        s = self.services
        return [
            _ResourceSpec(
                Resource(
                    uri="thai-food://dictionary/full",
                    name="Complete Thai Food Dictionary",
                    description="The complete Thai food dictionary data from ahaan-thai.de",
                    mimeType="application/json",
                ),
                s.dictionary.full_dictionary,
            ),
            _ResourceSpec(
                Resource(
                    uri="thai-food://categories/list",
                    name="Thai Food Categories",
                    description="List of all available categories in the dictionary",
                    mimeType="application/json",
                ),
                s.dictionary.list_categories,
            ),
            _ResourceSpec(
                Resource(
                    uri="encyclopedia://entries",
                    name="Thai Food Encyclopedia",
                    description="All entries of the Thai food encyclopedia",
                    mimeType="application/json",
                ),
                lambda: s.encyclopedia.get_all_entries(limit=None),
            ),
        ]

    async def read(self, uri: str) -> str:
        entry = self.resources.get(uri)
        if entry is None:
            raise NotFoundException(f"Unknown resource: {uri}", "RESOURCE_NOT_FOUND", {"uri": uri})
        _, reader = entry
        return _dumps(await reader())

    # ------------------------------------------------------------------
    # MCP handlers
    # ------------------------------------------------------------------

    def _register_handlers(self):
        @self.server.list_tools()
        async def list_tools() -> list[Tool]:
            return [spec.to_tool() for spec in self.tools.values()]

        @self.server.call_tool()
        async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
            logger.info(f"[MCP] call_tool {name}")
            try:
                result = await self.dispatch(name, arguments)
            except AhaanThaiException as e:
                # SDK가 isError 결과로 변환
                logger.warning(f"[MCP] {name} failed: {e.error_code}")
                raise
            return [TextContent(type="text", text=_dumps(result))]

        @self.server.list_resources()
        async def list_resources() -> list[Resource]:
            return [resource for resource, _ in self.resources.values()]

        @self.server.read_resource()
        async def read_resource(uri) -> list[ReadResourceContents]:
            uri_str = str(uri)
            logger.info(f"[MCP] read_resource {uri_str}")
            text = await self.read(uri_str)
            return [ReadResourceContents(content=text, mime_type="application/json")]

    async def run(self):
        """Run the MCP server over stdio."""
        try:
            async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
                await self.server.run(read_stream, write_stream, self.server.create_initialization_options())
        finally:
            await shutdown_shared_http_client()


@dataclass
class _ResourceSpec:
    resource: Resource
    reader: Callable[[], Awaitable[Any]]

    @property
    def uri_str(self) -> str:
        return str(self.resource.uri)


def main() -> None:
    logger.info(f"Starting {SERVER_NAME} MCP server v{__version__}")
    asyncio.run(AhaanThaiMCP().run())


if __name__ == "__main__":
    main()
